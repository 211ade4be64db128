"""pika-backed broker for the encoder results queue."""

from pika.adapters.blocking_connection import BlockingChannel

from catalog_admin.config import QueueConfig, RabbitMQConfig
from catalog_admin.listener.infrastructure.interfaces import (
    MessageBroker,
    MessageCallback,
)
from catalog_admin.logging import setup_logging

logger = setup_logging()


class RabbitMQBroker(MessageBroker):
    """
    Consumes encoder results from a quorum queue on a blocking channel.

    Retries are left to the queue itself: a nack with requeue counts
    against ``x-delivery-limit``, and the dead-letter exchange receives
    whatever runs out of deliveries or is rejected without requeue.
    """

    def __init__(self, channel: BlockingChannel, config: RabbitMQConfig):
        if config.queue_config is None:
            raise ValueError("RabbitMQBroker needs a queue configuration")
        self._channel = channel
        self._exchange = config.exchange_name
        self._queue: QueueConfig = config.queue_config

    def acknowledge(self, delivery_tag: int) -> None:
        self._channel.basic_ack(delivery_tag=delivery_tag)

    def reject(self, delivery_tag: int, requeue: bool = True) -> None:
        self._channel.basic_nack(delivery_tag=delivery_tag, requeue=requeue)

    def consume(self, callback: MessageCallback) -> None:
        def on_message(ch, method, properties, body):
            callback(
                body,
                method.delivery_tag,
                getattr(properties, "headers", None),
                getattr(properties, "message_id", None),
            )

        # one unacked message at a time
        self._channel.basic_qos(prefetch_count=self._queue.prefetch_count)
        self._channel.basic_consume(
            queue=self._queue.name, on_message_callback=on_message
        )
        logger.info(
            "Waiting for encoder results",
            extra={"queue": self._queue.name, "prefetch": self._queue.prefetch_count},
        )
        self._channel.start_consuming()

    def setup(self) -> None:
        """Declares the dead-letter route, then the results queue bound to the exchange."""
        self._declare_dead_letter_route()

        self._channel.exchange_declare(
            exchange=self._exchange, exchange_type="direct", durable=True
        )
        self._channel.queue_declare(
            queue=self._queue.name,
            durable=True,
            arguments=self._queue.queue_arguments(),
        )
        self._channel.queue_bind(
            queue=self._queue.name,
            exchange=self._exchange,
            routing_key=self._queue.expected_routing_key,
        )

        logger.info(
            "Encoder results queue declared",
            extra={
                "queue": self._queue.name,
                "exchange": self._exchange,
                "delivery_limit": self._queue.max_delivery_count,
                "dlq": self._queue.dlq_name,
            },
        )

    def _declare_dead_letter_route(self) -> None:
        self._channel.exchange_declare(
            exchange=self._queue.dlq_exchange_name,
            exchange_type="direct",
            durable=True,
        )
        self._channel.queue_declare(queue=self._queue.dlq_name, durable=True)
        self._channel.queue_bind(
            queue=self._queue.dlq_name,
            exchange=self._queue.dlq_exchange_name,
            routing_key=self._queue.dlq_routing_key,
        )
