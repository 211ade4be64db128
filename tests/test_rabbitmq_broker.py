from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from catalog_admin.listener.infrastructure import RabbitMQBroker


@pytest.fixture
def channel():
    return MagicMock()


@pytest.fixture
def broker(channel, rabbitmq_config):
    return RabbitMQBroker(channel, rabbitmq_config)


def test_setup_declares_queue_with_delivery_limit_and_dead_letter(broker, channel):
    broker.setup()

    channel.queue_declare.assert_any_call(queue="video.encoded.dlq", durable=True)
    channel.queue_declare.assert_any_call(
        queue="video.encoded.queue",
        durable=True,
        arguments={
            "x-queue-type": "quorum",
            "x-delivery-limit": 3,
            "x-dead-letter-exchange": "dead_letter_exchange",
            "x-dead-letter-routing-key": "video.encoded.failed",
        },
    )
    channel.queue_bind.assert_any_call(
        queue="video.encoded.queue",
        exchange="video.events",
        routing_key="video.encoded",
    )


def test_consume_passes_message_details_to_callback(broker, channel):
    received = []
    broker.consume(lambda *args: received.append(args))

    channel.basic_qos.assert_called_once_with(prefetch_count=1)
    on_message = channel.basic_consume.call_args.kwargs["on_message_callback"]
    on_message(
        channel,
        SimpleNamespace(delivery_tag=11),
        SimpleNamespace(headers={"x-delivery-count": 2}, message_id="msg-1"),
        b"{}",
    )

    assert received == [(b"{}", 11, {"x-delivery-count": 2}, "msg-1")]
    channel.start_consuming.assert_called_once()


def test_acknowledge_and_reject(broker, channel):
    broker.acknowledge(1)
    broker.reject(2, requeue=False)
    broker.reject(3)

    channel.basic_ack.assert_called_once_with(delivery_tag=1)
    channel.basic_nack.assert_any_call(delivery_tag=2, requeue=False)
    channel.basic_nack.assert_any_call(delivery_tag=3, requeue=True)
