"""Listener that consumes video encoder results and updates media status."""

from typing import Any

from catalog_admin.config import RabbitMQConfig
from catalog_admin.domain import to_update_command
from catalog_admin.exceptions import DecodingError, ProcessedMessageStoreError
from catalog_admin.listener.infrastructure.interfaces import (
    MessageBroker,
    ProcessedMessageStore,
)
from catalog_admin.listener.use_cases import UpdateMediaStatusUseCase
from catalog_admin.logging import setup_logging
from catalog_admin.serialization import JsonSerializer

logger = setup_logging()


class VideoEncoderListener:
    """Consumes encoder results from the queue and dispatches status updates."""

    def __init__(
        self,
        broker: MessageBroker,
        use_case: UpdateMediaStatusUseCase,
        serializer: JsonSerializer,
        processed_store: ProcessedMessageStore,
        config: RabbitMQConfig,
    ):
        self._broker = broker
        self._use_case = use_case
        self._serializer = serializer
        self._processed_store = processed_store
        self._config = config

    def start(self) -> None:
        """Blocks consuming encoder results until the connection closes."""
        logger.info("Listener initialized, starting message consumption")
        self._broker.consume(self._on_message)

    def process(self, body: bytes) -> None:
        """
        Decodes one encoder result and applies it to the matching video.

        Args:
            body: The raw UTF-8 JSON message body.

        Raises:
            DecodingError: If the body is not a known encoder result.
            NotFoundError: If the video or media slot does not exist.
            PersistenceError: If the video cannot be saved.
        """
        result = self._serializer.decode_encoder_result(body)
        command = to_update_command(result)

        logger.info(
            "Encoder result decoded",
            extra={
                "video_id": command.video_id,
                "resource_id": command.resource_id,
                "status": command.status.value,
            },
        )

        self._use_case.execute(command)

    def _on_message(
        self,
        body: bytes,
        delivery_tag: int,
        headers: dict[str, Any] | None,
        message_id: str | None,
    ) -> None:
        """Settles one delivery: ack on success or duplicate, nack otherwise."""
        delivery_count = headers.get("x-delivery-count", 0) + 1 if headers else 1
        # deduplicate on the publisher's message id only
        key = message_id or None

        logger.info(
            "Message received",
            extra={
                "idempotency_key": key,
                "attempt": delivery_count,
                "max_attempts": self._config.queue_config.max_delivery_count,
            },
        )

        try:
            if key and self._processed_store.is_processed(key):
                logger.info("Duplicate message skipped", extra={"idempotency_key": key})
                self._broker.acknowledge(delivery_tag)
                return

            self.process(body)
        except DecodingError:
            logger.exception("Invalid message format", extra={"idempotency_key": key})
            self._broker.reject(delivery_tag, requeue=False)
            return
        except Exception:
            logger.exception(
                "Encoder result not applied",
                extra={"idempotency_key": key, "attempt": delivery_count},
            )
            self._broker.reject(delivery_tag, requeue=True)
            return

        if key:
            self._record_processed(key)

        self._broker.acknowledge(delivery_tag)
        logger.info("Message processed successfully", extra={"idempotency_key": key})

    def _record_processed(self, key: str) -> None:
        try:
            self._processed_store.mark_processed(key)
        except ProcessedMessageStoreError:
            # the status is already persisted; a redelivery rewrites the same value
            logger.exception(
                "Could not record processed message", extra={"idempotency_key": key}
            )
