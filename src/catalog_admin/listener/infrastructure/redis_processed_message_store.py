"""Redis-backed processed-message store."""

import redis

from catalog_admin.exceptions import ProcessedMessageStoreError
from catalog_admin.listener.infrastructure.interfaces import ProcessedMessageStore
from catalog_admin.logging import setup_logging

logger = setup_logging()

KEY_PREFIX = "video-encoder:processed:"


class RedisProcessedMessageStore(ProcessedMessageStore):
    """Remembers handled idempotency keys in Redis with a TTL."""

    def __init__(self, client: redis.Redis, ttl_seconds: int):
        self._client = client
        self._ttl_seconds = ttl_seconds

    def is_processed(self, key: str) -> bool:
        try:
            return bool(self._client.exists(KEY_PREFIX + key))
        except redis.RedisError as e:
            logger.exception("Redis exists failed", extra={"key": key})
            raise ProcessedMessageStoreError(key, "read", cause=e) from e

    def mark_processed(self, key: str) -> None:
        try:
            self._client.set(KEY_PREFIX + key, "1", ex=self._ttl_seconds)
            logger.info(
                "Message marked processed", extra={"key": key, "ttl": self._ttl_seconds}
            )
        except redis.RedisError as e:
            logger.exception("Redis set failed", extra={"key": key})
            raise ProcessedMessageStoreError(key, "write", cause=e) from e
