"""Infrastructure implementations."""

from catalog_admin.listener.infrastructure.rabbitmq_broker import RabbitMQBroker
from catalog_admin.listener.infrastructure.redis_processed_message_store import (
    RedisProcessedMessageStore,
)

__all__ = ["RabbitMQBroker", "RedisProcessedMessageStore"]
