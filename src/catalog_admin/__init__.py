from catalog_admin.config import (
    ApiConfig,
    AppConfig,
    DatabaseConfig,
    QueueConfig,
    RabbitMQConfig,
    RedisConfig,
)
from catalog_admin.exceptions import (
    DecodingError,
    DomainValidationError,
    NotFoundError,
    PersistenceError,
    ProcessedMessageStoreError,
)
from catalog_admin.logging import setup_logging

__all__ = [
    "setup_logging",
    "ApiConfig",
    "AppConfig",
    "DatabaseConfig",
    "QueueConfig",
    "RabbitMQConfig",
    "RedisConfig",
    "DecodingError",
    "DomainValidationError",
    "NotFoundError",
    "PersistenceError",
    "ProcessedMessageStoreError",
]
