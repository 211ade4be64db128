"""Settings for the admin API and the encoder listener, read from the environment."""

import os
from typing import Any

from pydantic import BaseModel, Field, computed_field

ENCODED_QUEUE = "video.encoded.queue"
ENCODED_ROUTING_KEY = "video.encoded"
ENCODED_DLQ = "video.encoded.dlq"
ENCODED_DLQ_ROUTING_KEY = "video.encoded.failed"


class DatabaseConfig(BaseModel, frozen=True):
    """PostgreSQL settings for the catalog tables."""

    host: str
    port: str
    user: str
    password: str
    database: str
    echo: bool = False

    @computed_field
    @property
    def url(self) -> str:
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class QueueConfig(BaseModel, frozen=True):
    """
    The queue encoder results arrive on and its dead-letter route.

    ``max_delivery_count`` is the quorum queue's delivery limit. A message
    redelivered past it is moved to ``dlq_name``.
    """

    name: str
    expected_routing_key: str
    dlq_name: str
    dlq_routing_key: str
    dlq_exchange_name: str = "dead_letter_exchange"
    queue_type: str = "quorum"
    max_delivery_count: int = Field(default=3, ge=1)
    prefetch_count: int = Field(default=1, ge=1)

    def queue_arguments(self) -> dict[str, Any]:
        return {
            "x-queue-type": self.queue_type,
            "x-delivery-limit": self.max_delivery_count,
            "x-dead-letter-exchange": self.dlq_exchange_name,
            "x-dead-letter-routing-key": self.dlq_routing_key,
        }


class RabbitMQConfig(BaseModel, frozen=True):
    host: str
    user: str
    password: str
    port: int = 5672
    virtual_host: str = "/"
    exchange_name: str = "video.events"
    queue_config: QueueConfig | None = None


class RedisConfig(BaseModel, frozen=True):
    """Where processed message keys are kept, and for how long."""

    host: str
    port: int = 6379
    processed_message_ttl_seconds: int = 7 * 24 * 60 * 60


class ApiConfig(BaseModel, frozen=True):
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel, frozen=True):
    database: DatabaseConfig
    rabbitmq: RabbitMQConfig
    redis: RedisConfig
    api: ApiConfig = ApiConfig()


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def load_config() -> AppConfig:
    """Builds the application settings from environment variables."""
    encoded_queue = QueueConfig(
        name=ENCODED_QUEUE,
        expected_routing_key=ENCODED_ROUTING_KEY,
        dlq_name=ENCODED_DLQ,
        dlq_routing_key=ENCODED_DLQ_ROUTING_KEY,
        max_delivery_count=_env_int("VIDEO_ENCODED_MAX_DELIVERY_COUNT", 3),
    )
    return AppConfig(
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "admin_catalog"),
            echo=os.getenv("POSTGRES_ECHO", "false").lower() == "true",
        ),
        rabbitmq=RabbitMQConfig(
            host=os.getenv("RABBITMQ_HOST", "rabbitmq"),
            port=_env_int("RABBITMQ_PORT", 5672),
            user=os.getenv("RABBITMQ_USER", ""),
            password=os.getenv("RABBITMQ_PASSWORD", ""),
            virtual_host=os.getenv("RABBITMQ_VHOST", "/"),
            queue_config=encoded_queue,
        ),
        redis=RedisConfig(
            host=os.getenv("REDIS_HOST", "redis"),
            port=_env_int("REDIS_PORT", 6379),
            processed_message_ttl_seconds=_env_int(
                "PROCESSED_MESSAGE_TTL_SECONDS", 7 * 24 * 60 * 60
            ),
        ),
        api=ApiConfig(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=_env_int("API_PORT", 8080),
        ),
    )
