"""Dependency injection configuration for the video encoder listener."""

from contextlib import contextmanager

import pika
import redis
from sqlmodel import Session, SQLModel, create_engine

from catalog_admin import db_models  # noqa: F401  registers tables
from catalog_admin.config import load_config
from catalog_admin.listener.infrastructure import (
    RabbitMQBroker,
    RedisProcessedMessageStore,
)
from catalog_admin.listener.repositories import VideoRepository
from catalog_admin.listener.use_cases import UpdateMediaStatusUseCase
from catalog_admin.listener.worker import VideoEncoderListener
from catalog_admin.logging import setup_logging
from catalog_admin.serialization import JsonSerializer

logger = setup_logging()

_config = load_config()

# PostgreSQL database
_db_engine = create_engine(_config.database.url, echo=_config.database.echo)
SQLModel.metadata.create_all(_db_engine)
logger.info("Database initialized", extra={"host": _config.database.host})


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(_db_engine, expire_on_commit=False) as session:
        yield session


_repository = VideoRepository(_session_factory)

# Redis processed-message store
_redis_client = redis.Redis(
    host=_config.redis.host,
    port=_config.redis.port,
    decode_responses=True,
)
if not _redis_client.ping():
    logger.error("Redis connection failed", extra={"host": _config.redis.host})
    raise ConnectionError("Redis connection failed")
_processed_store = RedisProcessedMessageStore(
    _redis_client, _config.redis.processed_message_ttl_seconds
)

# RabbitMQ broker
_credentials = pika.PlainCredentials(_config.rabbitmq.user, _config.rabbitmq.password)
_parameters = pika.ConnectionParameters(
    host=_config.rabbitmq.host,
    port=_config.rabbitmq.port,
    virtual_host=_config.rabbitmq.virtual_host,
    credentials=_credentials,
    heartbeat=0,
)
_rabbit_connection = pika.BlockingConnection(_parameters)
_rabbit_channel = _rabbit_connection.channel()
_broker = RabbitMQBroker(_rabbit_channel, _config.rabbitmq)
_broker.setup()

# Service composition
_serializer = JsonSerializer()
_use_case = UpdateMediaStatusUseCase(_repository)


def get_listener() -> VideoEncoderListener:
    """Returns the configured listener instance."""
    return VideoEncoderListener(
        _broker, _use_case, _serializer, _processed_store, _config.rabbitmq
    )
