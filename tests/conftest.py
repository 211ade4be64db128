from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from catalog_admin import db_models  # noqa: F401
from catalog_admin.api.app import create_app
from catalog_admin.api.dependencies import get_db_session
from catalog_admin.config import QueueConfig, RabbitMQConfig
from catalog_admin.serialization import JsonSerializer


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session_factory(engine):
    @contextmanager
    def factory():
        with Session(engine, expire_on_commit=False) as session:
            yield session

    return factory


@pytest.fixture
def client(engine):
    app = create_app()

    def override_db_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def serializer():
    return JsonSerializer()


@pytest.fixture
def rabbitmq_config():
    return RabbitMQConfig(
        host="localhost",
        user="guest",
        password="guest",
        queue_config=QueueConfig(
            name="video.encoded.queue",
            expected_routing_key="video.encoded",
            dlq_name="video.encoded.dlq",
            dlq_routing_key="video.encoded.failed",
        ),
    )
