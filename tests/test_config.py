from catalog_admin.config import load_config


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_PORT", "5432")
    monkeypatch.setenv("POSTGRES_USER", "admin")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("POSTGRES_DB", "catalog")
    monkeypatch.setenv("VIDEO_ENCODED_MAX_DELIVERY_COUNT", "5")
    monkeypatch.setenv("REDIS_PORT", "6380")

    config = load_config()

    assert config.database.url == "postgresql+psycopg://admin:secret@db:5432/catalog"
    assert config.rabbitmq.queue_config.name == "video.encoded.queue"
    assert config.rabbitmq.queue_config.max_delivery_count == 5
    assert config.redis.port == 6380


def test_load_config_defaults(monkeypatch):
    monkeypatch.delenv("VIDEO_ENCODED_MAX_DELIVERY_COUNT", raising=False)
    monkeypatch.delenv("PROCESSED_MESSAGE_TTL_SECONDS", raising=False)

    config = load_config()

    assert config.rabbitmq.exchange_name == "video.events"
    assert config.rabbitmq.queue_config.max_delivery_count == 3
    assert config.redis.processed_message_ttl_seconds == 604800


def test_queue_arguments_carry_delivery_limit_and_dead_letter_route(monkeypatch):
    monkeypatch.setenv("VIDEO_ENCODED_MAX_DELIVERY_COUNT", "4")

    queue = load_config().rabbitmq.queue_config

    assert queue.queue_arguments() == {
        "x-queue-type": "quorum",
        "x-delivery-limit": 4,
        "x-dead-letter-exchange": "dead_letter_exchange",
        "x-dead-letter-routing-key": "video.encoded.failed",
    }


def test_api_settings(monkeypatch):
    monkeypatch.setenv("API_PORT", "9000")

    assert load_config().api.port == 9000
