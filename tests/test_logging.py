import json
import logging

from catalog_admin.logging import setup_logging


def test_setup_logging_installs_single_json_handler(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    setup_logging()
    root = setup_logging()

    handlers = [h for h in root.handlers if h.get_name() == "catalog_admin_json"]
    assert len(handlers) == 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").handlers == handlers
    assert logging.getLogger("pika").level == logging.WARNING


def test_records_are_formatted_as_json(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    root = setup_logging()
    handler = next(h for h in root.handlers if h.get_name() == "catalog_admin_json")

    record = logging.LogRecord(
        "catalog_admin.listener", logging.INFO, __file__, 1, "Message received", None, None
    )
    record.idempotency_key = "msg-1"
    payload = json.loads(handler.format(record))

    assert payload["message"] == "Message received"
    assert payload["levelname"] == "INFO"
    assert payload["idempotency_key"] == "msg-1"
    assert payload["service"] == "catalog-admin"
