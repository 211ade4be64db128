import logging
import os
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

# Loggers that get the JSON handler instead of propagating to root
_OWN_HANDLER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

# Chatty third-party loggers, capped at WARNING
_QUIET_LOGGERS = ("pika", "sqlalchemy.engine")


def _build_handler() -> logging.Handler:
    formatter = jsonlogger.JsonFormatter(
        LOG_FORMAT,
        static_fields={"service": os.getenv("SERVICE_NAME", "catalog-admin")},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.set_name("catalog_admin_json")
    return handler


def setup_logging() -> logging.Logger:
    """
    Routes the root logger and the uvicorn loggers to one JSON stdout handler.

    Each record carries timestamp, level, logger name, message, the ddtrace
    trace_id/span_id and a static ``service`` field (``SERVICE_NAME``).
    The level comes from ``LOG_LEVEL`` (default INFO). Calling it again from
    another module keeps the existing handler.

    Returns:
        logging.Logger: The configured root logger.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = next(
        (h for h in root_logger.handlers if h.get_name() == "catalog_admin_json"),
        None,
    )
    if handler is None:
        handler = _build_handler()
        root_logger.handlers = [handler]

    for logger_name in _OWN_HANDLER_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [handler]
        u_logger.propagate = False

    for logger_name in _QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return root_logger
