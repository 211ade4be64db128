"""Infrastructure interface exports."""

from catalog_admin.listener.infrastructure.interfaces.message_broker import (
    MessageBroker,
    MessageCallback,
)
from catalog_admin.listener.infrastructure.interfaces.processed_message_store import (
    ProcessedMessageStore,
)

__all__ = [
    "MessageBroker",
    "MessageCallback",
    "ProcessedMessageStore",
]
