"""Broker contract the encoder listener consumes through."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

MessageCallback = Callable[[bytes, int, dict[str, Any] | None, str | None], None]


class MessageBroker(ABC):
    """Abstract base class for consuming broker backends."""

    @abstractmethod
    def acknowledge(self, delivery_tag: int) -> None:
        """
        Confirms the message so the broker drops it.

        Args:
            delivery_tag: Tag of the delivery being settled.
        """

    @abstractmethod
    def reject(self, delivery_tag: int, requeue: bool = True) -> None:
        """
        Rejects a message.

        Args:
            delivery_tag: Tag of the delivery being settled.
            requeue: Whether the broker should redeliver the message. When
                False, or once the delivery limit is reached, the message is
                dead-lettered.
        """

    @abstractmethod
    def consume(self, callback: MessageCallback) -> None:
        """
        Blocks, handing every delivery on the results queue to ``callback``.

        Args:
            callback: Function called for each message with
                (body, delivery_tag, headers, message_id).
        """

    @abstractmethod
    def setup(self) -> None:
        """Declares the results queue, its exchange binding and the dead-letter route."""
