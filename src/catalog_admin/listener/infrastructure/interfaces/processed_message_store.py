"""Abstract interface for remembering already processed messages."""

from abc import ABC, abstractmethod


class ProcessedMessageStore(ABC):
    """Abstract base class for idempotency key stores."""

    @abstractmethod
    def is_processed(self, key: str) -> bool:
        """
        Checks whether a message with this idempotency key was already handled.

        Raises:
            ProcessedMessageStoreError: If the store cannot be read.
        """

    @abstractmethod
    def mark_processed(self, key: str) -> None:
        """
        Records an idempotency key as handled.

        Raises:
            ProcessedMessageStoreError: If the store cannot be written.
        """
