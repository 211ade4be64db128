"""Custom exceptions for the catalog admin services."""


class DecodingError(Exception):
    """Raised when a queue message body is malformed or of an unknown shape."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Failed to decode message: {reason}")


class NotFoundError(Exception):
    """Raised when a referenced aggregate does not exist."""

    def __init__(self, entity: str, identifier: str):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with ID {identifier} was not found")


class PersistenceError(Exception):
    """Raised when writing an aggregate to the database fails."""

    def __init__(self, entity: str, identifier: str, cause: Exception | None = None):
        self.entity = entity
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to persist {entity} '{identifier}' to database")


class DomainValidationError(Exception):
    """Raised when a request violates a business rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProcessedMessageStoreError(Exception):
    """Raised when the processed-message store cannot be read or written."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Processed-message store {operation} failed for key '{key}'")
