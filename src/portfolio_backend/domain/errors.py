"""Domain errors raised across the persistence and delivery boundaries."""


class StoreError(RuntimeError):
    """Raised when the relational store rejects or fails an operation."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class DuplicateRecordError(StoreError):
    """Raised when an insert violates a uniqueness constraint."""


class MailDeliveryError(RuntimeError):
    """Raised when an outbound email could not be delivered."""
