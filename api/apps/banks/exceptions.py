"""Exceptions raised while validating and storing bank records."""


class BankRecordValidationError(ValueError):
    """Raised when a bank record is not admissible.

    The message is a stable, user-facing reason returned
    verbatim to API consumers.
    """


class SwiftCodeExistsError(Exception):
    """Raised when inserting a record whose code is already stored."""

    def __init__(self, message: str = "Given Swift Code already exists") -> None:
        super().__init__(message)


class StorageError(RuntimeError):
    """Raised when a database operation fails for any other reason."""
