"""Exceptions raised by the ledger operations, each mapped to an HTTP status."""


class LedgerError(Exception):
    """Base class for errors reported to the caller as ``{"error": message}``."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(LedgerError, ValueError):
    """Raised when a request body is missing fields or carries malformed values."""


class ConflictError(LedgerError):
    """Raised when the initial balance has already been defined."""


class PreconditionError(LedgerError):
    """Raised when an operation needs the initial balance and none is defined."""


class NotFoundError(LedgerError, LookupError):
    """Raised when a transaction id does not exist."""

    status_code = 404
