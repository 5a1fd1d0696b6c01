from ledger.errors import (
    ConflictError,
    LedgerError,
    NotFoundError,
    PreconditionError,
    ValidationError,
)

__all__ = [
    'ConflictError',
    'LedgerError',
    'NotFoundError',
    'PreconditionError',
    'ValidationError',
]
