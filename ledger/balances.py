"""The singleton balance row: define once, read, and wipe together with all entries."""

from models import Balance, Transaction, session_scope
from logging_config import get_logger
from ledger.errors import ConflictError, PreconditionError

logger = get_logger('balances')

BALANCE_NOT_DEFINED = 'Initial Balance Not Defined'


def locked_balance():
    """Return the balance row locked for update, or raise PreconditionError."""
    row = Balance.query.with_for_update().first()
    if row is None:
        raise PreconditionError(BALANCE_NOT_DEFINED)
    return row


def set_initial_balance(amount):
    with session_scope() as session:
        if Balance.query.with_for_update().first() is not None:
            raise ConflictError('Initial Balance Already Defined')
        session.add(Balance(balance=amount))
    logger.info('Initial balance defined', extra={'balance': amount})
    return 'Initial balance added successfully'


def get_balance():
    row = Balance.query.first()
    if row is None:
        raise PreconditionError(BALANCE_NOT_DEFINED)
    return row.balance


def reset():
    """Delete the balance and every transaction. Irreversible."""
    with session_scope():
        balances = Balance.query.delete()
        transactions = Transaction.query.delete()
    logger.warning(
        'Ledger reset',
        extra={'balances_deleted': balances, 'transactions_deleted': transactions},
    )
    return 'Balance reset successfully'
