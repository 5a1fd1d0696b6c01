"""Income and expense entries and the balance adjustments they carry."""

from datetime import datetime, time

from sqlalchemy import case, func

from models import EXPENSE, INCOME, Transaction, db, session_scope
from logging_config import get_logger
from ledger.balances import get_balance, locked_balance
from ledger.errors import NotFoundError

logger = get_logger('transactions')

# Sign each entry type applies to the balance
_DIRECTION = {INCOME: 1, EXPENSE: -1}


def _add_entry(kind, text, value):
    with session_scope() as session:
        balance = locked_balance()
        entry = Transaction(date=datetime.now(), type=kind, text=text.lower(), value=value)
        session.add(entry)
        balance.balance = balance.balance + _DIRECTION[kind] * value
        session.flush()
        created = {
            'id': entry.id,
            'date': entry.date.isoformat(),
            'type': kind,
            'text': text,
            'value': float(value),
        }
        new_balance = balance.balance
    logger.info(
        'Added %s', kind,
        extra={'transaction_id': created['id'], 'value': value, 'balance': new_balance},
    )
    return created


def add_expense(text, value):
    return _add_entry(EXPENSE, text, value)


def add_income(text, value):
    return _add_entry(INCOME, text, value)


def list_by_type(kind):
    rows = Transaction.query.filter_by(type=kind).order_by(Transaction.id).all()
    return [row.to_dict() for row in rows]


def list_today(now=None):
    """Entries dated on or after local midnight, with the time of the query."""
    now = now or datetime.now()
    start = datetime.combine(now.date(), time.min)
    rows = (
        Transaction.query.filter(Transaction.date >= start)
        .order_by(Transaction.id)
        .all()
    )
    return {'date': now.isoformat(), 'transactions': [row.to_dict() for row in rows]}


def delete_transaction(transaction_id):
    """Delete an entry and take its effect back out of the balance."""
    with session_scope() as session:
        entry = Transaction.query.filter_by(id=transaction_id).with_for_update().first()
        if entry is None:
            raise NotFoundError('Transaction not found')
        balance = locked_balance()
        balance.balance = balance.balance - _DIRECTION[entry.type] * entry.value
        session.delete(entry)
        new_balance = balance.balance
    logger.info(
        'Deleted transaction',
        extra={'transaction_id': transaction_id, 'balance': new_balance},
    )
    return 'Transaction deleted successfully'


def summary():
    balance = get_balance()
    totals = db.session.query(
        func.sum(case((Transaction.type == INCOME, Transaction.value), else_=0)).label('income'),
        func.sum(case((Transaction.type == EXPENSE, Transaction.value), else_=0)).label('expense'),
    ).first()
    income = float(totals.income or 0)
    expense = float(totals.expense or 0)
    return {
        'income': income,
        'expense': expense,
        'net': income - expense,
        'balance': float(balance),
    }
