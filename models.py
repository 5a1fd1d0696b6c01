from contextlib import contextmanager
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

EXPENSE = 'expense'
INCOME = 'income'


class Balance(db.Model):
    __tablename__ = 'balances'

    id = db.Column(db.Integer, primary_key=True)
    balance = db.Column(db.Numeric, nullable=False)


class Transaction(db.Model):
    __tablename__ = 'transactions'

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    type = db.Column(db.String(20), nullable=False, index=True)  # 'income' or 'expense'
    text = db.Column(db.String(255), nullable=False)  # stored lower-cased
    value = db.Column(db.Numeric, nullable=False)  # always positive

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.isoformat(),
            'type': self.type,
            'text': self.text,
            'value': float(self.value),
        }


@contextmanager
def session_scope():
    """Run the enclosed statements as one database transaction."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
