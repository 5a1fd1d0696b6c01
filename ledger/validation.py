"""Parsing of the JSON bodies accepted by the balance and transaction routes."""

from decimal import Decimal, InvalidOperation

from ledger.errors import ValidationError

INVALID_BALANCE = 'Invalid balance value'
MISSING_EXPENSE_FIELDS = 'Missing required fields'
MISSING_INCOME_FIELDS = 'Missing or invalid required fields'
MAX_TEXT_LENGTH = 255
# Amounts at or above this are rejected; responses render them as floats
MAX_AMOUNT = Decimal('1e15')


def parse_number(raw):
    """Return ``raw`` as a Decimal, or None if it is not a usable amount.

    JSON numbers and numeric strings are accepted; booleans are not.
    Infinities, NaN and magnitudes of MAX_AMOUNT or more are rejected.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        raw = str(raw)
    if not isinstance(raw, str):
        return None
    try:
        number = Decimal(raw.strip())
    except InvalidOperation:
        return None
    if not number.is_finite() or abs(number) >= MAX_AMOUNT:
        return None
    return number


def _require_object(payload, message):
    if not isinstance(payload, dict):
        raise ValidationError(message)
    return payload


def parse_balance(payload):
    payload = _require_object(payload, INVALID_BALANCE)
    balance = parse_number(payload.get('balance'))
    if balance is None:
        raise ValidationError(INVALID_BALANCE)
    return balance


def parse_entry(payload, message=MISSING_EXPENSE_FIELDS):
    """Return ``(text, value)`` for a new income or expense entry.

    ``text`` keeps the caller's casing; ``value`` must be strictly positive.
    """
    payload = _require_object(payload, message)
    text = payload.get('text')
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(message)
    text = text.strip()
    # lower-casing can lengthen text, and the lower-cased form is stored
    if len(text.lower()) > MAX_TEXT_LENGTH:
        raise ValidationError(message)
    value = parse_number(payload.get('value'))
    if value is None or value <= 0:
        raise ValidationError(message)
    return text, value
