from decimal import Decimal

import pytest

from ledger.errors import ValidationError
from ledger.validation import (
    MISSING_INCOME_FIELDS,
    parse_balance,
    parse_entry,
    parse_number,
)


@pytest.mark.parametrize(
    'raw, expected',
    [
        (5, Decimal('5')),
        (2.5, Decimal('2.5')),
        ('10.75', Decimal('10.75')),
        (' 3 ', Decimal('3')),
        (-4, Decimal('-4')),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize('raw', [None, True, False, '', 'abc', 'nan', '-Infinity', [1], {'v': 1}])
def test_parse_number_rejects(raw):
    assert parse_number(raw) is None


def test_parse_balance():
    assert parse_balance({'balance': '0'}) == Decimal('0')


def test_parse_entry_keeps_caller_case():
    text, value = parse_entry({'text': '  Coffee Beans ', 'value': 5})

    assert text == 'Coffee Beans'
    assert value == Decimal('5')


def test_parse_entry_uses_given_message():
    with pytest.raises(ValidationError) as excinfo:
        parse_entry({'text': 'Salary', 'value': 0}, MISSING_INCOME_FIELDS)

    assert excinfo.value.message == 'Missing or invalid required fields'
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize('raw', ['1e400', '1e15', -1e15, 1e308])
def test_parse_number_rejects_amounts_too_large_for_responses(raw):
    assert parse_number(raw) is None


def test_parse_number_accepts_just_below_limit():
    assert parse_number('999999999999999.99') == Decimal('999999999999999.99')


def test_parse_entry_checks_length_after_lower_casing():
    with pytest.raises(ValidationError):
        parse_entry({'text': 'İ' * 200, 'value': 5})

    text, _ = parse_entry({'text': 'İ' * 127, 'value': 5})
    assert len(text.lower()) == 254
