"""Tests for the logging setup."""

import json
import logging
import sys

from config import Config
from logging_config import JSONFormatter, get_logger, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        name='ledger.transactions',
        level=logging.INFO,
        pathname='transactions.py',
        lineno=42,
        msg='Added %s',
        args=('expense',),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter():
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data['level'] == 'INFO'
    assert log_data['logger'] == 'ledger.transactions'
    assert log_data['message'] == 'Added expense'
    assert log_data['line'] == 42
    assert 'extra' not in log_data


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(transaction_id=7, balance='95')))

    assert log_data['extra'] == {'transaction_id': 7, 'balance': '95'}


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('store unavailable')
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data['exception']['type'] == 'RuntimeError'
    assert log_data['exception']['message'] == 'store unavailable'
    assert 'Traceback' in log_data['exception']['traceback']


def test_setup_logging_json(monkeypatch):
    monkeypatch.setenv('LOG_JSON', 'true')
    monkeypatch.setenv('LOG_LEVEL', 'WARNING')

    logger = setup_logging(Config())

    assert logger.name == 'ledger'
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_setup_logging_replaces_handlers(monkeypatch):
    monkeypatch.delenv('LOG_JSON', raising=False)
    setup_logging(Config())
    logger = setup_logging(Config())

    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_get_logger_namespacing():
    assert get_logger('balances').name == 'ledger.balances'
