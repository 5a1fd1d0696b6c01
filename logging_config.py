"""Logging setup for the ledger service."""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = 'ledger'


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    # Attributes every LogRecord carries; anything else came in through ``extra``
    _STANDARD_ATTRS = set(
        logging.LogRecord('', 0, '', 0, '', (), None).__dict__
    ) | {'message', 'asctime'}

    def format(self, record):
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info),
            }

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra_fields:
            log_data['extra'] = extra_fields

        return json.dumps(log_data, default=str)


def setup_logging(config):
    """Configure the ``ledger`` logger hierarchy.

    Console output is human-readable unless ``LOG_JSON`` is set.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if config.LOG_JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
    logger.addHandler(handler)
    return logger


def get_logger(name):
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
