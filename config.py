"""Environment-driven configuration for the ledger service."""

import os

from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

load_dotenv()


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


def _normalize_database_url(url):
    """Hosted Postgres providers still hand out ``postgres://`` URLs."""
    if url.startswith('postgres://'):
        return 'postgresql://' + url[len('postgres://'):]
    return url


class Config:
    """Runtime configuration read from the environment."""

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    TESTING = False

    def __init__(self):
        self.SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-me')
        self.SQLALCHEMY_DATABASE_URI = _normalize_database_url(
            os.getenv('DATABASE_URL', 'sqlite:///ledger.db')
        )
        self.DATABASE_SSLMODE = os.getenv('DATABASE_SSLMODE', 'require')
        self.PORT = int(os.getenv('PORT', '3000'))
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.LOG_JSON = _env_bool('LOG_JSON', default=False)
        self.SQLALCHEMY_ENGINE_OPTIONS = self.engine_options()

    def engine_options(self):
        options = {'pool_pre_ping': True}
        if self.SQLALCHEMY_DATABASE_URI.startswith('postgresql') and self.DATABASE_SSLMODE:
            # TLS without certificate verification
            options['connect_args'] = {'sslmode': self.DATABASE_SSLMODE}
        return options

    def update(self, overrides):
        """Apply ``overrides`` and rebuild the settings derived from them."""
        for key, value in overrides.items():
            setattr(self, key, value)
        if 'SQLALCHEMY_DATABASE_URI' in overrides:
            self.SQLALCHEMY_DATABASE_URI = _normalize_database_url(self.SQLALCHEMY_DATABASE_URI)
        if 'LOG_LEVEL' in overrides:
            self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if 'SQLALCHEMY_ENGINE_OPTIONS' not in overrides:
            self.SQLALCHEMY_ENGINE_OPTIONS = self.engine_options()
        return self


class TestingConfig(Config):
    """In-memory SQLite shared by every connection of the pool."""

    TESTING = True

    def __init__(self):
        super().__init__()
        self.SQLALCHEMY_DATABASE_URI = 'sqlite://'
        self.SQLALCHEMY_ENGINE_OPTIONS = self.engine_options()

    def engine_options(self):
        return {
            'connect_args': {'check_same_thread': False},
            'poolclass': StaticPool,
        }
