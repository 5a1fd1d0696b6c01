"""Shared fixtures: an application on a private in-memory SQLite database."""

import pytest

from app import create_app
from config import TestingConfig


@pytest.fixture()
def app():
    return create_app(TestingConfig())


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def funded_client(client):
    """Client whose ledger starts from a balance of 100."""
    response = client.post('/balance', json={'balance': 100})
    assert response.status_code == 200
    return client
