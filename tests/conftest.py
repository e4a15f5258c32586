"""
Pytest fixtures for the Hello Deployment API test suite.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from hello_api.core.config import Settings
from hello_api.main import create_app


@pytest.fixture
def settings():
    """Defaults only, never a developer's local .env."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings):
    """Create application for testing."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """FastAPI test client."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def root_log_level():
    """Put the root logger back after tests that build apps at other levels."""
    root = logging.getLogger()
    previous = root.level
    yield root
    root.setLevel(previous)
