"""Shared fixtures for the digitmath test suite."""

import pytest
from fastapi.testclient import TestClient

from digitmath.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from digitmath.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
