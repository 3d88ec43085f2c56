"""
Global pytest fixtures for the User Registry test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide an isolated in-memory UserStore for direct testing
    - Provide a ready-made UserCreate payload

Why an app factory?
    Using `create_app()` ensures each test gets a fresh in-memory store,
    eliminating cross-test flakiness.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from user_registry.models import UserCreate
from user_registry.storage.storage import UserStore


@pytest.fixture
def client() -> TestClient:
    """Provide a fresh TestClient with a new app instance (and a new store)."""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def store() -> UserStore:
    """Provide a fresh in-memory UserStore."""
    return UserStore()


@pytest.fixture
def ada() -> UserCreate:
    return UserCreate(first_name="Ada", last_name="Lovelace", email="ada@example.com", hobby="chess")
