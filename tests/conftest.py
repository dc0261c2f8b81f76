"""Pytest fixtures for the TODO API tests."""

import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    """Create an empty task store."""
    return TaskStore()


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    """Create a test client for an app backed by the ``store`` fixture."""
    return TestClient(create_app(store))
