"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from tests.fakes import InMemoryStore


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Test client wired to the in-memory store."""
    return TestClient(create_app(store=store))


@pytest.fixture
def alice(client):
    """Create user 'alice' and return the response body."""
    response = client.post("/api/users", json={"username": "alice"})
    assert response.status_code == 200
    return response.json()
