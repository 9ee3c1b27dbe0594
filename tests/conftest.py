"""Shared test configuration: zero store latency, fresh app per test."""

import os

# Must be set before app.core.config is imported
os.environ.setdefault("STORE_LATENCY_SECONDS", "0")
os.environ.setdefault("STORE_CONNECT_LATENCY_SECONDS", "0")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.db.store import UserStore
from app.main import create_app


@pytest.fixture
def store():
    """Seeded, disconnected store."""
    return UserStore(latency=0, connect_latency=0)


@pytest.fixture
async def connected_store(store):
    await store.connect()
    return store


@pytest.fixture
def client():
    """HTTP client around a fresh app; the lifespan connects its store."""
    with TestClient(create_app()) as test_client:
        yield test_client
