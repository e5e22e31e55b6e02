"""Shared fixtures: a fresh in-memory store and a known admin token per test."""
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.store import LoyaltyStore, get_store
from main import app

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def store():
    return LoyaltyStore()


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_TOKEN", ADMIN_TOKEN)
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
