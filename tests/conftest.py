"""Shared fixtures

Every test gets a fresh in-memory store (seeded with the default admin,
sample cases and vehicles by the app lifespan) and an empty session table.
"""

import pytest
from fastapi.testclient import TestClient

from records_service.core.sessions import session_store
from records_service.infrastructure.store import MemoryStore, reset_record_store
from records_service.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
OFFICER_USERNAME = "officer1"
OFFICER_PASSWORD = "secret123"


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def client(monkeypatch):
    """Unauthenticated client against a freshly seeded app"""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    reset_record_store()
    session_store.clear()
    with TestClient(app) as test_client:
        yield test_client
    reset_record_store()
    session_store.clear()


@pytest.fixture
def admin_client(client):
    """Client logged in as the seeded administrator"""
    response = client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def officer(admin_client):
    """A regular (non-admin) account registered by the admin"""
    response = admin_client.post(
        "/api/auth/register",
        json={
            "username": OFFICER_USERNAME,
            "email": "officer1@police.gov",
            "password": OFFICER_PASSWORD,
            "confirmPassword": OFFICER_PASSWORD,
            "firstName": "Olivia",
            "lastName": "Officer",
            "badgeNumber": "B-101",
            "department": "Patrol",
        },
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def officer_client(officer):
    """Second client logged in as the regular account"""
    other = TestClient(app)
    response = other.post(
        "/api/auth/login", json={"username": OFFICER_USERNAME, "password": OFFICER_PASSWORD}
    )
    assert response.status_code == 200
    return other
