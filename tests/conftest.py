# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets the environment before crudhub is imported (settings are read at import
# time), rebuilds the in-memory schema around every test and offers helpers
# for joining accounts of each role.
# =============================================================================

import os

os.environ.setdefault("TESTING", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from crudhub.db.database import SessionLocal, engine
from crudhub.db.models import Base
from crudhub.main import app

API = "/api/v1"
PASSWORD = "correct-horse-battery"


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class Account:
    """An account joined through the API, with its tokens."""

    def __init__(self, role: str, body: dict, email: str = None):
        self.role = role
        self.id = body["id"]
        self.email = email
        self.access = body["token"]["access"]
        self.refresh = body["token"]["refresh"]

    @property
    def headers(self) -> dict:
        return bearer(self.access)


@pytest.fixture
def join(client):
    """Join an account of the given role and return it."""
    counter = {"n": 0}

    def _join(role: str, **extra) -> Account:
        if role == "guest":
            response = client.post(f"{API}/auth/guest/join", json=extra or None)
            assert response.status_code == 201, response.text
            return Account(role, response.json())

        counter["n"] += 1
        email = extra.pop("email", f"{role}{counter['n']}@example.com")
        payload = {
            "email": email,
            "password": PASSWORD,
            "display_name": f"{role.capitalize()} {counter['n']}",
            **extra,
        }
        response = client.post(f"{API}/auth/{role}/join", json=payload)
        assert response.status_code == 201, response.text
        return Account(role, response.json(), email)

    return _join


@pytest.fixture
def member(join):
    return join("member")


@pytest.fixture
def moderator(join):
    return join("moderator")


@pytest.fixture
def admin(join):
    return join("admin")


@pytest.fixture
def customer(join):
    return join("customer", phone="+1-555-0100")


@pytest.fixture
def seller(join):
    return join("seller", business_name="Acme Supplies")
