# =============================================================================
# tests/test_exception_handlers.py - Global error mapping
# =============================================================================

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import NoResultFound

from crudhub.api.exception_handlers import setup_exception_handlers
from crudhub.core.exceptions import ConflictError, ForbiddenError, NotFoundError


@pytest.fixture
def failing_client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/forbidden")
    async def forbidden():
        raise ForbiddenError("You do not own this todo")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Topic", "42")

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Already subscribed")

    @app.get("/integrity")
    async def integrity():
        raise IntegrityError("INSERT INTO communities", {}, Exception("UNIQUE constraint failed"))

    @app.get("/no-result")
    async def no_result():
        raise NoResultFound()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("unexpected")

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def test_application_errors_keep_their_status(failing_client):
    response = failing_client.get("/forbidden")

    assert response.status_code == 403
    assert response.json() == {"detail": "You do not own this todo", "code": "FORBIDDEN"}


def test_not_found_carries_the_id(failing_client):
    response = failing_client.get("/missing")

    assert response.status_code == 404
    assert response.json()["details"] == {"id": "42"}


def test_conflict(failing_client):
    assert failing_client.get("/conflict").status_code == 409


def test_integrity_error_is_conflict(failing_client):
    response = failing_client.get("/integrity")

    assert response.status_code == 409
    assert response.json()["code"] == "UNIQUE_CONSTRAINT"


def test_no_result_is_not_found(failing_client):
    assert failing_client.get("/no-result").status_code == 404


def test_unhandled_error_gets_an_error_id(failing_client):
    response = failing_client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "INTERNAL_ERROR"
    assert len(body["error_id"]) == 12
    assert "unexpected" not in body["detail"]


def test_health_and_root(client):
    assert client.get("/health").json()["database"] == "healthy"
    assert client.get("/").json()["message"] == "CrudHub"
