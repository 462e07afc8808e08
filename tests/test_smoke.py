"""App wiring: root, health, and the generic error envelope."""

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError
from starlette.testclient import TestClient

from apps.biztime.core.db import get_db
from apps.biztime.main import app


class _FailingSession:
    """Stands in for the gateway; every call blows up."""

    def query(self, *args, **kwargs):
        raise RuntimeError("connection reset")

    def execute(self, *args, **kwargs):
        raise SQLAlchemyError("connection reset")


def _failing_db():
    yield _FailingSession()


def test_app_starts():
    assert isinstance(app, FastAPI)


def test_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert data["endpoints"]["companies"] == "/companies/"


def test_health(client: TestClient):
    response = client.get("/system/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "ok"}


def test_health_reports_database_failure():
    app.dependency_overrides[get_db] = _failing_db
    try:
        response = TestClient(app).get("/system/health")
    finally:
        app.dependency_overrides.pop(get_db, None)

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "database": "unavailable"}


def test_unexpected_failure_is_500_without_details():
    app.dependency_overrides[get_db] = _failing_db
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/companies/")
    finally:
        app.dependency_overrides.pop(get_db, None)

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "Internal server error", "status": 500}}
    assert "connection reset" not in response.text


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Not Found", "status": 404}}


def test_method_not_allowed_uses_error_envelope(client: TestClient):
    response = client.patch("/companies/apple", json={})
    assert response.status_code == 405
    assert response.json()["error"]["status"] == 405
