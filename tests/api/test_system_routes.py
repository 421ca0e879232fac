"""API tests for the system routes and app-wide HTTP behaviour.

- GET / and GET /health
- X-Trace-Id response header
- RFC 9457 responses for unknown routes and wrong methods
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from src.application.queries import GetEventsList
from src.core.config import settings
from src.core.result import Success
from src.main import app
from tests.api.conftest import StubHandler

GET_DATABASE = "src.presentation.routers.system.get_database"


def database(healthy: bool) -> MagicMock:
    db = MagicMock()
    db.check_connection = AsyncMock(return_value=healthy)
    return db


@pytest.mark.api
class TestSystemRoutes:
    """Root and health endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "message": settings.app_name,
            "status": "operational",
            "version": settings.app_version,
        }

    def test_health_ok(self, client):
        with patch(GET_DATABASE, return_value=database(healthy=True)):
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "ok"}

    def test_health_database_down(self, client):
        with patch(GET_DATABASE, return_value=database(healthy=False)):
            response = client.get("/health")

        assert response.status_code == 503
        assert response.json() == {"status": "unhealthy", "database": "unavailable"}


@pytest.mark.api
class TestTraceHeader:
    """X-Trace-Id propagation."""

    def test_generated(self, client):
        response = client.get("/")

        assert response.headers["X-Trace-Id"]

    def test_echoed(self, client, use_handlers):
        use_handlers({GetEventsList: StubHandler(Success(value=[]))})

        response = client.get("/api/events", headers={"X-Trace-Id": "trace-123"})

        assert response.headers["X-Trace-Id"] == "trace-123"


@pytest.mark.api
class TestHttpErrors:
    """Framework errors rendered as problem details."""

    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json()["type"].endswith("/errors/not-found")

    def test_method_not_allowed(self, client):
        response = client.patch("/api/events")

        assert response.status_code == 405
        assert response.json()["title"] == "Method Not Allowed"


@pytest.mark.api
class TestLifespan:
    """Startup and shutdown hooks."""

    def test_creates_tables_and_closes_database(self):
        db = MagicMock()
        db.create_all = AsyncMock()
        db.close = AsyncMock()

        with patch("src.main.get_database", return_value=db):
            with TestClient(app):
                db.create_all.assert_awaited_once()
                db.close.assert_not_awaited()

        db.close.assert_awaited_once()

    def test_inconsistent_registry_aborts_startup(self):
        db = MagicMock()
        db.create_all = AsyncMock()

        with (
            patch("src.main.get_database", return_value=db),
            patch(
                "src.main.validate_registry_consistency",
                return_value=["Duplicate registry entry for CreateEvent"],
            ),
        ):
            with pytest.raises(RuntimeError, match="CQRS registry is inconsistent"):
                with TestClient(app):
                    pass

        db.create_all.assert_not_awaited()
