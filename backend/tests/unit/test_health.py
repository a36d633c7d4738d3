from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from app.core.dependencies import get_cache_store
from app.main import app


def test_health_reports_directory_and_cache(service_client):
    response = service_client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["directory_api"] == "ok"
    assert data["services"]["cache"] == "in_memory"


def test_health_degraded_when_directory_unreachable(service_client, directory_client):
    directory_client.check_connection.return_value = False

    data = service_client.get("/api/v1/health").json()

    assert data["status"] == "degraded"
    assert data["services"]["directory_api"] == "error"


def test_health_checks_cosmos_cache(service_client):
    cosmos_cache = MagicMock()
    cosmos_cache.backend = "cosmos_db"
    cosmos_cache.check_connection = AsyncMock(return_value=True)
    app.dependency_overrides[get_cache_store] = lambda: cosmos_cache

    data = service_client.get("/api/v1/health").json()

    assert data["services"]["cache"] == "ok"
    cosmos_cache.check_connection.assert_awaited_once()


def test_health_cache_error_is_degraded(service_client):
    cosmos_cache = MagicMock()
    cosmos_cache.backend = "cosmos_db"
    cosmos_cache.check_connection = AsyncMock(side_effect=RuntimeError("boom"))
    app.dependency_overrides[get_cache_store] = lambda: cosmos_cache

    data = service_client.get("/api/v1/health").json()

    assert data["status"] == "degraded"
    assert data["services"]["cache"] == "error"


def test_readiness_check(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True
