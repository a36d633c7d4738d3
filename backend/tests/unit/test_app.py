def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee Directory API"


def test_lifespan_wires_in_memory_cache_without_cosmos(client):
    from app.main import app

    assert app.state.cache_store.backend == "in_memory"
    assert app.state.employee_service is not None
    assert app.state.directory_client.base_url == "https://dummy.restapiexample.com/"


def test_health_returns_status(service_client):
    response = service_client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert "version" in data
    assert data["version"] == "0.1.0"
    assert "services" in data
