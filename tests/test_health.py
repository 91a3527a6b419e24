"""
Health endpoint tests.
"""


def test_health_endpoint(client):
    """Test that the /health endpoint returns 200 OK."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["data"]["status"] == "healthy"
    assert "timestamp" in data["data"]
    assert data["data"]["version"] == "0.1.0"
    assert data["data"]["service"] == "Discharge-AI"


def test_health_live_endpoint(client):
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "alive"


def test_health_ready_reports_storage_and_provider(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["checks"]["storage_backend"] == "memory"
    assert data["checks"]["database"] == "ok"
    assert data["checks"]["completion_provider"] == "not_configured"
    assert data["status"] == "degraded"


def test_health_ready_with_provider_configured(app, settings):
    from fastapi.testclient import TestClient

    settings.openai.api_key = "sk-test"
    with TestClient(app) as client:
        data = client.get("/health/ready").json()["data"]
    assert data["status"] == "ready"
    assert data["checks"]["completion_provider"] == "openai"


def test_api_info_endpoint(client):
    """Test that /api returns service information."""
    response = client.get("/api")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "Discharge-AI"
    assert data["status"] == "running"
    assert data["endpoints"]["create_discharge"] == "POST /api/discharges"
