import pytest
from fastapi.testclient import TestClient

from docqa import __version__
from docqa.api.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_correlation_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"


def test_correlation_id_is_generated(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]
