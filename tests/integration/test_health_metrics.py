"""Integration tests for /, /health, /healthz and /metrics endpoints."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient


def test_root(client: TestClient) -> None:
    """Root endpoint reports the service is running."""
    response = client.get("/")

    assert response.status_code == 200
    assert "running" in response.json()["message"]


def test_health_always_ok(client: TestClient) -> None:
    """Liveness endpoint is always ok."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_healthz_ok(client: TestClient) -> None:
    """Writable exports directory and mock generator report ok."""
    response = client.get("/healthz")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["components"] == {"exports": "ok", "generator": "mock"}


@patch("backend.app.api.routes.health.check_exports_dir")
def test_healthz_degraded_when_exports_unwritable(mock_check: MagicMock, client: TestClient) -> None:
    """Unwritable exports directory returns 503."""
    mock_check.return_value = (False, "error: PermissionError")

    response = client.get("/healthz")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"


def test_metrics_exposes_operation_metrics(client: TestClient) -> None:
    """Operation metrics appear after a generation."""
    client.post("/api/generate", json={"city": "Paris", "budget": 100, "days": 1, "preferences": ""})

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "operation_latency_ms" in response.text
