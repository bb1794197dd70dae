"""API tests for non-versioned system routes.

Validates behavior of root and health endpoints exposed by the system
router.
"""

from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app


client = TestClient(app)


def test_root_endpoint_returns_status_and_version() -> None:
    """Root endpoint should return operational status and app version."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == settings.app_name
    assert data["status"] == "operational"
    assert data["version"] == settings.app_version
    assert data["jsonapi_base_path"] == settings.jsonapi_base_path


def test_health_endpoint_returns_healthy_status() -> None:
    """Health endpoint should return a healthy status indicator."""
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_every_response_carries_trace_id() -> None:
    """TraceMiddleware should echo a caller-supplied trace ID."""
    response = client.get("/health", headers={"X-Trace-Id": "trace-abc"})

    assert response.headers["X-Trace-Id"] == "trace-abc"
