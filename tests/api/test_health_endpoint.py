"""Tests for the health endpoint."""

from fastapi.testclient import TestClient

from rag_service import __version__
from rag_service.api.main import create_app


class TestHealthEndpoint:
    """Test GET /api/v1/health."""

    def test_health(self) -> None:
        """Should report healthy with the service version."""
        client = TestClient(create_app())

        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "message": "Server Healthy",
            "version": __version__,
        }
