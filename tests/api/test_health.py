"""API tests for the public service endpoints"""

import pytest


@pytest.mark.api
class TestHealthCheck:
    """Health and service info endpoints"""

    def test_health_returns_healthy(self, client):
        """Happy path: health check reports the in-memory store"""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "police-records-service"
        assert data["store"] == "memory"
        assert data["store_available"] is True

    def test_root_service_info(self, client):
        data = client.get("/").json()

        assert data["service"] == "police-records-service"
        assert data["status"] == "running"

    def test_unknown_route(self, client):
        assert client.get("/api/nothing-here").status_code == 404
