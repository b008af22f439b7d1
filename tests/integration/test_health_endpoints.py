"""
Integration tests for health, readiness and metrics endpoints.
"""

import pytest


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Tests for operational endpoints."""

    def test_health(self, client):
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "product-catalog"}

    def test_ready(self, client):
        response = client.get("/ready/")

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True, "cache": True}

    def test_metrics_exposed(self, client):
        client.get("/about")
        response = client.get("/metrics")

        assert response.status_code == 200
        assert b"http_requests_total" in response.content

    def test_observability_headers(self, client):
        response = client.get("/about")

        assert response["X-Request-Status"] == "success"
        assert response["X-Correlation-ID"]
        assert float(response["X-Request-Duration"]) >= 0

    def test_client_error_status_header(self, client):
        response = client.get("/product-detail/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response["X-Request-Status"] == "client_error"
