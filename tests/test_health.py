# ==============================================================================
# HEALTH ENDPOINT TESTS
# ==============================================================================
# Tests for root and health check endpoints
# ==============================================================================

import pytest
from httpx import AsyncClient

from realty_admin.core.settings import settings


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_root_endpoint(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()

        assert data["name"] == settings.APP_NAME
        assert data["version"] == settings.APP_VERSION
        assert data["health"] == "/health"

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        """Database is reachable through the injected client."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()

        assert data["status"] == "healthy"
        assert data["database"] == "connected"
        assert data["version"] == settings.APP_VERSION

    @pytest.mark.asyncio
    async def test_health_degraded_without_database(self, client: AsyncClient):
        from realty_admin.database.factory import DatabaseFactory

        await DatabaseFactory.shutdown()
        response = await client.get("/health")

        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "disconnected"

    @pytest.mark.asyncio
    async def test_request_id_headers(self, client: AsyncClient):
        """An incoming request id is echoed; timing is always reported."""
        response = await client.get("/", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.headers["X-Response-Time"].endswith("ms")
