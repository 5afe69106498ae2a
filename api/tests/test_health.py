"""
Health check endpoint tests.
"""

from httpx import AsyncClient


class TestHealthCheck:
    """Tests for GET /api/health."""

    async def test_health_returns_200(self, async_client: AsyncClient):
        """Health check endpoint returns 200 OK."""
        response = await async_client.get("/api/health")
        assert response.status_code == 200

    async def test_health_returns_ok_status_and_timestamp(self, async_client: AsyncClient):
        """Health check returns status: ok and an ISO timestamp."""
        response = await async_client.get("/api/health")
        data = response.json()
        assert data["status"] == "ok"
        assert "T" in data["timestamp"]

    async def test_responses_carry_request_id(self, async_client: AsyncClient):
        """Every response has an X-Request-ID header."""
        response = await async_client.get("/api/health")
        assert response.headers.get("X-Request-ID")
