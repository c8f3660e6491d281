"""
Tests for health check endpoints.
"""
import pytest


@pytest.mark.asyncio
async def test_health_endpoint_returns_healthy(client):
    """Test that the /health endpoint reports a reachable database."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "healthy"


@pytest.mark.asyncio
async def test_ping_returns_ok(client):
    response = await client.get("/ping")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["content-type"] == "application/json"
