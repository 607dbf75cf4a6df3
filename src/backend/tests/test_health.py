"""Tests for the health endpoint.

Covers:
- GET /health returns 200 with status and version
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class TestHealthEndpoint:
    async def test_health_returns_correct_response(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert isinstance(body.get("version"), str)
        assert "x-request-id" in response.headers
        assert response.headers["access-control-allow-origin"] == "*"
