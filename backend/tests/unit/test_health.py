"""Tests for the health check endpoint and response middleware."""

from __future__ import annotations

import pytest
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.api.middleware import register_middleware


@pytest.mark.anyio
async def test_health_returns_200(client: AsyncClient):
    """Health endpoint should return 200 with status fields."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["store"] == "mock (in-memory)"
    assert data["version"] == "0.1.0"
    assert data["environment"]["features"]["mock_data"] is True


@pytest.mark.anyio
async def test_health_degraded_when_store_empty(client: AsyncClient, store):
    store.users.clear()
    response = await client.get("/health")
    assert response.json()["status"] == "degraded"


@pytest.mark.anyio
async def test_response_headers(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Portal-Env"] == "development"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


@pytest.mark.anyio
async def test_request_id_generated_when_absent(client: AsyncClient):
    first = await client.get("/health")
    second = await client.get("/health")

    assert len(first.headers["X-Request-ID"]) == 36
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


@pytest.mark.anyio
async def test_request_id_bound_to_log_context():
    test_app = FastAPI()
    register_middleware(test_app)
    seen = {}

    @test_app.get("/context")
    async def context():
        seen.update(structlog.contextvars.get_contextvars())
        return {}

    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        await ac.get("/context", headers={"X-Request-ID": "req-9", "X-User-Id": "2"})

    assert seen == {"request_id": "req-9", "user_id": "2"}
    assert structlog.contextvars.get_contextvars() == {}


@pytest.mark.anyio
async def test_unhandled_error_becomes_sanitized_500():
    test_app = FastAPI()
    register_middleware(test_app)

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        response = await ac.get("/boom", headers={"X-Request-ID": "req-500"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "secret internals" not in response.text
    # Failed requests keep their id and the portal headers.
    assert response.headers["X-Request-ID"] == "req-500"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
