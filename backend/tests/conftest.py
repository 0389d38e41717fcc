"""Global pytest fixtures."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.mock.store import MockStore, get_store
from app.services.portal import PortalAPI


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_store():
    """Restore the seed data around every test."""
    get_store().reset()
    yield
    get_store().reset()


@pytest.fixture
def store() -> MockStore:
    return get_store()


@pytest.fixture
def portal(store: MockStore) -> PortalAPI:
    return PortalAPI(store=store)


@pytest.fixture
async def client():
    """Async client against the full app (middleware included)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
