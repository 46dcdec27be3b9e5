"""API test fixtures — FastAPI test client over a fresh in-memory store.

Invariants:
    - Every test gets its own InMemoryMediaStore (no cross-test leakage)
    - get_store and get_settings overridden via app.dependency_overrides
    - Overrides cleared after each test

Design Decisions:
    - ASGITransport without lifespan: the fixture owns store setup, so the
      process-wide singleton is never touched by route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from media_api.config import Settings, get_settings
from media_api.infrastructure.memory_store import InMemoryMediaStore, get_store
from media_api.main import app


@pytest.fixture
def store():
    return InMemoryMediaStore()


@pytest.fixture
def settings():
    return Settings(strict_not_found=False)


@pytest.fixture
async def client(store, settings):
    """FastAPI test client with store and settings dependencies overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def strict_client(store):
    """Client with strict_not_found enabled."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: Settings(strict_not_found=True)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_media(client):
    """Create one record through the API and return its JSON."""
    res = await client.post(
        "/api/media/upload",
        json={"title": "Sunset", "type": "image", "url": "https://cdn.test/sunset.jpg"},
    )
    assert res.status_code == 201
    return res.json()
