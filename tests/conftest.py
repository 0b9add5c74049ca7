"""Pytest configuration and fixtures for API tests."""
import os

# Set test env BEFORE any imports that use config
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient

from content.store import ContentStore
from web.api.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def store(tmp_path):
    """Fresh store on its own database file, tables created and defaults seeded."""
    s = ContentStore(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await s.init()
    yield s
    await s.close()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
async def client(app):
    """Async HTTP client for testing the API (ASGI lifespan doesn't run with httpx)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
