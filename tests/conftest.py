"""
Shared pytest fixtures.

Endpoint tests run the real app against a throwaway SQLite file per test, so
every SQL statement the handlers issue actually executes. Service tests use
mocked sessions instead.
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from buildezy.core.config import Settings
from buildezy.db.base import Database
from buildezy.main import create_app



@pytest.fixture
def test_settings():
    return Settings(DATABASE_URL="sqlite+aiosqlite://", LOG_LEVEL="WARNING")


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'buildezy.db'}")
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def app(test_settings, database):
    return create_app(settings=test_settings, database=database)


@pytest_asyncio.fixture
async def test_client(app):
    """HTTPX AsyncClient routed straight into the ASGI app (no server, no lifespan)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_db_session():
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def vendor_payload():
    return {
        "name": "Asha Builders",
        "email": "asha@example.com",
        "mobile": "9876543210",
        "service": "Plumbing",
        "description": "Residential plumbing",
    }


@pytest.fixture
def enquiry_payload():
    return {"name": "Jo", "email": "jo@x.com", "mobile": "123", "message": "hi"}
