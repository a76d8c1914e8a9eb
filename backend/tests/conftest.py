"""
FAQDesk Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── sample_entry_data: field values for a stored FAQ entry
    ├── store_engine: fresh in-memory SQLite engine with the faq table
    ├── test_client: HTTPX AsyncClient wired to store_engine
    └── failing_client: HTTPX AsyncClient whose store always fails
"""

import os

# Settings are read when app.config is first imported, so the test
# environment has to be in place before any app import below
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "development"

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import create_schema, get_db_session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_entry(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
            result = await faq_service.get_entry(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_entry_data():
    """Field values for a stored FAQ entry."""
    return {
        "id": 7,
        "question": "How do I reset my password?",
        "answer": "Use the link on the sign-in page.",
        "created_at": datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
        "updated_at": None,
    }


@pytest_asyncio.fixture
async def store_engine():
    """A private in-memory SQLite store, created empty for each test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


async def _client_for(session_dependency):
    from app.main import app

    app.dependency_overrides[get_db_session] = session_dependency
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(store_engine):
    """
    Provides an async HTTP test client backed by store_engine.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/faq")
            assert response.status_code == 200
    """
    session_factory = async_sessionmaker(
        store_engine, class_=AsyncSession, expire_on_commit=False
    )

    async def override_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async for client in _client_for(override_session):
        yield client


@pytest.fixture
def store_failure():
    return OperationalError(
        "SELECT 1", {}, Exception("Lost connection to server during query")
    )


@pytest_asyncio.fixture
async def failing_client(mock_db_session, store_failure):
    """HTTP client whose session raises the same store error on every call."""
    mock_db_session.execute.side_effect = store_failure
    mock_db_session.commit.side_effect = store_failure

    async def override_session():
        yield mock_db_session

    async for client in _client_for(override_session):
        yield client
