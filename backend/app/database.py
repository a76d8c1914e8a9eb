"""
FAQDesk Backend: Database Session Management
==============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine from DATABASE_URL and hands every request its
       own session, which is rolled back on error and always closed.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection lifecycle per request:
    1. get_db_session() opens a session (no connection yet)
    2. The first statement checks a connection out of the engine
    3. The service commits its single statement
    4. The session is closed in `finally`, returning the connection
       even when the handler raised
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

logger = logging.getLogger(__name__)


def _engine_options() -> Dict[str, Any]:
    """
    Builds create_async_engine() keyword arguments for the configured URL.

    SQLite (used by the test suite) picks its own pool class, so pool
    arguments are only passed to server databases.
    """
    options: Dict[str, Any] = {
        # Echo SQL in DEBUG mode for development visibility
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options["pool_pre_ping"] = settings.db_pool_pre_ping
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False keeps ORM attributes readable after commit, which
# the services rely on when building the response from a committed row
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (services execute and commit)
        3. On error: rolls back anything left uncommitted
        4. Always: closes the session (returns connection to the engine)

    Example usage in a route:
        @router.get("/faq")
        async def list_faqs(db: AsyncSession = Depends(get_db_session)):
            return await faq_service.list_entries(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_schema(bind: AsyncEngine = engine) -> None:
    """
    Creates any missing tables registered on Base.metadata.

    Used by the lifespan when DB_CREATE_SCHEMA is enabled and by the test
    suite against in-memory SQLite. Existing tables are left untouched.
    """
    # Registers FaqEntry on Base.metadata
    from app.models import faq  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema check complete: %s", ", ".join(sorted(Base.metadata.tables)))


async def dispose_engine() -> None:
    """Closes all pooled connections; called during application shutdown."""
    await engine.dispose()
