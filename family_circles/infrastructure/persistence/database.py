"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

The genealogy tables are owned by the genealogy application; this service
only reads them (no migrations here).

Engine and session factory are created lazily on first use (get_db) so
import does not trigger Settings validation.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from family_circles.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return AsyncSessionLocal
    settings = get_settings()
    engine_args: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }
    # SQLite uses a single-connection pool; sizing options do not apply.
    if not settings.database_url.startswith("sqlite"):
        engine_args["pool_size"] = settings.db_pool_size or 10
        engine_args["max_overflow"] = (
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        )
        engine_args["pool_recycle"] = 3600
    engine = create_async_engine(settings.database_url, **engine_args)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.info("Database engine created (%s)", engine.url.render_as_string(hide_password=True))
    return AsyncSessionLocal


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency (read-only use).

    Yields a session and closes it on exit. Never commits.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the engine (application shutdown). No-op when never created."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
