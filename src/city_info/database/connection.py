"""Engine and session lifecycle for the city store.

One async engine per process, created by `init_db` during app startup and
disposed by `close_db`. The default URL points at a local SQLite file;
pool sizing only applies to server databases.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from city_info.config import Settings, get_settings
from city_info.database.models import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None

NOT_INITIALIZED = "City store not initialized; call init_db() first"


def _engine_options(settings: Settings) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.database_echo}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_pre_ping=True,
        )
    return options


async def init_db() -> None:
    """Open the city store using the configured database URL."""
    global _engine, _session_factory

    settings = get_settings()
    logger.info(f"Opening city store ({'sqlite' if settings.is_sqlite else 'server'})")

    _engine = create_async_engine(settings.database_url, **_engine_options(settings))
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def close_db() -> None:
    global _engine, _session_factory

    if _engine is None:
        return

    logger.info("Closing city store")
    await _engine.dispose()
    _engine = None
    _session_factory = None


async def create_tables() -> None:
    """Create the cities and points-of-interest tables if missing."""
    if _engine is None:
        raise RuntimeError(NOT_INITIALIZED)

    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("City store tables ready")


@asynccontextmanager
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that is rolled back on error and always closed.

    Nothing is committed implicitly.
    """
    if _session_factory is None:
        raise RuntimeError(NOT_INITIALIZED)

    session = _session_factory()
    try:
        yield session
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session dependency."""
    async with get_db() as session:
        yield session
