"""Persistence: async engine and session factory for the tenant directory.

The directory lives in the CMS database and is read-only from here; the
schema is owned by the CMS, so there are no migrations in this project.

Engine and session factory are created lazily on first use so import
does not trigger Settings validation.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from asset_host.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use (when DATABASE_URL is set)."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.info("Tenant directory engine created")


def get_session_factory() -> async_sessionmaker[AsyncSession] | None:
    """Return the session factory, or None when no directory database is configured."""
    _ensure_engine()
    return AsyncSessionLocal


async def dispose_engine() -> None:
    """Dispose the engine (if created). Call on app shutdown."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Tenant directory engine disposed")
    engine = None
    AsyncSessionLocal = None
