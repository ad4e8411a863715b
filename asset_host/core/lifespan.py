"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (static host,
cache, tenant directory, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from asset_host.application.policies import RewritePolicies, resolve_static_host
from asset_host.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: static host (through the static host policy), Redis cache
    (if enabled), tenant directory (if multisite or domain mapping).
    Shutdown order: cache disconnect, SQL engine dispose.
    """
    settings = get_settings()
    policies: RewritePolicies = getattr(app.state, "policies", None) or RewritePolicies()
    app.state.policies = policies

    # ---- Startup ----
    app.state.static_host = resolve_static_host(settings.static_host, policies.static_host)
    logger.info("Static host: %s", app.state.static_host)

    cache = None
    if settings.redis_enabled:
        from asset_host.infrastructure.cache.redis_cache import CacheService

        cache = CacheService(settings=settings)
        await cache.connect()
    app.state.cache = cache

    if settings.multisite or settings.domain_mapping_enabled:
        from asset_host.infrastructure.persistence import (
            SqlTenantDirectory,
            get_session_factory,
        )

        session_factory = get_session_factory()
        app.state.directory = (
            SqlTenantDirectory(
                session_factory,
                sites_table_name=settings.sites_table,
                domain_mapping_table_name=settings.domain_mapping_table,
            )
            if session_factory is not None
            else None
        )
    else:
        app.state.directory = None

    yield

    # ---- Shutdown ----
    # Only the client opened here is closed here.
    if cache is not None:
        await cache.disconnect()
        logger.info("Cache disconnected")

    from asset_host.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
