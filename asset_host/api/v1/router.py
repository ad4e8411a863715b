"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from asset_host.api.v1.dependencies.
"""

from fastapi import APIRouter

from asset_host.api.v1.endpoints import domains, health, rewrite

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(rewrite.router, tags=["rewrite"])
api_router.include_router(domains.router, tags=["domains"])
