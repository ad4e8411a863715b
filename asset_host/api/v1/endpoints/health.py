"""Health check endpoint. Used for liveness probes."""

from fastapi import APIRouter, Request

from asset_host.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok status, the static host in use, and cache availability."""
    cache = getattr(request.app.state, "cache", None)
    return HealthResponse(
        static_host=getattr(request.app.state, "static_host", None),
        cache_available=bool(cache is not None and cache.is_available()),
    )
