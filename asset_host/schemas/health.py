"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    static_host: str | None = Field(default=None, description="Configured static host")
    cache_available: bool = Field(default=False, description="True if Redis is usable")
