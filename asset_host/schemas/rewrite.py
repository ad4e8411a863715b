"""Rewrite API schemas."""

from pydantic import BaseModel, Field

from asset_host.domain.enums import RewriteContext


class RewriteRequest(BaseModel):
    """Request body for POST /rewrite: one URL from an emission point."""

    url: str = Field(..., description="URL as emitted by the CMS")
    context: RewriteContext = Field(..., description="Emission point that produced the URL")


class RewriteResponse(BaseModel):
    """Response for POST /rewrite."""

    url: str = Field(..., description="URL to emit (possibly on the static host)")
    original_url: str = Field(..., description="URL as received")
    rewritten: bool = Field(..., description="True if the URL was changed")


class RewriteBatchRequest(BaseModel):
    """Request body for POST /rewrite/batch."""

    items: list[RewriteRequest] = Field(default_factory=list, max_length=1000)


class RewriteBatchResponse(BaseModel):
    """Response for POST /rewrite/batch (same order as the request)."""

    items: list[RewriteResponse]


class UrlResponse(BaseModel):
    """Response for synthesized URLs (upload path, concat base)."""

    url: str


class DomainsResponse(BaseModel):
    """Response for GET /domains: host -> tenant id."""

    domains: dict[str, int]
