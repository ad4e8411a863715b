"""Rewrite endpoints: called by the asset-emission pipeline for each emitted URL."""

from typing import Annotated

from fastapi import APIRouter, Depends

from asset_host.api.v1.dependencies import get_url_rewriter
from asset_host.application.services.url_rewriter import UrlRewriter
from asset_host.schemas.rewrite import (
    RewriteBatchRequest,
    RewriteBatchResponse,
    RewriteRequest,
    RewriteResponse,
    UrlResponse,
)

router = APIRouter()


async def _rewrite_one(rewriter: UrlRewriter, item: RewriteRequest) -> RewriteResponse:
    url = await rewriter.rewrite_for_context(item.url, item.context)
    return RewriteResponse(url=url, original_url=item.url, rewritten=url != item.url)


@router.post("/rewrite", response_model=RewriteResponse)
async def rewrite_url(
    body: RewriteRequest,
    rewriter: Annotated[UrlRewriter, Depends(get_url_rewriter)],
) -> RewriteResponse:
    """Rewrite one URL for its emission point (unchanged when not eligible)."""
    return await _rewrite_one(rewriter, body)


@router.post("/rewrite/batch", response_model=RewriteBatchResponse)
async def rewrite_batch(
    body: RewriteBatchRequest,
    rewriter: Annotated[UrlRewriter, Depends(get_url_rewriter)],
) -> RewriteBatchResponse:
    """Rewrite many URLs with one resolver, so domain sets are loaded once."""
    items = [await _rewrite_one(rewriter, item) for item in body.items]
    return RewriteBatchResponse(items=items)


@router.get("/upload-url-path", response_model=UrlResponse)
def upload_url_path(
    rewriter: Annotated[UrlRewriter, Depends(get_url_rewriter)],
) -> UrlResponse:
    """Uploads base URL on the static host for the current tenant."""
    return UrlResponse(url=rewriter.rewrite_for_upload())


@router.get("/concat-base-url", response_model=UrlResponse)
def concat_base_url(
    rewriter: Annotated[UrlRewriter, Depends(get_url_rewriter)],
) -> UrlResponse:
    """Base URL for concatenated assets, scheme following the request."""
    return UrlResponse(url=rewriter.rewrite_for_concat_base())
