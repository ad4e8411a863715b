"""Domain set and resource hint endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from asset_host.api.v1.dependencies import get_domain_resolver
from asset_host.application.services.domain_resolver import DomainResolver
from asset_host.application.services.resource_hints import render_dns_prefetch
from asset_host.core.config import Settings, get_settings
from asset_host.schemas.rewrite import DomainsResponse

router = APIRouter()


@router.get("/domains", response_model=DomainsResponse)
async def list_domains(
    resolver: Annotated[DomainResolver, Depends(get_domain_resolver)],
) -> DomainsResponse:
    """Hosts treated as local for the current request (host -> tenant id)."""
    return DomainsResponse(domains=await resolver.resolve_domains())


@router.get("/dns-prefetch", response_class=HTMLResponse)
def dns_prefetch(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HTMLResponse:
    """<link rel='dns-prefetch'> tags for the page head."""
    return HTMLResponse(content=render_dns_prefetch(settings.dns_prefetch_host_list))
