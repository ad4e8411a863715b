"""Rewrite engine dependencies (composition root).

A new DomainResolver and UrlRewriter are built for every request, so the
resolver memo is scoped to one execution context. The cache, directory,
static host and policies are process-wide and live on app.state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from asset_host.application.policies import RewritePolicies
from asset_host.application.services.cache_buster import CacheBuster
from asset_host.application.services.domain_resolver import DomainResolver
from asset_host.application.services.url_rewriter import UrlRewriter
from asset_host.core.config import Settings, get_settings
from asset_host.core.execution_context import ExecutionContext, get_execution_context


def get_policies(request: Request) -> RewritePolicies:
    """Deployment policies registered at app creation."""
    return getattr(request.app.state, "policies", None) or RewritePolicies()


async def get_domain_resolver(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    policies: Annotated[RewritePolicies, Depends(get_policies)],
) -> DomainResolver:
    """Domain resolver for this request (fresh memo)."""
    return DomainResolver.from_settings(
        settings,
        get_execution_context(),
        cache=getattr(request.app.state, "cache", None),
        directory=getattr(request.app.state, "directory", None),
        locality_override=policies.locality_override,
    )


async def get_url_rewriter(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    policies: Annotated[RewritePolicies, Depends(get_policies)],
    resolver: Annotated[DomainResolver, Depends(get_domain_resolver)],
) -> UrlRewriter:
    """URL rewriter for this request, with the cache buster when enabled."""
    context: ExecutionContext = get_execution_context()
    post_processor = None
    if settings.cache_buster_enabled:
        post_processor = CacheBuster.from_settings(
            settings, getattr(request.app.state, "cache", None)
        )
    return UrlRewriter(
        getattr(request.app.state, "static_host", None),
        resolver,
        context,
        rewrite_veto=policies.rewrite_veto,
        post_processor=post_processor,
    )
