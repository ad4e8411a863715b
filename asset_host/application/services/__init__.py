"""Application services: domain resolution, URL rewriting, cache busting, resource hints."""

from asset_host.application.services.cache_buster import CacheBuster
from asset_host.application.services.domain_resolver import DomainResolver, DomainSet
from asset_host.application.services.resource_hints import render_dns_prefetch
from asset_host.application.services.url_rewriter import UrlRewriter

__all__ = [
    "CacheBuster",
    "DomainResolver",
    "DomainSet",
    "UrlRewriter",
    "render_dns_prefetch",
]
