"""Domain resolver: which hosts are local to this deployment.

One resolver is built per execution context (request). Domain sets are
read through two layers: a per-resolver memo, then the shared TTL cache,
then the tenant directory. The memo dies with the resolver, so tenant
state never leaks from one request into the next; the shared cache is
eventually consistent within cache_life seconds.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import urlsplit

from asset_host.application.interfaces import (
    LocalityOverridePolicy,
    TenantDirectoryProtocol,
)
from asset_host.core.config import Settings
from asset_host.core.constants import DEFAULT_TENANT_ID
from asset_host.core.execution_context import ExecutionContext
from asset_host.domain.exceptions import (
    ConfigurationException,
    DirectoryQueryFailedException,
)
from asset_host.infrastructure.cache.cache_protocol import CacheProtocol
from asset_host.infrastructure.cache.keys import (
    mapped_domains_key,
    network_domains_key,
)

logger = logging.getLogger(__name__)

DomainSet = dict[str, int]


def _host_of(url: str | None) -> str | None:
    """Return the lowercased host of url, or None if absent/unparsable."""
    if not url:
        return None
    try:
        return urlsplit(url).hostname
    except ValueError:
        logger.warning("Ignoring unparsable site URL %r", url)
        return None


def _coerce_domain_set(value: Any) -> DomainSet | None:
    """Return value as a DomainSet, or None if it is not a host -> id mapping."""
    if not isinstance(value, dict):
        return None
    try:
        return {str(host): int(tenant_id) for host, tenant_id in value.items()}
    except (TypeError, ValueError):
        return None


class DomainResolver:
    """Resolves the DomainSet (host -> tenant id) for the current request.

    Single-tenant deployments use the request host and the canonical site
    host; multi-tenant deployments read every tenant's host from the
    directory. Custom domain mappings, when enabled, are merged over the
    network set (mapped entries win on collision).
    """

    def __init__(
        self,
        cache: CacheProtocol | None = None,
        directory: TenantDirectoryProtocol | None = None,
        *,
        multisite: bool = False,
        domain_mapping_enabled: bool = False,
        cache_life: int = 1800,
        request_host: str | None = None,
        site_host: str | None = None,
        locality_override: LocalityOverridePolicy | None = None,
    ) -> None:
        if (multisite or domain_mapping_enabled) and directory is None:
            raise ConfigurationException(
                "A tenant directory is required for multisite or domain mapping"
            )
        self.cache = cache
        self.directory = directory
        self.multisite = multisite
        self.domain_mapping_enabled = domain_mapping_enabled
        self.cache_life = cache_life
        self.request_host = request_host.lower() if request_host else None
        self.site_host = site_host.lower() if site_host else None
        self.locality_override = locality_override
        self._memo: dict[str, DomainSet] = {}

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        context: ExecutionContext,
        cache: CacheProtocol | None = None,
        directory: TenantDirectoryProtocol | None = None,
        locality_override: LocalityOverridePolicy | None = None,
    ) -> DomainResolver:
        """Build a resolver for one execution context from settings."""
        return cls(
            cache,
            directory,
            multisite=settings.multisite,
            domain_mapping_enabled=settings.domain_mapping_enabled,
            cache_life=settings.cache_life_seconds,
            request_host=context.request_host,
            site_host=_host_of(settings.site_url),
            locality_override=locality_override,
        )

    async def resolve_domains(self) -> DomainSet:
        """Return network domains merged with mapped domains (mapped wins)."""
        network = await self.resolve_network_domains()
        mapped: DomainSet = {}
        if self.domain_mapping_enabled:
            mapped = await self.resolve_mapped_domains()

        return {**network, **mapped}

    async def resolve_network_domains(self) -> DomainSet:
        """Return host -> tenant id for every tenant in the network.

        Single-tenant deployments answer from the request and site hosts
        without a directory lookup.
        """
        if not self.multisite:
            return self._single_site_domains()
        if self.directory is None:
            return {}
        return await self._read_through(
            network_domains_key(), self.directory.list_all_tenant_hosts
        )

    async def resolve_mapped_domains(self) -> DomainSet:
        """Return host -> tenant id for every custom domain mapping."""
        if self.directory is None:
            return {}
        return await self._read_through(
            mapped_domains_key(), self.directory.list_mapped_hosts
        )

    async def is_local(self, host: str) -> bool:
        """Return True if host belongs to this deployment (after locality override)."""
        domains = await self.resolve_domains()
        local = host.lower() in domains
        if self.locality_override is not None:
            local = bool(self.locality_override(local, host))
        return local

    def _single_site_domains(self) -> DomainSet:
        domains: DomainSet = {}
        for host in (self.request_host, self.site_host):
            if host:
                domains[host] = DEFAULT_TENANT_ID
        return domains

    async def _read_through(
        self,
        key: str,
        load: Callable[[], Awaitable[list[tuple[str, int]]]],
    ) -> DomainSet:
        """Memo, then shared cache, then directory; rebuilds both layers on miss."""
        memoized = self._memo.get(key)
        if memoized is not None:
            return memoized

        if self.cache is not None and self.cache.is_available():
            cached = _coerce_domain_set(await self.cache.get(key))
            if cached is not None:
                self._memo[key] = cached
                return cached

        domains: DomainSet = {}
        try:
            rows = await load()
        except DirectoryQueryFailedException as e:
            logger.warning("%s; treating %s as empty", e.message, key)
            rows = []
        for host, tenant_id in rows:
            domains[host.lower()] = int(tenant_id)
        logger.debug("Rebuilt %s from directory (%d hosts)", key, len(domains))

        # Empty results (including failed queries) are cached too.
        self._memo[key] = domains
        if self.cache is not None and self.cache.is_available():
            await self.cache.set(key, domains, ttl=self.cache_life)
        return domains
