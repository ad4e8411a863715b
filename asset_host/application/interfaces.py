"""Interfaces (ports) for the application layer.

Protocols define the contracts of the tenant directory and of the
deployment policies that can alter rewrite decisions (DIP).
"""

from __future__ import annotations

from typing import Protocol

from asset_host.domain.enums import RewriteContext


class TenantDirectoryProtocol(Protocol):
    """Protocol for the directory of tenant hosts (sites and mapped domains)."""

    async def list_all_tenant_hosts(self) -> list[tuple[str, int]]:
        """Return (host, tenant_id) for every tenant's canonical host.

        Raises DirectoryQueryFailedException when the directory cannot be read.
        """
        ...

    async def list_mapped_hosts(self) -> list[tuple[str, int]]:
        """Return (host, tenant_id) for every custom domain mapping.

        Raises DirectoryQueryFailedException when the directory cannot be read.
        """
        ...


class StaticHostPolicy(Protocol):
    """Override the configured static host. Applied once at startup."""

    def __call__(self, static_host: str) -> str: ...


class LocalityOverridePolicy(Protocol):
    """Override whether a host counts as local (is_local is the computed answer)."""

    def __call__(self, is_local: bool, host: str) -> bool: ...


class RewriteVetoPolicy(Protocol):
    """Return True to veto a rewrite that passed every other check."""

    def __call__(self, host: str, url: str, context: RewriteContext) -> bool: ...


class UrlPostProcessor(Protocol):
    """Post-process a rewritten URL (e.g. append a cache-busting argument)."""

    async def apply(self, url: str) -> str: ...
