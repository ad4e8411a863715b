"""Deployment policies bundle and static host resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from asset_host.application.interfaces import (
    LocalityOverridePolicy,
    RewriteVetoPolicy,
    StaticHostPolicy,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewritePolicies:
    """Policies a deployment injects at construction. All optional."""

    static_host: StaticHostPolicy | None = None
    locality_override: LocalityOverridePolicy | None = None
    rewrite_veto: RewriteVetoPolicy | None = None


def resolve_static_host(configured: str | None, policy: StaticHostPolicy | None) -> str | None:
    """Return the static host after the optional policy; None when unset.

    Args:
        configured: Host from settings (empty or None means not configured).
        policy: Optional override applied to the configured value.

    Returns:
        Final static host, or None if neither config nor policy provides one.
    """
    host = configured or ""
    if policy is not None:
        host = policy(host)
    host = (host or "").strip()
    if not host:
        logger.warning("No static host configured; asset URLs will not be rewritten")
        return None
    return host
