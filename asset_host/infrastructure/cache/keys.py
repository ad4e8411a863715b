"""Cache key builders. Single place for key format (DRY).

Domain set keys are fixed (one entry per kind, shared by every tenant);
mtime keys hash the asset path so arbitrary paths never leak the
separator into the key.
"""

import hashlib

from asset_host.core.constants import (
    CACHE_KEY_SEP,
    CACHE_NAME_MAPPED_DOMAINS,
    CACHE_NAME_MTIMES,
    CACHE_NAME_NETWORK_DOMAINS,
    CACHE_PREFIX,
)


def network_domains_key() -> str:
    """Cache key for the network (all tenants) domain set."""
    return f"{CACHE_PREFIX}{CACHE_KEY_SEP}{CACHE_NAME_NETWORK_DOMAINS}"


def mapped_domains_key() -> str:
    """Cache key for the custom mapped domain set."""
    return f"{CACHE_PREFIX}{CACHE_KEY_SEP}{CACHE_NAME_MAPPED_DOMAINS}"


def mtime_key(path: str) -> str:
    """Cache key for a file's modification time, by URL path.

    Args:
        path: URL path of the asset (e.g. /wp-content/themes/x/style.css).

    Returns:
        Key of the form asset_host:mtimes:<md5 hex>.
    """
    digest = hashlib.md5(
        f"{CACHE_PREFIX}{CACHE_KEY_SEP}{CACHE_NAME_MTIMES}{path}".encode("utf-8")
    ).hexdigest()
    return f"{CACHE_PREFIX}{CACHE_KEY_SEP}{CACHE_NAME_MTIMES}{CACHE_KEY_SEP}{digest}"
