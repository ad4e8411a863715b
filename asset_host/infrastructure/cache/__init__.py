"""Cache: Redis service and cache key utilities.

Used by the domain resolver (network/mapped domain sets) and the cache
buster (file mtimes). Key format is in keys.py (DRY).
"""

from asset_host.infrastructure.cache.cache_protocol import CacheProtocol
from asset_host.infrastructure.cache.keys import (
    mapped_domains_key,
    mtime_key,
    network_domains_key,
)
from asset_host.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "mapped_domains_key",
    "mtime_key",
    "network_domains_key",
]
