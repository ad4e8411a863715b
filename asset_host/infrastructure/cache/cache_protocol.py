"""Cache protocol for the domain resolver and cache buster (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for TTL cache backends (e.g. Redis) shared across requests."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds. Returns True if stored."""
        ...
