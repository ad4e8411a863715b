"""Pytest configuration and fixtures for asset-host.

In-memory fakes stand in for Redis and the tenant directory so unit and
API tests run without external services. HTTP tests use httpx against
the FastAPI app (ASGI) with app.state wired by hand, since ASGITransport
does not run the lifespan.
"""

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from asset_host.application.policies import RewritePolicies
from asset_host.application.services.domain_resolver import DomainResolver
from asset_host.core.config import get_settings
from asset_host.domain.exceptions import DirectoryQueryFailedException


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCache:
    """In-memory TTL cache implementing CacheProtocol."""

    def __init__(self, clock: FakeClock | None = None, available: bool = True) -> None:
        self.clock = clock or FakeClock()
        self.available = available
        self.store: dict[str, tuple[Any, float]] = {}
        self.set_calls: list[tuple[str, Any, int]] = []

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> Any:
        entry = self.store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self.store[key]
            return None
        return value

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        self.store[key] = (value, self.clock() + ttl)
        self.set_calls.append((key, value, ttl))
        return True

    def expires_at(self, key: str) -> float:
        return self.store[key][1]


class FakeDirectory:
    """Tenant directory returning fixed rows and counting queries."""

    def __init__(
        self,
        tenant_hosts: list[tuple[str, int]] | None = None,
        mapped_hosts: list[tuple[str, int]] | None = None,
        fail: bool = False,
    ) -> None:
        self.tenant_hosts = tenant_hosts or []
        self.mapped_hosts = mapped_hosts or []
        self.fail = fail
        self.tenant_queries = 0
        self.mapped_queries = 0

    async def list_all_tenant_hosts(self) -> list[tuple[str, int]]:
        self.tenant_queries += 1
        if self.fail:
            raise DirectoryQueryFailedException("wp_blogs", "connection refused")
        return list(self.tenant_hosts)

    async def list_mapped_hosts(self) -> list[tuple[str, int]]:
        self.mapped_queries += 1
        if self.fail:
            raise DirectoryQueryFailedException("wp_domain_mapping", "connection refused")
        return list(self.mapped_hosts)


class StaticDomainResolver(DomainResolver):
    """Resolver with a fixed DomainSet (no cache, no directory)."""

    def __init__(self, domains: dict[str, int], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.domains = dict(domains)

    async def resolve_domains(self) -> dict[str, int]:
        return dict(self.domains)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> FakeCache:
    return FakeCache(clock)


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory(
        tenant_hosts=[("example.com", 1), ("blog.example.com", 2)],
        mapped_hosts=[("example.org", 2)],
    )


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Reset env-driven settings to defaults (no Redis, no directory) for the test."""
    monkeypatch.setenv("REDIS_ENABLED", "false")
    monkeypatch.setenv("MULTISITE", "false")
    monkeypatch.setenv("DOMAIN_MAPPING_ENABLED", "false")
    monkeypatch.setenv("STATIC_HOST", "static.example.com")
    monkeypatch.setenv("SITE_URL", "https://example.com/")
    monkeypatch.setenv("DNS_PREFETCH_HOSTS", "stats.example.com, i.example.com")
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
async def client(settings_env, cache: FakeCache) -> AsyncClient:
    """Async HTTP client against a freshly built app (ASGI), state wired by hand."""
    from asset_host.main import create_app

    app = create_app(RewritePolicies())
    app.state.static_host = "static.example.com"
    app.state.cache = cache
    app.state.directory = None
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="https://example.com") as ac:
        yield ac
