"""Tests for Settings validation, static host resolution, and resource hints."""

import pytest
from pydantic import ValidationError

from asset_host.application.policies import resolve_static_host
from asset_host.application.services.resource_hints import render_dns_prefetch
from asset_host.core.config import Settings


def test_settings_defaults(settings_env: pytest.MonkeyPatch) -> None:
    """Default static host, cache life and single-tenant mode."""
    settings_env.delenv("STATIC_HOST")
    settings = Settings()
    assert settings.static_host == "s.example.com"
    assert settings.cache_life_seconds == 1800
    assert settings.multisite is False


def test_multisite_requires_database_url(settings_env: pytest.MonkeyPatch) -> None:
    """MULTISITE without DATABASE_URL fails validation."""
    settings_env.setenv("MULTISITE", "true")
    settings_env.setenv("DATABASE_URL", "")
    with pytest.raises(ValidationError):
        Settings()


def test_multisite_with_database_url(settings_env: pytest.MonkeyPatch) -> None:
    """MULTISITE with a DATABASE_URL validates."""
    settings_env.setenv("MULTISITE", "true")
    settings_env.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost/wp")
    assert Settings().multisite is True


def test_cache_life_must_be_positive(settings_env: pytest.MonkeyPatch) -> None:
    """A zero cache life is rejected."""
    settings_env.setenv("CACHE_LIFE_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_dns_prefetch_host_list(settings_env: pytest.MonkeyPatch) -> None:
    """Comma-separated hosts are split and stripped."""
    assert Settings().dns_prefetch_host_list == ["stats.example.com", "i.example.com"]


def test_static_host_configured_value() -> None:
    """Without a policy the configured host is used."""
    assert resolve_static_host("s.example.com", None) == "s.example.com"


def test_static_host_policy_overrides() -> None:
    """The policy's return value replaces the configured host."""
    assert resolve_static_host("s.example.com", lambda host: "cdn.example.net") == (
        "cdn.example.net"
    )


def test_static_host_policy_can_set_when_unconfigured() -> None:
    """The policy may supply a host when none is configured."""
    assert resolve_static_host("", lambda host: host or "s2.example.com") == "s2.example.com"


@pytest.mark.parametrize("configured", ["", None, "   "])
def test_static_host_unset_is_none(configured: str | None) -> None:
    """Empty or blank hosts mean not initialized."""
    assert resolve_static_host(configured, None) is None


def test_render_dns_prefetch() -> None:
    """One escaped link tag per host; nothing for no hosts."""
    html = render_dns_prefetch(["stats.example.com", "a'b.com"])
    assert html.splitlines() == [
        "<link rel='dns-prefetch' href='//stats.example.com'>",
        "<link rel='dns-prefetch' href='//a&#x27;b.com'>",
    ]
    assert render_dns_prefetch([]) == ""
