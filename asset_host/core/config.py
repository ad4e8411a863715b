"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The tenant directory database is validated at load
time when a directory-backed mode (multisite or domain mapping) is on.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; database_url becomes required
    when multisite or domain_mapping_enabled is set (see
    validate_directory_backend).
    """

    # App
    app_name: str = "asset-host"
    app_version: str = "1.1.0"
    debug: bool = False

    # Static host: every eligible asset URL is rewritten to this host.
    # Empty string means "not initialized" and turns rewriting into a no-op.
    static_host: str = "s.example.com"
    cache_life_seconds: int = 1800

    # Deployment shape
    multisite: bool = False
    domain_mapping_enabled: bool = False
    site_url: str | None = None

    # Tenant directory (CMS database, read-only)
    database_url: str = ""
    database_echo: bool = False
    sites_table: str = "wp_blogs"
    domain_mapping_table: str = "wp_domain_mapping"

    # Redis Cache
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # Cache buster (appends ?m=<mtime> to rewritten URLs)
    cache_buster_enabled: bool = False
    document_root: str = "/var/www/html"
    mtime_cache_ttl_missing: int = 900
    mtime_cache_ttl_found: int = 86400

    # Resource hints: comma-separated hosts for <link rel='dns-prefetch'>
    dns_prefetch_hosts: str = ""

    # Request context
    tenant_header_name: str = "X-Tenant-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_directory_backend(self) -> "Settings":
        """Validate cache life and the directory database.

        - cache_life_seconds must be positive.
        - multisite / domain_mapping_enabled: DATABASE_URL required.
        """
        if self.cache_life_seconds <= 0:
            raise ValueError(
                f"cache_life_seconds must be positive, got: {self.cache_life_seconds}"
            )
        if (self.multisite or self.domain_mapping_enabled) and not self.database_url:
            raise ValueError(
                "DATABASE_URL is required when MULTISITE or DOMAIN_MAPPING_ENABLED is set. "
                "Set in environment or .env file."
            )
        return self

    @property
    def dns_prefetch_host_list(self) -> list[str]:
        """Return dns_prefetch_hosts split on commas, blanks removed."""
        return [h.strip() for h in self.dns_prefetch_hosts.split(",") if h.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
