"""Core: config, constants, execution context, and application bootstrap."""

from asset_host.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
