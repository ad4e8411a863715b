"""Shared cross-cutting utilities (logging)."""

from asset_host.shared.logging import setup_logging

__all__ = ["setup_logging"]
