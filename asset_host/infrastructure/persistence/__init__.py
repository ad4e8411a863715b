"""Persistence: directory database engine and the SQL tenant directory."""

from asset_host.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from asset_host.infrastructure.persistence.tenant_directory import SqlTenantDirectory

__all__ = ["SqlTenantDirectory", "dispose_engine", "get_session_factory"]
