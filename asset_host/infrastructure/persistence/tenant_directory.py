"""SQL-backed tenant directory (sites and custom domain mappings)."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.expression import TableClause

from asset_host.domain.exceptions import DirectoryQueryFailedException
from asset_host.infrastructure.persistence.tables import (
    domain_mapping_table,
    sites_table,
)

logger = logging.getLogger(__name__)


class SqlTenantDirectory:
    """Reads (host, tenant_id) pairs from the CMS database.

    Any SQLAlchemy error is raised as DirectoryQueryFailedException; the
    domain resolver turns that into an empty result.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        sites_table_name: str = "wp_blogs",
        domain_mapping_table_name: str = "wp_domain_mapping",
    ) -> None:
        self.session_factory = session_factory
        self.sites = sites_table(sites_table_name)
        self.domain_mapping = domain_mapping_table(domain_mapping_table_name)

    async def list_all_tenant_hosts(self) -> list[tuple[str, int]]:
        """Return (domain, blog_id) for every site in the network."""
        return await self._list_hosts(self.sites)

    async def list_mapped_hosts(self) -> list[tuple[str, int]]:
        """Return (domain, blog_id) for every custom domain mapping."""
        return await self._list_hosts(self.domain_mapping)

    async def _list_hosts(self, source: TableClause) -> list[tuple[str, int]]:
        stmt = select(source.c.domain, source.c.blog_id)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()
        except SQLAlchemyError as e:
            raise DirectoryQueryFailedException(source.name, str(e)) from e
        logger.debug("Directory %s returned %d rows", source.name, len(rows))
        return [(str(domain), int(blog_id)) for domain, blog_id in rows]
