"""Lightweight table constructs for the CMS directory tables.

Table names carry the CMS prefix (e.g. wp_blogs), so they are built from
settings rather than declared as ORM models. Only the columns read here
are described.
"""

from sqlalchemy import Integer, String, column, table
from sqlalchemy.sql.expression import TableClause


def sites_table(name: str) -> TableClause:
    """Sites (tenants) table: one row per site with its canonical domain."""
    return table(name, column("blog_id", Integer), column("domain", String))


def domain_mapping_table(name: str) -> TableClause:
    """Domain mapping table: custom domains pointing at a site."""
    return table(name, column("blog_id", Integer), column("domain", String))
