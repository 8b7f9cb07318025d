"""MySQL schema introspection via information_schema.

This module supplies the two read-side collaborators of a diff run:
- Table listing: base tables of the connected database, views set aside
- Table definitions: raw ``SHOW CREATE TABLE`` text, untouched

All queries go through a ``DatabaseClient``; the database is whichever one
the client's URL selects (``DATABASE()``).
"""

import logging

from db_diff.adapters.base import DatabaseClient
from db_diff.exceptions import UnknownTableTypeError
from db_diff.schema.models import quote_identifier

logger = logging.getLogger(__name__)


class SchemaIntrospector:
    """Introspects the tables of one MySQL database.

    Usage:
        introspector = SchemaIntrospector(adapter)

        for table in introspector.list_tables():
            print(introspector.show_create_table(table))
    """

    BASE_TABLE = "BASE TABLE"
    VIEW = "VIEW"

    def __init__(self, client: DatabaseClient, excluded_tables: set[str] | None = None):
        """Initialize with a database client.

        Args:
            client: Adapter connected to the database to introspect.
            excluded_tables: Table names to leave out of ``list_tables()``.
        """
        self.client = client
        self.excluded_tables: set[str] = set(excluded_tables or ())
        self.views: list[str] = []

    def list_tables(self, include_excluded: bool = False) -> list[str]:
        """Get base table names of the current database.

        Views are collected in ``self.views`` and not returned.

        Args:
            include_excluded: Also return tables named in
                ``excluded_tables``.  Existence checks need the full listing:
                an excluded table still exists and must not be re-created.

        Returns:
            Table names, ordered by name.

        Raises:
            UnknownTableTypeError: If an entity is neither a base table
                nor a view.
        """
        query = """
            SELECT TABLE_NAME AS table_name, TABLE_TYPE AS table_type
            FROM information_schema.tables
            WHERE TABLE_SCHEMA = DATABASE()
            ORDER BY TABLE_NAME
        """
        tables: list[str] = []
        views: list[str] = []

        for row in self.client.fetch_all(query):
            name, table_type = row["table_name"], row["table_type"]
            if table_type == self.BASE_TABLE:
                if include_excluded or name not in self.excluded_tables:
                    tables.append(name)
            elif table_type == self.VIEW:
                views.append(name)
            else:
                raise UnknownTableTypeError(name, table_type)

        self.views = views
        logger.debug("Found %d tables and %d views", len(tables), len(views))
        return tables

    def show_create_table(self, table: str) -> str:
        """Get the raw ``SHOW CREATE TABLE`` definition of *table*."""
        rows = self.client.fetch_all(f"SHOW CREATE TABLE {quote_identifier(table)}")
        return rows[0]["Create Table"]
