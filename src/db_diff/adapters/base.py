"""Database client protocol definition.

Defines the ``DatabaseClient`` Protocol that all adapters must implement,
and ``SchemaSource``, the read-side collaborator a diff run compares.
All methods are synchronous -- tables are introspected and altered one at
a time, so there is nothing to gain from an async client here.

Usage:
    from db_diff.adapters.base import DatabaseClient

    def do_work(client: DatabaseClient) -> None:
        rows = client.fetch_all("SHOW CREATE TABLE `users`")
        client.execute("ALTER TABLE `users` ADD COLUMN `email` varchar(255)")
        client.close()
"""

from typing import Any, Protocol


class DatabaseClient(Protocol):
    """Database client interface that all adapters must implement.

    The introspector reads through ``fetch_all()``; generated statements are
    applied through ``execute()``.
    """

    def fetch_all(self, sql: str, params: dict[str, Any] | None = None) -> list[dict]:
        """Run a query and return every row.

        Args:
            sql: SQL query, with ``:name`` style bind parameters.
            params: Optional dict of named parameters.

        Returns:
            List of dicts keyed by column label, one per row.  Empty list
            if the query returned nothing.

        Example:
            rows = client.fetch_all(
                "SELECT TABLE_NAME FROM information_schema.tables "
                "WHERE TABLE_SCHEMA = DATABASE()"
            )
        """
        ...

    def execute(self, sql: str, params: dict[str, Any] | None = None) -> None:
        """Execute a statement that returns no rows (DDL).

        Args:
            sql: Raw SQL statement to execute.
            params: Optional dict of named parameters for the statement.

        Raises:
            ExecutionError: If the database rejects the statement.

        Example:
            client.execute("ALTER TABLE `users` DROP COLUMN `age`")
        """
        ...

    def close(self) -> None:
        """Close the connection and release pooled resources."""
        ...


class SchemaSource(Protocol):
    """Read side of a diff run: one database's table listing and definitions.

    ``SchemaIntrospector`` is the implementation; tests substitute fakes.
    """

    client: DatabaseClient
    excluded_tables: set[str]

    def list_tables(self, include_excluded: bool = False) -> list[str]:
        """Base table names, in listing order.

        With ``include_excluded`` set, tables the profile excludes from
        comparison are listed too.
        """
        ...

    def show_create_table(self, table: str) -> str:
        """Raw ``SHOW CREATE TABLE`` text of *table*."""
        ...
