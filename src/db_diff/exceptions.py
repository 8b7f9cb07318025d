"""Exception hierarchy for db-diff.

Every error raised by the library derives from ``DbDiffError`` so callers
(and the CLI) can catch the whole family in one place.  None of them are
retried or recovered from internally -- a failure aborts the current run.
"""


class DbDiffError(Exception):
    """Base class for all db-diff errors."""


class ParseError(DbDiffError):
    """Raised when a ``SHOW CREATE TABLE`` definition cannot be parsed.

    Either the first line is not a ``CREATE TABLE`` declaration, or a later
    line matches none of the recognized row patterns.
    """


class UnknownTableTypeError(DbDiffError):
    """Raised when an introspected entity is neither a base table nor a view."""

    def __init__(self, table: str, table_type: str) -> None:
        super().__init__(f"Unknown table type '{table_type}' for {table}")
        self.table = table
        self.table_type = table_type


class ExecutionError(DbDiffError):
    """Raised when a generated statement fails to apply on the target."""

    def __init__(self, message: str, sql: str | None = None, table: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql
        self.table = table


class QueryError(DbDiffError):
    """Raised when a read query (listing, ``SHOW CREATE TABLE``) fails.

    Covers connection and authentication failures as well, since the first
    query of a run is what opens the connection.
    """

    def __init__(self, message: str, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql
