"""db-diff: structural diff of two MySQL schemas.

Parses ``SHOW CREATE TABLE`` output, compares a source database against a
target, and produces the ``ALTER TABLE`` / ``CREATE TABLE`` statements that
bring the target in line, optionally applying them.

Usage:
    from db_diff import get_introspector, generate_diff, apply_diff
    from db_diff import parse_table_definition, diff_tables
"""

__version__ = "0.1.0"

# Adapters
from db_diff.adapters.base import DatabaseClient, SchemaSource
from db_diff.adapters.mysql import MySQLAdapter

# Config
from db_diff.config.loader import load_db_config
from db_diff.config.models import DatabaseConfig, DatabaseProfile

# Errors
from db_diff.exceptions import (
    DbDiffError,
    ExecutionError,
    ParseError,
    QueryError,
    UnknownTableTypeError,
)

# Factory
from db_diff.factory import ProfileNotFoundError, get_introspector, resolve_url

# Schema
from db_diff.schema.comparator import diff_tables
from db_diff.schema.diff import apply_diff, diff_schemas, generate_diff
from db_diff.schema.introspector import SchemaIntrospector
from db_diff.schema.models import SchemaDiffReport, TableDiff, TableSchema
from db_diff.schema.parser import parse_table_definition

__all__ = [
    # Adapters
    "DatabaseClient",
    "MySQLAdapter",
    "SchemaSource",
    # Config
    "load_db_config",
    "DatabaseProfile",
    "DatabaseConfig",
    # Errors
    "DbDiffError",
    "ParseError",
    "UnknownTableTypeError",
    "ExecutionError",
    "QueryError",
    "ProfileNotFoundError",
    # Factory
    "get_introspector",
    "resolve_url",
    # Schema
    "parse_table_definition",
    "diff_tables",
    "SchemaIntrospector",
    "generate_diff",
    "apply_diff",
    "diff_schemas",
    "TableSchema",
    "TableDiff",
    "SchemaDiffReport",
]
