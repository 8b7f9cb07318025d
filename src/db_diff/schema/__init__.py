"""Table parsing, comparison, and schema diff orchestration.

Provides the ``SHOW CREATE TABLE`` parser (``parse_table_definition``),
the per-table comparator (``diff_tables``), live introspection
(``SchemaIntrospector``), and the whole-schema run (``generate_diff``,
``apply_diff``, ``diff_schemas``).

Usage:
    from db_diff.schema import parse_table_definition, diff_tables
    from db_diff.schema import SchemaIntrospector, generate_diff, apply_diff
"""

from db_diff.schema.comparator import diff_tables
from db_diff.schema.diff import apply_diff, diff_schemas, generate_diff
from db_diff.schema.introspector import SchemaIntrospector
from db_diff.schema.models import (
    AddColumn,
    AlterClause,
    ApplyResult,
    DropColumn,
    DropPrimaryKey,
    ModifyColumn,
    ReplacePrimaryKey,
    SchemaDiffReport,
    TableDiff,
    TableSchema,
    TableStatement,
)
from db_diff.schema.parser import parse_table_definition

__all__ = [
    "parse_table_definition",
    "diff_tables",
    "SchemaIntrospector",
    "generate_diff",
    "apply_diff",
    "diff_schemas",
    "TableSchema",
    "AlterClause",
    "AddColumn",
    "ModifyColumn",
    "DropColumn",
    "ReplacePrimaryKey",
    "DropPrimaryKey",
    "TableDiff",
    "TableStatement",
    "SchemaDiffReport",
    "ApplyResult",
]
