"""Pydantic models for table parsing and schema diffing.

This module contains schema-domain models:
- Parse model: TableSchema
- Alteration clauses: AddColumn, ModifyColumn, DropColumn,
  ReplacePrimaryKey, DropPrimaryKey
- Diff results: TableDiff, TableStatement, SchemaDiffReport, ApplyResult

Value objects (the table schema, clauses, diffs and the report) are frozen:
they are built once per comparison and never mutated afterwards.  Their
containers are read-only too: tuples, and a mapping proxy for columns.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def quote_identifier(name: str) -> str:
    """Quote a MySQL identifier with backticks."""
    return "`" + name.replace("`", "``") + "`"


# ============================================================================
# Parse Model
# ============================================================================


class TableSchema(BaseModel):
    """Structural snapshot of one table, as parsed from ``SHOW CREATE TABLE``.

    Example:
        >>> table = TableSchema(name="users", columns={"id": "int(11) NOT NULL"})
        >>> table.primary_key is None
        True
    """

    model_config = ConfigDict(frozen=True)

    name: str
    columns: Mapping[str, str] = Field(default_factory=dict, validate_default=True)  # declaration order
    primary_key: str | None = None
    unique_keys: tuple[str, ...] = ()  # parsed, never compared

    @field_validator("columns", mode="after")
    @classmethod
    def _read_only_columns(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("columns")
    def _serialize_columns(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)


# ============================================================================
# Alteration Clauses
# ============================================================================


class AddColumn(BaseModel):
    """Column present in the source but missing from the target."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["add_column"] = "add_column"
    name: str
    definition: str

    def to_sql(self) -> str:
        return f"ADD COLUMN {quote_identifier(self.name)} {self.definition}"


class ModifyColumn(BaseModel):
    """Column present on both sides with a different definition."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["modify_column"] = "modify_column"
    name: str
    definition: str

    def to_sql(self) -> str:
        return f"MODIFY COLUMN {quote_identifier(self.name)} {self.definition}"


class DropColumn(BaseModel):
    """Column present in the target but no longer in the source."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["drop_column"] = "drop_column"
    name: str

    def to_sql(self) -> str:
        return f"DROP COLUMN {quote_identifier(self.name)}"


class ReplacePrimaryKey(BaseModel):
    """Replace the target's primary key with the source's.

    When the target has no primary key at all there is nothing to drop, so
    ``drop_existing`` is False and only the ``ADD`` part is emitted.

    Example:
        >>> ReplacePrimaryKey(definition="(`id`)").to_sql()
        'DROP PRIMARY KEY, ADD PRIMARY KEY (`id`)'
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["replace_primary_key"] = "replace_primary_key"
    definition: str
    drop_existing: bool = True

    def to_sql(self) -> str:
        add = f"ADD PRIMARY KEY {self.definition}"
        if self.drop_existing:
            return f"DROP PRIMARY KEY, {add}"
        return add


class DropPrimaryKey(BaseModel):
    """Drop the target's primary key; the source table has none."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["drop_primary_key"] = "drop_primary_key"

    def to_sql(self) -> str:
        return "DROP PRIMARY KEY"


AlterClause = Annotated[
    AddColumn | ModifyColumn | DropColumn | ReplacePrimaryKey | DropPrimaryKey,
    Field(discriminator="kind"),
]


# ============================================================================
# Diff Results
# ============================================================================


class TableDiff(BaseModel):
    """Ordered alteration clauses for one table.

    Example:
        >>> diff = TableDiff(table="users", clauses=(DropColumn(name="age"),))
        >>> diff.to_sql()
        'ALTER TABLE `users` DROP COLUMN `age`;'
    """

    model_config = ConfigDict(frozen=True)

    table: str
    clauses: tuple[AlterClause, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True if the two tables are structurally identical."""
        return not self.clauses

    def to_sql(self) -> str:
        """Serialize all clauses into a single ``ALTER TABLE`` statement."""
        if self.is_empty:
            return ""
        mods = ", ".join(clause.to_sql() for clause in self.clauses)
        return f"ALTER TABLE {quote_identifier(self.table)} {mods};"


class TableStatement(BaseModel):
    """One entry of the diff report: a creation or alteration statement."""

    model_config = ConfigDict(frozen=True)

    table: str
    kind: Literal["create", "alter"]
    sql: str


class SchemaDiffReport(BaseModel):
    """Result of diffing every source table against the target.

    Example:
        >>> report = SchemaDiffReport()
        >>> report.has_changes
        False
        >>> report.format_report()
        'Schemas match'
    """

    model_config = ConfigDict(frozen=True)

    statements: tuple[TableStatement, ...] = ()
    unchanged_tables: tuple[str, ...] = ()

    @property
    def has_changes(self) -> bool:
        """True if at least one statement was emitted."""
        return bool(self.statements)

    @property
    def created_tables(self) -> list[str]:
        return [s.table for s in self.statements if s.kind == "create"]

    @property
    def altered_tables(self) -> list[str]:
        return [s.table for s in self.statements if s.kind == "alter"]

    def to_sql(self) -> str:
        """All statements in report order, separated by a blank line."""
        return "\n\n".join(s.sql for s in self.statements)

    def format_report(self) -> str:
        """Format the report as a human-readable summary."""
        if not self.has_changes:
            return "Schemas match"

        lines = ["Schema differences found:"]

        if self.created_tables:
            lines.append(f"\n  Missing tables ({len(self.created_tables)}):")
            for table in self.created_tables:
                lines.append(f"    - {table}")

        if self.altered_tables:
            lines.append(f"\n  Altered tables ({len(self.altered_tables)}):")
            for table in self.altered_tables:
                lines.append(f"    - {table}")

        if self.unchanged_tables:
            lines.append(f"\n  Unchanged tables: {len(self.unchanged_tables)}")

        return "\n".join(lines)


class ApplyResult(BaseModel):
    """Result of applying a diff report to the target database.

    Attributes:
        success: True if every statement ran (or would run, for a dry run).
        dry_run: True if nothing was actually executed.
        executed: Tables whose statement was executed (or would be).
        error: Error message if the apply was refused.
    """

    success: bool = False
    dry_run: bool = True
    executed: list[str] = Field(default_factory=list)
    error: str | None = None
