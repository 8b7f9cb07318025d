"""Schema diff orchestration -- compare every table, optionally apply.

Walks the source database's tables in listing order and produces one
statement per table that differs:

- Table missing on the target: the source's ``SHOW CREATE TABLE`` text,
  verbatim, as a creation statement.  No parsing, no diff.
- Table on both sides: both definitions are parsed and compared; a
  non-empty result becomes one ``ALTER TABLE`` statement.
- Table excluded by the target profile: skipped, even though the source
  lists it.

The run is source-driven: tables that exist only on the target are ignored
and never dropped.  Any error (parse, introspection, execution) aborts the
whole run.

Usage:
    from db_diff.schema.diff import generate_diff, apply_diff
    from db_diff.schema.introspector import SchemaIntrospector

    source = SchemaIntrospector(source_adapter)
    target = SchemaIntrospector(target_adapter)

    # 1. Compute statements
    report = generate_diff(source, target)
    print(report.to_sql())

    # 2. Apply them to the target
    result = apply_diff(target_adapter, report, dry_run=False, confirm=True)
"""

import logging
from collections.abc import Iterable

from db_diff.adapters.base import DatabaseClient, SchemaSource
from db_diff.exceptions import ExecutionError
from db_diff.schema.comparator import diff_tables
from db_diff.schema.models import ApplyResult, SchemaDiffReport, TableStatement
from db_diff.schema.parser import parse_table_definition

logger = logging.getLogger(__name__)


def generate_diff(
    source: SchemaSource,
    target: SchemaSource,
    tables: Iterable[str] | None = None,
) -> SchemaDiffReport:
    """Compare every source table against the target.

    Args:
        source: Introspector for the desired schema.
        target: Introspector for the schema to bring in line.
        tables: Optional subset of table names to compare.  Source listing
            order is kept; names the source does not have are ignored.

    Returns:
        ``SchemaDiffReport`` with one statement per differing table, in
        source listing order.

    Raises:
        ParseError: If either side's definition of a table cannot be parsed.
        UnknownTableTypeError: If either listing contains an unknown type.
        QueryError: If reading either database fails.

    Example:
        report = generate_diff(source, target, tables=["orders", "customers"])
        if report.has_changes:
            print(report.to_sql())
    """
    statements: list[TableStatement] = []
    unchanged: list[str] = []

    source_tables = source.list_tables()
    if tables is not None:
        wanted = set(tables)
        source_tables = [t for t in source_tables if t in wanted]

    # Excluded tables still exist on the target: never re-create them
    target_tables = set(target.list_tables(include_excluded=True))

    for table in source_tables:
        if table in target.excluded_tables:
            logger.info("Table %s excluded on target, skipping", table)
            continue

        if table not in target_tables:
            logger.info("Table %s missing on target, copying definition", table)
            statements.append(
                TableStatement(
                    table=table,
                    kind="create",
                    sql=source.show_create_table(table) + ";",
                )
            )
            continue

        source_schema = parse_table_definition(source.show_create_table(table))
        target_schema = parse_table_definition(target.show_create_table(table))
        table_diff = diff_tables(source_schema, target_schema)

        if table_diff.is_empty:
            logger.debug("Table %s unchanged", table)
            unchanged.append(table)
            continue

        logger.info("Table %s differs (%d changes)", table, len(table_diff.clauses))
        statements.append(
            TableStatement(table=table, kind="alter", sql=table_diff.to_sql())
        )

    return SchemaDiffReport(statements=tuple(statements), unchanged_tables=tuple(unchanged))


def apply_diff(
    client: DatabaseClient,
    report: SchemaDiffReport,
    dry_run: bool = True,
    confirm: bool = False,
) -> ApplyResult:
    """Apply a diff report's statements to the target database.

    Statements run one at a time in report order.  There is no transaction
    around the batch: on failure, statements already executed stay applied.

    Args:
        client: Adapter connected to the target database.
        report: Report from ``generate_diff()``.
        dry_run: If True, only report what would be executed.
        confirm: Must be True to actually execute (safety guard).

    Returns:
        ``ApplyResult`` with the tables whose statement ran.

    Raises:
        ExecutionError: If a statement fails.  ``table`` names the failing
            table; nothing after it is attempted.

    Example:
        result = apply_diff(adapter, report, dry_run=False, confirm=True)
        print(f"Applied {len(result.executed)} statements")
    """
    result = ApplyResult(dry_run=dry_run)

    if not report.has_changes:
        result.success = True
        return result

    if dry_run:
        result.success = True
        result.executed = [s.table for s in report.statements]
        return result

    if not confirm:
        result.error = "Apply requires confirm=True"
        return result

    for statement in report.statements:
        logger.info("Applying %s statement for %s", statement.kind, statement.table)
        try:
            client.execute(statement.sql)
        except ExecutionError as e:
            e.table = statement.table
            raise
        result.executed.append(statement.table)

    result.success = True
    return result


def diff_schemas(
    source: SchemaSource,
    target: SchemaSource,
    execute: bool = False,
    tables: Iterable[str] | None = None,
) -> SchemaDiffReport:
    """Generate the diff and, if *execute* is set, apply it to the target.

    Execution goes through the target introspector's client.

    Returns:
        The ``SchemaDiffReport`` that was generated.
    """
    report = generate_diff(source, target, tables=tables)
    if execute:
        apply_diff(target.client, report, dry_run=False, confirm=True)
    return report
