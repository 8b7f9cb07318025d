"""Table comparison producing ordered ALTER TABLE clauses.

Compares a source (desired) ``TableSchema`` against a target (current) one.
Pure logic -- no I/O, no database connections.

Comparison is exact-string: two column definitions that mean the same thing
but are spelled differently (``int(11)`` vs ``int``) produce a MODIFY.
Secondary and unique keys are parsed but never compared.

Usage:
    from db_diff.schema.comparator import diff_tables
    from db_diff.schema.parser import parse_table_definition

    source = parse_table_definition(source_sql)
    target = parse_table_definition(target_sql)

    diff = diff_tables(source, target)
    if not diff.is_empty:
        print(diff.to_sql())
"""

from db_diff.schema.models import (
    AddColumn,
    AlterClause,
    DropColumn,
    DropPrimaryKey,
    ModifyColumn,
    ReplacePrimaryKey,
    TableDiff,
    TableSchema,
)


def diff_tables(source: TableSchema, target: TableSchema) -> TableDiff:
    """Compute the clauses that turn *target* into *source*.

    Clause order is fixed so the generated statement is deterministic:

    1. ADD / MODIFY for source columns, in source declaration order
    2. DROP for target-only columns, in target declaration order
    3. Primary key change, if the key clauses differ

    Args:
        source: Desired table structure.
        target: Current table structure, same table name.

    Returns:
        ``TableDiff`` named after the source table.  Empty when the tables
        match.

    Examples:
        >>> same = TableSchema(name="t", columns={"id": "int"}, primary_key="(`id`)")
        >>> diff_tables(same, same).is_empty
        True

        >>> source = TableSchema(name="t", columns={"id": "int", "a": "text"})
        >>> target = TableSchema(name="t", columns={"id": "bigint"})
        >>> [c.kind for c in diff_tables(source, target).clauses]
        ['modify_column', 'add_column']
    """
    clauses: list[AlterClause] = []

    for name, definition in source.columns.items():
        if name not in target.columns:
            clauses.append(AddColumn(name=name, definition=definition))
        elif target.columns[name] != definition:
            clauses.append(ModifyColumn(name=name, definition=definition))

    for name in target.columns:
        if name not in source.columns:
            clauses.append(DropColumn(name=name))

    if source.primary_key != target.primary_key:
        if source.primary_key is None:
            clauses.append(DropPrimaryKey())
        else:
            clauses.append(
                ReplacePrimaryKey(
                    definition=source.primary_key,
                    drop_existing=target.primary_key is not None,
                )
            )

    return TableDiff(table=source.name, clauses=tuple(clauses))
