"""Tests for the table comparator.

Verifies clause kinds, clause order, primary key handling, and that the
comparison is exact-string and ignores secondary keys.
"""

from db_diff.schema.comparator import diff_tables
from db_diff.schema.models import (
    AddColumn,
    DropColumn,
    DropPrimaryKey,
    ModifyColumn,
    ReplacePrimaryKey,
    TableDiff,
    TableSchema,
)
from db_diff.schema.parser import parse_table_definition

from conftest import USERS_SQL


def _table(columns: dict[str, str], primary_key: str | None = None, **kwargs) -> TableSchema:
    return TableSchema(name="t", columns=columns, primary_key=primary_key, **kwargs)


class TestIdentical:
    """Identical tables produce no clauses."""

    def test_self_diff_is_empty(self) -> None:
        table = parse_table_definition(USERS_SQL)
        diff = diff_tables(table, table)

        assert diff.is_empty
        assert diff.clauses == ()
        assert diff.to_sql() == ""

    def test_equal_copies_are_empty(self) -> None:
        source = parse_table_definition(USERS_SQL)
        target = parse_table_definition(USERS_SQL)
        assert diff_tables(source, target).is_empty

    def test_column_order_alone_is_not_a_difference(self) -> None:
        source = _table({"a": "int", "b": "int"})
        target = _table({"b": "int", "a": "int"})
        assert diff_tables(source, target).is_empty

    def test_secondary_keys_not_compared(self) -> None:
        source = _table({"a": "int"}, unique_keys=["`uk_a` (`a`)"])
        target = _table({"a": "int"}, unique_keys=[])
        assert diff_tables(source, target).is_empty


class TestColumns:
    """Column add / modify / drop."""

    def test_add_drop_and_replace_primary_key_in_order(self) -> None:
        source = _table({"a": "int NOT NULL", "b": "text"}, primary_key="(`a`)")
        target = _table({"b": "text", "c": "int"}, primary_key="(`b`)")

        diff = diff_tables(source, target)

        assert diff.clauses == (
            AddColumn(name="a", definition="int NOT NULL"),
            DropColumn(name="c"),
            ReplacePrimaryKey(definition="(`a`)"),
        )

    def test_changed_definition_is_single_modify(self) -> None:
        source = _table({"id": "int(11) NOT NULL"})
        target = _table({"id": "int(10) NOT NULL"})

        diff = diff_tables(source, target)

        assert diff.clauses == (ModifyColumn(name="id", definition="int(11) NOT NULL"),)

    def test_whitespace_difference_is_a_modify(self) -> None:
        source = _table({"a": "int  NOT NULL"})
        target = _table({"a": "int NOT NULL"})
        assert [c.kind for c in diff_tables(source, target).clauses] == ["modify_column"]

    def test_column_names_are_case_sensitive(self) -> None:
        source = _table({"Name": "text"})
        target = _table({"name": "text"})
        assert diff_tables(source, target).clauses == (
            AddColumn(name="Name", definition="text"),
            DropColumn(name="name"),
        )

    def test_adds_and_modifies_follow_source_order(self) -> None:
        source = _table({"z": "int", "a": "text", "m": "bigint"})
        target = _table({"a": "varchar(10)"})

        names = [c.name for c in diff_tables(source, target).clauses]

        assert names == ["z", "a", "m"]

    def test_drops_follow_target_order(self) -> None:
        source = _table({})
        target = _table({"y": "int", "b": "int", "x": "int"})

        clauses = diff_tables(source, target).clauses

        assert clauses == (DropColumn(name="y"), DropColumn(name="b"), DropColumn(name="x"))


class TestPrimaryKey:
    """Primary key changes."""

    def test_same_primary_key_no_clause(self) -> None:
        source = _table({"a": "int"}, primary_key="(`a`)")
        target = _table({"a": "int"}, primary_key="(`a`)")
        assert diff_tables(source, target).is_empty

    def test_source_only_primary_key_adds_without_drop(self) -> None:
        source = _table({"a": "int"}, primary_key="(`a`)")
        target = _table({"a": "int"})

        clauses = diff_tables(source, target).clauses

        assert clauses == (ReplacePrimaryKey(definition="(`a`)", drop_existing=False),)
        assert clauses[0].to_sql() == "ADD PRIMARY KEY (`a`)"

    def test_target_only_primary_key_is_dropped(self) -> None:
        source = _table({"a": "int"})
        target = _table({"a": "int"}, primary_key="(`a`)")

        clauses = diff_tables(source, target).clauses

        assert clauses == (DropPrimaryKey(),)

    def test_primary_key_clause_is_last(self) -> None:
        source = _table({"a": "int", "b": "int"}, primary_key="(`a`,`b`)")
        target = _table({"a": "int", "c": "int"}, primary_key="(`a`)")

        kinds = [c.kind for c in diff_tables(source, target).clauses]

        assert kinds == ["add_column", "drop_column", "replace_primary_key"]


class TestSerialization:
    """TableDiff.to_sql() output."""

    def test_alter_statement(self) -> None:
        source = _table({"a": "int NOT NULL", "b": "text"}, primary_key="(`a`)")
        target = _table({"b": "text", "c": "int"}, primary_key="(`b`)")

        sql = diff_tables(source, target).to_sql()

        assert sql == (
            "ALTER TABLE `t` ADD COLUMN `a` int NOT NULL, DROP COLUMN `c`, "
            "DROP PRIMARY KEY, ADD PRIMARY KEY (`a`);"
        )

    def test_modify_and_drop_primary_key(self) -> None:
        source = _table({"a": "bigint"})
        target = _table({"a": "int"}, primary_key="(`a`)")

        sql = diff_tables(source, target).to_sql()

        assert sql == "ALTER TABLE `t` MODIFY COLUMN `a` bigint, DROP PRIMARY KEY;"

    def test_diff_named_after_source(self) -> None:
        source = TableSchema(name="orders", columns={"a": "int"})
        target = TableSchema(name="orders", columns={})
        diff = diff_tables(source, target)
        assert isinstance(diff, TableDiff)
        assert diff.table == "orders"

    def test_identifier_backticks_escaped(self) -> None:
        assert DropColumn(name="we`ird").to_sql() == "DROP COLUMN `we``ird`"
