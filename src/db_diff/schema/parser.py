"""Parse MySQL ``SHOW CREATE TABLE`` output into a ``TableSchema``.

This is not a DDL grammar.  It is a line classifier for the exact
multi-line layout MySQL prints: one column or key clause per line, the
``CREATE TABLE`` header first and the ``) ENGINE=...`` trailer last.
Anything it does not recognize (``CONSTRAINT``, ``FOREIGN KEY``, partition
clauses, ...) raises ``ParseError`` instead of being dropped, because a
silently-lost column or key would turn into a wrong, possibly destructive
``ALTER TABLE``.

Usage:
    from db_diff.schema.parser import parse_table_definition

    table = parse_table_definition(
        "CREATE TABLE `users` (\\n"
        "  `id` int(11) NOT NULL AUTO_INCREMENT,\\n"
        "  PRIMARY KEY (`id`)\\n"
        ") ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"
    )
    table.columns      # {'id': 'int(11) NOT NULL AUTO_INCREMENT'}
    table.primary_key  # '(`id`)'
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from db_diff.exceptions import ParseError
from db_diff.schema.models import TableSchema

TABLE_NAME_PATTERN = re.compile(r"^CREATE\s+TABLE\s+([`\"])(?P<name>[A-Za-z0-9_]+)\1\s+\(")

COLUMN_PATTERN = re.compile(r"^[\d\s]*([`\"])(?P<name>[A-Za-z0-9_]+)\1 (?P<definition>.+)$")
PRIMARY_KEY_PATTERN = re.compile(r"^\s*PRIMARY\s+KEY\s+(?P<definition>.+)$")
KEY_PATTERN = re.compile(r"^\s*(?:(?:UNIQUE|FULLTEXT|SPATIAL)\s+)?KEY\s+(?P<definition>.+)$")
ENGINE_PATTERN = re.compile(r"^\)\s*ENGINE")


def _strip_trailing_comma(value: str) -> str:
    """Drop a single trailing comma; nothing else is normalized."""
    if value.endswith(","):
        return value[:-1]
    return value


@dataclass
class _TableBuilder:
    """Mutable accumulator used while a definition is being parsed."""

    name: str
    columns: dict[str, str] = field(default_factory=dict)
    primary_key: str | None = None
    unique_keys: list[str] = field(default_factory=list)

    def add_column(self, match: re.Match) -> None:
        self.columns[match.group("name")] = _strip_trailing_comma(match.group("definition"))

    def set_primary_key(self, match: re.Match) -> None:
        self.primary_key = _strip_trailing_comma(match.group("definition"))

    def add_key(self, match: re.Match) -> None:
        self.unique_keys.append(_strip_trailing_comma(match.group("definition")))

    def skip(self, match: re.Match) -> None:
        pass

    def build(self) -> TableSchema:
        return TableSchema(
            name=self.name,
            columns=self.columns,
            primary_key=self.primary_key,
            unique_keys=tuple(self.unique_keys),
        )


# Evaluated top to bottom, first match wins.  PRIMARY KEY must be tried
# before the generic KEY rule: a primary key row also contains " KEY ", and
# must never land in unique_keys.
_ROW_RULES: list[tuple[re.Pattern, Callable[[_TableBuilder, re.Match], None]]] = [
    (COLUMN_PATTERN, _TableBuilder.add_column),
    (PRIMARY_KEY_PATTERN, _TableBuilder.set_primary_key),
    (KEY_PATTERN, _TableBuilder.add_key),
    (ENGINE_PATTERN, _TableBuilder.skip),
]


def _classify_row(builder: _TableBuilder, row: str) -> None:
    for pattern, handler in _ROW_RULES:
        match = pattern.search(row)
        if match:
            handler(builder, match)
            return
    raise ParseError(f"cannot parse row: {row} on {builder.name}")


def parse_table_definition(definition: str) -> TableSchema:
    """Parse one ``SHOW CREATE TABLE`` definition.

    Args:
        definition: Raw multi-line table definition, exactly as returned by
            the database (second column of ``SHOW CREATE TABLE``).

    Returns:
        ``TableSchema`` with columns in declaration order, the primary key
        clause (if any) and the secondary key clauses.

    Raises:
        ParseError: If the first line is not a ``CREATE TABLE`` header, or
            any later line matches no known row pattern.
    """
    rows = definition.splitlines()

    header = TABLE_NAME_PATTERN.match(rows[0]) if rows else None
    if not header:
        raise ParseError("cannot determine table name")

    builder = _TableBuilder(name=header.group("name"))
    for row in rows[1:]:
        _classify_row(builder, row)

    return builder.build()
