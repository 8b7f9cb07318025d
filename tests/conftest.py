"""Shared fixtures: SHOW CREATE TABLE texts and in-memory introspectors."""

import pytest

USERS_SQL = (
    "CREATE TABLE `users` (\n"
    "  `id` int(11) NOT NULL AUTO_INCREMENT,\n"
    "  `email` varchar(255) NOT NULL,\n"
    "  `name` varchar(100) DEFAULT NULL,\n"
    "  PRIMARY KEY (`id`),\n"
    "  UNIQUE KEY `uk_email` (`email`),\n"
    "  KEY `idx_name` (`name`)\n"
    ") ENGINE=InnoDB AUTO_INCREMENT=42 DEFAULT CHARSET=utf8mb4"
)


def create_table(name: str, columns: dict[str, str], primary_key: str | None = None) -> str:
    """Build a definition laid out the way MySQL prints it."""
    rows = [f"  `{col}` {definition}" for col, definition in columns.items()]
    if primary_key is not None:
        rows.append(f"  PRIMARY KEY {primary_key}")
    body = ",\n".join(rows)
    return f"CREATE TABLE `{name}` (\n{body}\n) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"


class FakeIntrospector:
    """In-memory stand-in for ``SchemaIntrospector``.

    Records every ``show_create_table`` call so tests can check which
    definitions were fetched.
    """

    def __init__(self, definitions: dict[str, str], client=None, excluded_tables=None) -> None:
        self.definitions = definitions
        self.client = client
        self.excluded_tables: set[str] = set(excluded_tables or ())
        self.fetched: list[str] = []

    def list_tables(self, include_excluded: bool = False) -> list[str]:
        return [
            t for t in self.definitions if include_excluded or t not in self.excluded_tables
        ]

    def show_create_table(self, table: str) -> str:
        self.fetched.append(table)
        return self.definitions[table]


@pytest.fixture
def users_sql() -> str:
    return USERS_SQL
