"""Database adapters package.

Provides the ``DatabaseClient`` and ``SchemaSource`` Protocols and the
concrete MySQL adapter.

Usage:
    from db_diff.adapters import DatabaseClient, MySQLAdapter
"""

from db_diff.adapters.base import DatabaseClient, SchemaSource
from db_diff.adapters.mysql import MySQLAdapter, create_engine_pooled

__all__ = [
    "DatabaseClient",
    "MySQLAdapter",
    "SchemaSource",
    "create_engine_pooled",
]
