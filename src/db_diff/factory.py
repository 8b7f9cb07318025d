"""Database client factory.

Turns a profile name from db.toml into a connected ``MySQLAdapter`` and a
``SchemaIntrospector`` over it.
"""

import logging
from pathlib import Path
from urllib.parse import quote

from db_diff.adapters.mysql import MySQLAdapter
from db_diff.config.loader import load_db_config
from db_diff.config.models import DatabaseConfig, DatabaseProfile
from db_diff.exceptions import DbDiffError
from db_diff.schema.introspector import SchemaIntrospector

logger = logging.getLogger(__name__)


class ProfileNotFoundError(DbDiffError):
    """Raised when a requested profile is not defined in db.toml."""

    pass


def resolve_url(profile: DatabaseProfile) -> str:
    """Resolve profile URL with password substitution.

    Args:
        profile: Database profile from config

    Returns:
        Connection URL with password substituted
    """
    url = profile.url
    if profile.db_password and "[YOUR-PASSWORD]" in url:
        url = url.replace("[YOUR-PASSWORD]", quote(profile.db_password, safe=""))
    return url


def get_profile(
    profile_name: str,
    config: DatabaseConfig | None = None,
    config_path: Path | None = None,
) -> DatabaseProfile:
    """Look up a profile by name.

    Raises:
        ProfileNotFoundError: If the profile is not in the config
    """
    if config is None:
        config = load_db_config(config_path)

    if profile_name not in config.profiles:
        available = ", ".join(config.profiles.keys()) or "(none)"
        raise ProfileNotFoundError(
            f"Profile '{profile_name}' not found in db.toml. Available: {available}"
        )
    return config.profiles[profile_name]


def get_adapter(profile: DatabaseProfile) -> MySQLAdapter:
    """Create a ``MySQLAdapter`` for *profile*."""
    return MySQLAdapter(resolve_url(profile))


def get_introspector(
    profile_name: str,
    config: DatabaseConfig | None = None,
    config_path: Path | None = None,
) -> SchemaIntrospector:
    """Create an introspector for a named profile.

    The caller owns the connection: close it with
    ``introspector.client.close()``.

    Example:
        source = get_introspector("prod")
        try:
            tables = source.list_tables()
        finally:
            source.client.close()
    """
    profile = get_profile(profile_name, config=config, config_path=config_path)
    logger.debug("Connecting to profile %s", profile_name)
    return SchemaIntrospector(
        get_adapter(profile),
        excluded_tables=set(profile.excluded_tables),
    )
