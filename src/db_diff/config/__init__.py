"""Configuration management: profiles, TOML loading, and config models.

Usage:
    >>> from db_diff.config import load_db_config, DatabaseProfile, DatabaseConfig
"""

from db_diff.config.loader import load_db_config
from db_diff.config.models import DatabaseConfig, DatabaseProfile

__all__ = ["load_db_config", "DatabaseConfig", "DatabaseProfile"]
