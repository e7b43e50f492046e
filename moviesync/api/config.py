"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from moviesync.core.exceptions import ConfigurationError
from moviesync.core.tmdb.client import TmdbConfig, DEFAULT_TMDB_API_URL


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "movies.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_sync_max_workers() -> int:
    """Get the number of parallel TMDB detail lookups per sync."""
    return int(os.getenv("SYNC_MAX_WORKERS", "8"))


def get_tmdb_config() -> TmdbConfig:
    """
    Build the TMDB client configuration from env.

    Raises:
        ConfigurationError: If TMDB_API_ACCESS_TOKEN is not set
    """
    token = os.getenv("TMDB_API_ACCESS_TOKEN", "").strip()
    if not token:
        raise ConfigurationError("TMDB_API_ACCESS_TOKEN is not set.")
    return TmdbConfig(
        base_url=os.getenv("TMDB_API_URL", "").strip() or DEFAULT_TMDB_API_URL,
        access_token=token,
        timeout_seconds=float(os.getenv("TMDB_TIMEOUT_SECONDS", "20")),
    )
