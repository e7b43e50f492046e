#!/usr/bin/env python
"""
Run one TMDB synchronization outside the web server.

Requires TMDB_API_ACCESS_TOKEN (and optionally TMDB_API_URL) in the environment
or in a .env file at the project root.

Usage:
    python scripts/sync_movies.py
    python scripts/sync_movies.py --db-path data/movies.db --workers 4 --debug
"""

import sys
import json
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moviesync.api.config import get_sync_max_workers, get_tmdb_config
from moviesync.core.exceptions import MovieSyncError
from moviesync.core.sync import MovieSynchronizer
from moviesync.core.tmdb import MovieFetcher, TmdbClient
from moviesync.database import init_database
from moviesync.database.connection import DEFAULT_DB_PATH
from moviesync.utils.env import load_env
from moviesync.utils.logging_config import configure_sync_logging, get_logger

logger = get_logger(__name__)


def main():
    """Main entry point for a command-line sync."""
    load_env()

    parser = argparse.ArgumentParser(description="Synchronize high-rated TMDB movies into the database")
    parser.add_argument(
        '--db-path',
        type=str,
        default=DEFAULT_DB_PATH,
        help=f'Path to SQLite database file (default: {DEFAULT_DB_PATH})'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=get_sync_max_workers(),
        help='Maximum parallel TMDB detail requests'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    args = parser.parse_args()

    configure_sync_logging(debug=args.debug)

    try:
        client = TmdbClient(get_tmdb_config(), pool_size=args.workers)
        db_manager = init_database(db_path=args.db_path)
        try:
            with db_manager.session_scope() as session:
                synchronizer = MovieSynchronizer(MovieFetcher(client), session, max_workers=args.workers)
                result = synchronizer.synchronize()
        finally:
            client.close()
    except MovieSyncError as e:
        logger.error("Synchronization failed: %s", e)
        sys.exit(1)

    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
