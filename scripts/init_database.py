#!/usr/bin/env python
"""
Database initialization script for the movie catalog.

Creates the schema (movies table, indexes, unique constraints) and verifies it.

Usage:
    # Create tables if missing
    python scripts/init_database.py

    # Drop and recreate (deletes all stored movies)
    python scripts/init_database.py --reset
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from moviesync.database import init_database, verify_schema, crud
from moviesync.database.connection import DEFAULT_DB_PATH
from moviesync.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(description="Initialize the movie catalog database")
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--db-path',
        type=str,
        default=DEFAULT_DB_PATH,
        help=f'Path to SQLite database file (default: {DEFAULT_DB_PATH})'
    )
    args = parser.parse_args()

    setup_logging(level="INFO")
    print_section("Movie Catalog Database Initialization")
    print(f"Database: {args.db_path}")
    print(f"Mode: {'Reset' if args.reset else 'Create if missing'}")

    db_manager = init_database(db_path=args.db_path, reset=args.reset)
    if not verify_schema(db_manager):
        print("\n[ERROR] Database initialization failed!")
        sys.exit(1)

    session = db_manager.get_session()
    try:
        print(f"\n[SUCCESS] Database ready ({crud.get_movie_count(session)} movies stored)")
    finally:
        session.close()


if __name__ == "__main__":
    main()
