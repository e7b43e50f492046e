"""
FastAPI dependency injection for database session, TMDB fetcher and synchronizer.
"""

import logging
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from moviesync.database.connection import get_db_manager
from moviesync.core.sync import MovieSynchronizer
from moviesync.core.tmdb import MovieFetcher, TmdbClient
from moviesync.api.config import get_database_path, get_sync_max_workers, get_tmdb_config

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_path = get_database_path()
    if db_path.startswith("sqlite"):
        db_path = db_path.replace("sqlite:///", "")
    if not db_path.strip():
        db_path = None  # use connection default
    db_manager = get_db_manager(db_path=db_path) if db_path else get_db_manager()
    with db_manager.session_scope() as session:
        yield session


# Singleton fetcher (shares one HTTP connection pool across requests)
_movie_fetcher: MovieFetcher | None = None


def get_movie_fetcher() -> MovieFetcher:
    """Get or create singleton MovieFetcher bound to the env TMDB config."""
    global _movie_fetcher
    if _movie_fetcher is None:
        config = get_tmdb_config()
        logger.info("Creating TMDB client for %s", config.base_url)
        client = TmdbClient(config, pool_size=get_sync_max_workers())
        _movie_fetcher = MovieFetcher(client)
    return _movie_fetcher


def get_synchronizer(
    db: Session = Depends(get_db),
    fetcher: MovieFetcher = Depends(get_movie_fetcher),
) -> MovieSynchronizer:
    """Build a MovieSynchronizer for the current request's session."""
    return MovieSynchronizer(fetcher, db, max_workers=get_sync_max_workers())
