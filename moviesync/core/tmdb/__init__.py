"""
TMDB catalog access: HTTP client, payload validation, and fetching.
"""

from moviesync.core.tmdb.client import TmdbClient, TmdbConfig, DEFAULT_TMDB_API_URL
from moviesync.core.tmdb.fetcher import MovieFetcher, DISCOVER_FILTER
from moviesync.core.tmdb.schemas import CandidateRecord, MovieDetails

__all__ = [
    "TmdbClient",
    "TmdbConfig",
    "DEFAULT_TMDB_API_URL",
    "MovieFetcher",
    "DISCOVER_FILTER",
    "CandidateRecord",
    "MovieDetails",
]
