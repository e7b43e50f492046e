"""
Shape TMDB candidates into stored movie records.
"""

from typing import Any, Dict, Optional

from moviesync.core.tmdb.schemas import CandidateRecord, MovieDetails
from moviesync.database.crud import new_movie_id


def to_stored_record(
    candidate: CandidateRecord,
    details: MovieDetails,
    movie_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a ``Movie`` column mapping from a candidate and its details.

    Args:
        candidate: Validated discover result
        details: Validated detail record for the same movie
        movie_id: Local id to use (a fresh UUID when omitted)

    Returns:
        Mapping suitable for ``crud.bulk_create_movies``
    """
    return {
        "id": movie_id or new_movie_id(),
        "tmdb_id": candidate.id,
        "name": candidate.original_title,
        "overview": candidate.overview,
        "popularity": candidate.popularity,
        "vote_average": candidate.vote_average,
        "vote_count": candidate.vote_count,
        "release_date": candidate.release_date,
        "genres": [dict(genre) for genre in details.genres],
    }
