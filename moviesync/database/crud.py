"""
CRUD operations for the Movie model.

This module provides Create, Read, Update, Delete operations for stored movies,
plus the bulk helpers used by catalog synchronization.
"""

import uuid
from typing import Any, Dict, Iterable, List, Optional, Set
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from moviesync.core.exceptions import DuplicateMovie
from moviesync.database.models import Movie


def new_movie_id() -> str:
    """Generate a fresh local movie id."""
    return str(uuid.uuid4())


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(
    session: Session,
    tmdb_id: int,
    name: str,
    overview: str,
    popularity: float,
    vote_average: float,
    vote_count: int,
    release_date: str,
    genres: List[Dict[str, Any]],
    movie_id: Optional[str] = None
) -> Movie:
    """
    Create a new movie.

    Args:
        session: Database session
        tmdb_id: TMDB catalog id
        name: Movie title
        overview: Plot synopsis
        popularity: Popularity score
        vote_average: Average rating
        vote_count: Number of votes
        release_date: Release date (YYYY-MM-DD)
        genres: List of {"id", "name"} genre dicts
        movie_id: Local id (generated when omitted)

    Returns:
        Created Movie object

    Raises:
        DuplicateMovie: If a movie with the same tmdb_id already exists
    """
    if get_movie_by_tmdb_id(session, tmdb_id) is not None:
        raise DuplicateMovie(tmdb_id)

    movie = Movie(
        id=movie_id or new_movie_id(),
        tmdb_id=tmdb_id,
        name=name,
        overview=overview,
        popularity=popularity,
        vote_average=vote_average,
        vote_count=vote_count,
        release_date=release_date,
        genres=list(genres)
    )
    session.add(movie)
    try:
        session.commit()
    except IntegrityError:
        # Lost a race with another writer on the tmdb_id constraint
        session.rollback()
        raise DuplicateMovie(tmdb_id)
    session.refresh(movie)
    return movie


def bulk_create_movies(session: Session, records: Iterable[Dict[str, Any]]) -> int:
    """
    Insert many movies in a single commit.

    Args:
        session: Database session
        records: Movie column mappings, each including its local ``id``

    Returns:
        Number of movies inserted
    """
    movies = [Movie(**record) for record in records]
    if not movies:
        return 0
    session.add_all(movies)
    session.commit()
    return len(movies)


def get_movie(session: Session, movie_id: str) -> Optional[Movie]:
    """
    Get a movie by its local ID.

    Args:
        session: Database session
        movie_id: Local movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def get_movie_by_tmdb_id(session: Session, tmdb_id: int) -> Optional[Movie]:
    """Get a movie by its TMDB id, or None."""
    return session.query(Movie).filter(Movie.tmdb_id == tmdb_id).first()


def get_movies(
    session: Session,
    skip: int = 0,
    limit: Optional[int] = None
) -> List[Movie]:
    """
    Get stored movies, optionally paginated.

    Args:
        session: Database session
        skip: Number of records to skip
        limit: Maximum number of records to return (None for all)

    Returns:
        List of Movie objects
    """
    query = session.query(Movie).order_by(Movie.release_date, Movie.tmdb_id).offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_movie_count(session: Session) -> int:
    """
    Get total count of movies.

    Args:
        session: Database session

    Returns:
        Total number of movies
    """
    return session.query(func.count(Movie.id)).scalar()


def get_existing_tmdb_ids(session: Session, tmdb_ids: Iterable[int]) -> Set[int]:
    """
    Return which of the given TMDB ids are already stored.

    Args:
        session: Database session
        tmdb_ids: Candidate TMDB ids

    Returns:
        Set of TMDB ids present in the movies table
    """
    ids = set(tmdb_ids)
    if not ids:
        return set()
    rows = session.query(Movie.tmdb_id).filter(Movie.tmdb_id.in_(ids)).all()
    return {row.tmdb_id for row in rows}


def update_movie(
    session: Session,
    movie_id: str,
    **kwargs
) -> Optional[Movie]:
    """
    Update movie fields.

    Args:
        session: Database session
        movie_id: Local movie ID
        **kwargs: Fields to update (any Movie column except id)

    Returns:
        Updated Movie object or None if not found

    Raises:
        DuplicateMovie: If tmdb_id is changed to one held by another movie
    """
    movie = get_movie(session, movie_id)
    if movie is None:
        return None

    new_tmdb_id = kwargs.get('tmdb_id')
    if new_tmdb_id is not None and new_tmdb_id != movie.tmdb_id:
        if get_movie_by_tmdb_id(session, new_tmdb_id) is not None:
            raise DuplicateMovie(new_tmdb_id)

    for key, value in kwargs.items():
        if key != 'id' and hasattr(movie, key):
            setattr(movie, key, value)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise DuplicateMovie(new_tmdb_id)
    session.refresh(movie)
    return movie


def delete_movie(session: Session, movie_id: str) -> Optional[Movie]:
    """
    Delete a movie.

    Args:
        session: Database session
        movie_id: Local movie ID

    Returns:
        The deleted Movie object, or None if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
    return movie
