"""
Movie CRUD endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from moviesync.api.dependencies import get_db
from moviesync.api.models.movie import MovieCreate, MovieUpdate, MovieResponse
from moviesync.api.models.sync import ErrorResponse
from moviesync.core.exceptions import NotFound
from moviesync.database import crud
from moviesync.database.models import Movie

router = APIRouter(prefix="/movies", tags=["movies"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Movie not found"}}
CONFLICT_RESPONSE = {409: {"model": ErrorResponse, "description": "TMDB id already stored"}}


def _get_or_404(db: Session, movie_id: str) -> Movie:
    movie = crud.get_movie(db, movie_id)
    if movie is None:
        raise NotFound(movie_id)
    return movie


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT_RESPONSE,
)
def create_movie(movie_in: MovieCreate, db: Session = Depends(get_db)):
    """Save a new movie; the local id is generated."""
    fields = movie_in.model_dump()
    return crud.create_movie(db, **fields)


@router.get("", response_model=list[MovieResponse])
def list_movies(db: Session = Depends(get_db)):
    """Fetch all stored movies."""
    return crud.get_movies(db)


@router.get("/{movie_id}", response_model=MovieResponse, responses=NOT_FOUND_RESPONSE)
def get_movie(movie_id: str, db: Session = Depends(get_db)):
    """Fetch a movie by its local id."""
    return _get_or_404(db, movie_id)


@router.api_route(
    "/{movie_id}",
    methods=["PUT", "PATCH"],
    response_model=MovieResponse,
    responses={**NOT_FOUND_RESPONSE, **CONFLICT_RESPONSE},
)
def update_movie(movie_id: str, movie_in: MovieUpdate, db: Session = Depends(get_db)):
    """Update the given fields of a stored movie."""
    _get_or_404(db, movie_id)
    fields = movie_in.model_dump(exclude_unset=True, exclude_none=True)
    return crud.update_movie(db, movie_id, **fields)


@router.delete("/{movie_id}", response_model=MovieResponse, responses=NOT_FOUND_RESPONSE)
def delete_movie(movie_id: str, db: Session = Depends(get_db)):
    """Delete a movie and return the deleted record."""
    movie = crud.delete_movie(db, movie_id)
    if movie is None:
        raise NotFound(movie_id)
    return movie
