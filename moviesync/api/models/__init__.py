"""
Pydantic schemas for API request/response validation.
"""

from moviesync.api.models.movie import Genre, MovieCreate, MovieUpdate, MovieResponse
from moviesync.api.models.sync import SyncResponse, ErrorResponse

__all__ = [
    "Genre",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "SyncResponse",
    "ErrorResponse",
]
