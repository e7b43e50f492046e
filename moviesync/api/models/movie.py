"""
Pydantic schemas for Movie API.

JSON field names follow the camelCase wire format (``voteAverage``,
``releaseDate``, ...); snake_case names are accepted on input as well.
"""

from pydantic import BaseModel, Field


class Genre(BaseModel):
    """A TMDB genre."""

    id: int
    name: str


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    tmdb_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1)
    overview: str = Field(..., min_length=1)
    popularity: float = Field(..., ge=0)
    vote_average: float = Field(..., alias="voteAverage", ge=0, le=10)
    vote_count: int = Field(..., alias="voteCount", ge=0)
    release_date: str = Field(..., alias="releaseDate", pattern=r"^\d{4}-\d{2}-\d{2}$")
    genres: list[Genre]

    class Config:
        populate_by_name = True
        extra = "forbid"


class MovieUpdate(BaseModel):
    """Request body for updating a movie (all fields optional)."""

    tmdb_id: int | None = Field(None, gt=0)
    name: str | None = Field(None, min_length=1)
    overview: str | None = Field(None, min_length=1)
    popularity: float | None = Field(None, ge=0)
    vote_average: float | None = Field(None, alias="voteAverage", ge=0, le=10)
    vote_count: int | None = Field(None, alias="voteCount", ge=0)
    release_date: str | None = Field(None, alias="releaseDate", pattern=r"^\d{4}-\d{2}-\d{2}$")
    genres: list[Genre] | None = None

    class Config:
        populate_by_name = True
        extra = "forbid"


class MovieResponse(BaseModel):
    """Response model for a stored movie."""

    id: str
    tmdb_id: int
    name: str
    overview: str
    popularity: float
    vote_average: float = Field(..., alias="voteAverage")
    vote_count: int = Field(..., alias="voteCount")
    release_date: str = Field(..., alias="releaseDate")
    genres: list[Genre]

    class Config:
        from_attributes = True
        populate_by_name = True
