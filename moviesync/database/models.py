"""
SQLAlchemy ORM models for the movie catalog database.

This module defines the Movie table holding normalized records synchronized
from the TMDB catalog or created directly through the API.
"""

from datetime import datetime
from typing import Any, Dict, List
from sqlalchemy import Integer, String, Float, Text, JSON, Index, TIMESTAMP
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing normalized catalog records.

    Attributes:
        id: Primary key, UUID string generated at persistence time
        tmdb_id: TMDB catalog id (unique, natural deduplication key)
        name: Movie title (TMDB original_title)
        overview: Plot synopsis
        popularity: TMDB popularity score
        vote_average: Average rating (0-10)
        vote_count: Number of votes
        release_date: Release date as YYYY-MM-DD
        genres: Ordered list of {"id": int, "name": str}
        created_at: Timestamp when record was created
        updated_at: Timestamp when record was last updated
    """
    __tablename__ = 'movies'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    tmdb_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    overview: Mapped[str] = mapped_column(Text, nullable=False)
    popularity: Mapped[float] = mapped_column(Float, nullable=False)
    vote_average: Mapped[float] = mapped_column(Float, nullable=False)
    vote_count: Mapped[int] = mapped_column(Integer, nullable=False)
    release_date: Mapped[str] = mapped_column(String(10), nullable=False)
    genres: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    # Indexes for common queries
    __table_args__ = (
        Index('idx_movies_release_date', 'release_date'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id='{self.id}', tmdb_id={self.tmdb_id}, name='{self.name}')>"
