"""
Typed views of TMDB payloads and their required-field validators.

A field counts as present when its key exists in the payload, whatever the
value: ``0``, ``""`` and ``null`` all pass. Only an absent key fails.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class RequiredField:
    """Predicate asserting that one payload key is defined."""

    key: str

    def is_present(self, record: Mapping[str, Any]) -> bool:
        return self.key in record


CANDIDATE_FIELDS: Tuple[RequiredField, ...] = (
    RequiredField("original_title"),
    RequiredField("overview"),
    RequiredField("popularity"),
    RequiredField("vote_average"),
    RequiredField("vote_count"),
    RequiredField("release_date"),
)

DETAILS_FIELDS: Tuple[RequiredField, ...] = (
    RequiredField("genres"),
)


def missing_fields(record: Any, fields: Tuple[RequiredField, ...]) -> Tuple[str, ...]:
    """
    Names of the required fields ``record`` lacks.

    A record that is not a mapping lacks every field.
    """
    if not isinstance(record, Mapping):
        return tuple(f.key for f in fields)
    return tuple(f.key for f in fields if not f.is_present(record))


def is_valid_genre(genre: Any) -> bool:
    """True for a ``{"id": int, "name": str}`` genre entry."""
    if not isinstance(genre, Mapping):
        return False
    genre_id = genre.get("id")
    return (
        isinstance(genre_id, int)
        and not isinstance(genre_id, bool)
        and isinstance(genre.get("name"), str)
    )


@dataclass(frozen=True)
class CandidateRecord:
    """A movie returned by the TMDB discover endpoint."""

    id: int
    original_title: str
    overview: str
    popularity: float
    vote_average: float
    vote_count: int
    release_date: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CandidateRecord":
        return cls(
            id=payload.get("id"),
            original_title=payload["original_title"],
            overview=payload["overview"],
            popularity=payload["popularity"],
            vote_average=payload["vote_average"],
            vote_count=payload["vote_count"],
            release_date=payload["release_date"],
        )


@dataclass(frozen=True)
class MovieDetails:
    """The part of a TMDB movie detail response this service keeps."""

    id: int
    genres: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_payload(cls, tmdb_id: int, payload: Mapping[str, Any]) -> "MovieDetails":
        genres = payload["genres"] or []
        return cls(
            id=payload.get("id", tmdb_id),
            genres=[{"id": genre["id"], "name": genre["name"]} for genre in genres],
        )
