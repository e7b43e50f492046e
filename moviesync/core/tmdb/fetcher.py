"""
Candidate discovery and detail lookups against the TMDB catalog.
"""

import logging
from typing import Any, Dict, List

from moviesync.core.exceptions import (
    DetailsNotFound,
    InvalidUpstreamFormat,
    MissingRequiredFields,
)
from moviesync.core.tmdb.client import TmdbClient
from moviesync.core.tmdb.schemas import (
    CANDIDATE_FIELDS,
    DETAILS_FIELDS,
    CandidateRecord,
    MovieDetails,
    is_valid_genre,
    missing_fields,
)

logger = logging.getLogger(__name__)

DISCOVER_PATH = "/discover/movie"
DETAILS_PATH = "/movie/{tmdb_id}"

# High-rated titles on Netflix (provider 8) in Turkey, oldest first.
DISCOVER_FILTER: Dict[str, str] = {
    "sort_by": "primary_release_date.asc",
    "vote_count.gte": "1500",
    "vote_average.gte": "8.4",
    "with_watch_providers": "8",
    "watch_region": "TR",
    "page": "1",
}


class MovieFetcher:
    """Fetches and validates TMDB candidates and their details."""

    def __init__(self, client: TmdbClient):
        self.client = client

    def list_candidates(self) -> List[CandidateRecord]:
        """
        Fetch the first page of movies matching ``DISCOVER_FILTER``.

        Returns:
            Candidates in upstream order (possibly empty)

        Raises:
            InvalidUpstreamFormat: If the payload is absent or not a list
            MissingRequiredFields: If any candidate lacks a required field;
                the whole batch is rejected
            UpstreamRequestError: If the request itself fails
        """
        payload = self.client.get_json(DISCOVER_PATH, params=DISCOVER_FILTER)
        if not isinstance(payload, list):
            raise InvalidUpstreamFormat()

        for position, raw in enumerate(payload):
            missing = missing_fields(raw, CANDIDATE_FIELDS)
            if missing:
                logger.warning(
                    "Rejecting candidate batch: item %d (id=%s) is missing %s",
                    position,
                    raw.get("id") if isinstance(raw, dict) else None,
                    ", ".join(missing),
                )
                raise MissingRequiredFields(missing)

        candidates = [CandidateRecord.from_payload(raw) for raw in payload]
        logger.info("Fetched %d candidate movies from TMDB", len(candidates))
        return candidates

    def fetch_details(self, tmdb_id: int) -> MovieDetails:
        """
        Fetch the detail record (genres) for one movie.

        Raises:
            DetailsNotFound: If TMDB returns nothing for the id
            MissingRequiredFields: If the detail record has no genres field, or
                a genre entry lacks an integer id or a string name
            UpstreamRequestError: If the request itself fails
        """
        payload: Any = self.client.get_json(
            DETAILS_PATH.format(tmdb_id=tmdb_id),
            allow_missing=True,
        )
        if payload is None:
            raise DetailsNotFound(tmdb_id)

        missing = missing_fields(payload, DETAILS_FIELDS)
        if missing:
            raise MissingRequiredFields(missing)

        genres = payload["genres"]
        if genres is not None and (
            not isinstance(genres, list) or not all(is_valid_genre(g) for g in genres)
        ):
            logger.warning("Rejecting details for TMDB id %s: malformed genres %r", tmdb_id, genres)
            raise MissingRequiredFields(("genres",))

        logger.debug("Fetched details for TMDB id %s", tmdb_id)
        return MovieDetails.from_payload(tmdb_id, payload)
