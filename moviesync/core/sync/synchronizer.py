"""
Synchronize high-rated TMDB movies into the local database.

One ``synchronize()`` call runs four steps in order:

1. fetch the candidate list from TMDB,
2. fetch every candidate's details in parallel (fail-fast),
3. drop candidates whose TMDB id is already stored,
4. insert the remainder in one batch.

Upstream validation errors (bad list format, missing fields, missing details)
are re-raised unchanged. Everything else, including store errors, becomes a
``PersistenceFailure`` and nothing from the batch is committed.
"""

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from sqlalchemy.orm import Session

from moviesync.core.exceptions import PersistenceFailure, UpstreamValidationError
from moviesync.core.sync.normalize import to_stored_record
from moviesync.core.tmdb.fetcher import MovieFetcher
from moviesync.core.tmdb.schemas import CandidateRecord, MovieDetails
from moviesync.database import crud

logger = logging.getLogger(__name__)

SYNC_SUCCESS_MESSAGE = "Database updated successfully"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one synchronization run."""

    message: str
    updated_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "updatedCount": self.updated_count}


class MovieSynchronizer:
    """
    Pulls candidates through a ``MovieFetcher`` and persists the new ones.

    Args:
        fetcher: Source of validated candidates and details
        session: Database session used for the dedupe query and the insert
        max_workers: Upper bound on concurrent detail lookups
    """

    def __init__(self, fetcher: MovieFetcher, session: Session, max_workers: int = 8):
        self.fetcher = fetcher
        self.session = session
        self.max_workers = max(1, max_workers)

    def synchronize(self) -> SyncResult:
        """
        Run one full synchronization.

        Returns:
            SyncResult with the number of movies inserted (0 when nothing is new)

        Raises:
            UpstreamValidationError: Unchanged, from the list or detail step
            PersistenceFailure: For store errors and any other failure
        """
        try:
            candidates = self.fetcher.list_candidates()
            records = self._build_records(candidates)
            new_records = self._filter_new(records)

            inserted = 0
            if new_records:
                inserted = crud.bulk_create_movies(self.session, new_records)
            logger.info(
                "Sync complete: %d candidates, %d new, %d already stored",
                len(candidates),
                inserted,
                len(records) - len(new_records),
            )
            return SyncResult(message=SYNC_SUCCESS_MESSAGE, updated_count=inserted)
        except UpstreamValidationError as exc:
            logger.warning("Sync rejected upstream data: %s", exc)
            raise
        except Exception as exc:
            self.session.rollback()
            logger.error("Sync failed: %s", exc, exc_info=True)
            raise PersistenceFailure(f"Failed to update database: {exc}") from exc

    def _build_records(self, candidates: Sequence[CandidateRecord]) -> List[Dict[str, Any]]:
        """Fetch details for every candidate and shape them as stored records."""
        details = self._fetch_details_all(candidates)
        return [
            to_stored_record(candidate, detail)
            for candidate, detail in zip(candidates, details)
        ]

    def _fetch_details_all(self, candidates: Sequence[CandidateRecord]) -> List[MovieDetails]:
        """
        Fetch details for all candidates concurrently.

        Returns results in candidate order. As soon as any lookup fails, lookups
        that have not started are cancelled and the failure is raised; lookups
        already in flight are left to finish and their results discarded.
        """
        if not candidates:
            return []

        pool = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(candidates)),
            thread_name_prefix="tmdb-details",
        )
        try:
            futures: List[Future] = [
                pool.submit(self.fetcher.fetch_details, candidate.id)
                for candidate in candidates
            ]
            done, _pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in futures:
                if future in done and future.exception() is not None:
                    raise future.exception()
            return [future.result() for future in futures]
        finally:
            pool.shutdown(wait=False, cancel_futures=True)

    def _filter_new(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Keep records whose TMDB id is neither stored nor repeated earlier in the batch."""
        existing = crud.get_existing_tmdb_ids(self.session, (r["tmdb_id"] for r in records))
        seen = set(existing)
        new_records = []
        for record in records:
            if record["tmdb_id"] in seen:
                continue
            seen.add(record["tmdb_id"])
            new_records.append(record)
        return new_records
