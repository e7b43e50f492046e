"""
Exception hierarchy for catalog synchronization and movie storage.

Upstream validation errors are client-visible and surface unchanged from
``MovieSynchronizer.synchronize``; store failures and anything unexpected are
wrapped into ``PersistenceFailure``.
"""

from typing import Iterable, Optional


class MovieSyncError(Exception):
    """Base class for all moviesync errors."""


class UpstreamValidationError(MovieSyncError):
    """The external catalog returned data this service cannot accept."""


class InvalidUpstreamFormat(UpstreamValidationError):
    """The candidate list payload was absent or not an array."""

    def __init__(self, message: str = "Invalid response format from TMDB API"):
        super().__init__(message)


class MissingRequiredFields(UpstreamValidationError):
    """A candidate or detail record lacks one or more required fields."""

    def __init__(
        self,
        missing: Iterable[str] = (),
        message: str = "Response contains movies with missing required fields",
    ):
        self.missing = tuple(missing)
        if self.missing:
            message = f"{message}: {', '.join(self.missing)}"
        super().__init__(message)


class DetailsNotFound(UpstreamValidationError):
    """The detail lookup for a catalog id returned nothing."""

    def __init__(self, tmdb_id: int):
        self.tmdb_id = tmdb_id
        super().__init__(f"Movie details not found for TMDB id {tmdb_id}")


class UpstreamRequestError(MovieSyncError):
    """Transport, HTTP status, or decoding failure talking to the catalog."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PersistenceFailure(MovieSyncError):
    """A store operation failed, or synchronize hit an unclassified error."""


class ConfigurationError(MovieSyncError):
    """Required configuration is missing."""


class NotFound(MovieSyncError):
    """No stored movie has the requested local id."""

    def __init__(self, movie_id: str):
        self.movie_id = movie_id
        super().__init__(f"Movie with id {movie_id} not found")


class DuplicateMovie(MovieSyncError):
    """A stored movie already carries the given TMDB id."""

    def __init__(self, tmdb_id: int):
        self.tmdb_id = tmdb_id
        super().__init__(f"Movie with TMDB id {tmdb_id} already exists")
