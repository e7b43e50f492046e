"""
Thin HTTP client for the TMDB catalog API.

The client performs single GET requests with bearer-token auth and decodes the
JSON body. List endpoints wrap their items in ``{"results": [...]}``; those are
unwrapped so callers see the list itself. No retries: a failed request fails
the calling operation.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests
from requests.adapters import HTTPAdapter

from moviesync.core.exceptions import UpstreamRequestError

logger = logging.getLogger(__name__)

DEFAULT_TMDB_API_URL = "https://api.themoviedb.org/3"


@dataclass(frozen=True)
class TmdbConfig:
    """Connection settings for the TMDB API."""

    base_url: str
    access_token: str
    timeout_seconds: float = 20.0

    def __repr__(self) -> str:
        return f"TmdbConfig(base_url={self.base_url!r}, access_token='***', timeout_seconds={self.timeout_seconds})"


class TmdbClient:
    """
    GET-only JSON client bound to one TMDB configuration.

    The underlying ``requests.Session`` is shared by the parallel detail
    lookups, so its connection pool is sized to ``pool_size``.
    """

    def __init__(
        self,
        config: TmdbConfig,
        session: Optional[requests.Session] = None,
        pool_size: int = 10,
    ):
        self.config = config
        self.session = session or requests.Session()
        if session is None:
            adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size)
            self.session.mount("https://", adapter)
            self.session.mount("http://", adapter)
        self.headers = {
            "accept": "application/json",
            "Authorization": f"Bearer {config.access_token}",
        }

    def url_for(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def get_json(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        allow_missing: bool = False,
    ) -> Any:
        """
        GET ``path`` and return the decoded JSON payload.

        Args:
            path: Path relative to the configured base URL
            params: Query parameters
            allow_missing: Return None on HTTP 404 instead of raising

        Returns:
            The ``results`` list for list responses, the decoded body otherwise,
            or None for an empty body (or a 404 when ``allow_missing``).

        Raises:
            UpstreamRequestError: On transport failure, non-2xx status, or
                a body that is not JSON
        """
        url = self.url_for(path)
        logger.debug("GET %s params=%s", url, dict(params or {}))
        try:
            resp = self.session.get(
                url,
                params=params,
                headers=self.headers,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise UpstreamRequestError(f"TMDB request failed: {exc}", url=url) from exc

        if resp.status_code == 404 and allow_missing:
            return None
        if not 200 <= resp.status_code < 300:
            raise UpstreamRequestError(
                f"TMDB request failed with HTTP {resp.status_code}.",
                url=url,
                status_code=resp.status_code,
            )
        if not resp.content:
            return None

        try:
            payload = resp.json()
        except ValueError as exc:
            raise UpstreamRequestError(
                "TMDB returned non-JSON response.",
                url=url,
                status_code=resp.status_code,
            ) from exc

        if isinstance(payload, dict) and payload.get("results") is not None:
            return payload["results"]
        return payload

    def close(self) -> None:
        self.session.close()
