"""
API tests for the GET /retrieve synchronization endpoint.

TMDB is replaced by a stub client behind the real MovieFetcher; the database
is an in-memory SQLite instance.
"""

import pytest
from fastapi.testclient import TestClient

from moviesync.api import dependencies
from moviesync.api.dependencies import get_db, get_movie_fetcher
from moviesync.api.main import app
from moviesync.core.exceptions import UpstreamRequestError
from moviesync.core.tmdb.fetcher import MovieFetcher, DISCOVER_PATH
from moviesync.database.connection import DatabaseManager

client = TestClient(app)

CANDIDATE = {
    "id": 1,
    "original_title": "X",
    "overview": "Y",
    "popularity": 10,
    "vote_average": 9,
    "vote_count": 2000,
    "release_date": "2020-01-01",
}
DRAMA = [{"id": 1, "name": "Drama"}]


class StubClient:
    def __init__(self, responses, error=None):
        self.responses = responses
        self.error = error

    def get_json(self, path, params=None, allow_missing=False):
        if self.error is not None:
            raise self.error
        return self.responses.get(path)


@pytest.fixture(autouse=True)
def db_manager():
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()

    def override_get_db():
        with manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield manager
    app.dependency_overrides.clear()
    manager.close()


def use_tmdb(responses, error=None):
    fetcher = MovieFetcher(StubClient(responses, error=error))
    app.dependency_overrides[get_movie_fetcher] = lambda: fetcher


class TestRetrieveEndpoint:
    """Tests for GET /retrieve."""

    def test_sync_inserts_new_movie(self):
        use_tmdb({DISCOVER_PATH: [CANDIDATE], "/movie/1": {"genres": DRAMA}})

        r = client.get("/retrieve")

        assert r.status_code == 200
        assert r.json() == {"message": "Database updated successfully", "updatedCount": 1}
        movies = client.get("/movies").json()
        assert len(movies) == 1
        assert movies[0]["tmdb_id"] == 1
        assert movies[0]["name"] == "X"
        assert movies[0]["genres"] == DRAMA

    def test_second_sync_reports_zero(self):
        use_tmdb({DISCOVER_PATH: [CANDIDATE], "/movie/1": {"genres": DRAMA}})
        client.get("/retrieve")

        r = client.get("/retrieve")

        assert r.json()["updatedCount"] == 0
        assert len(client.get("/movies").json()) == 1

    def test_existing_movie_is_skipped(self):
        client.post("/movies", json={
            "tmdb_id": 1, "name": "Mine", "overview": "Local", "popularity": 1,
            "voteAverage": 8.5, "voteCount": 1600, "releaseDate": "2020-01-01", "genres": [],
        })
        second = {**CANDIDATE, "id": 2, "original_title": "Z"}
        use_tmdb({
            DISCOVER_PATH: [CANDIDATE, second],
            "/movie/1": {"genres": DRAMA},
            "/movie/2": {"genres": DRAMA},
        })

        r = client.get("/retrieve")

        assert r.json()["updatedCount"] == 1
        names = sorted(m["name"] for m in client.get("/movies").json())
        assert names == ["Mine", "Z"]

    def test_empty_upstream_list(self):
        use_tmdb({DISCOVER_PATH: []})
        r = client.get("/retrieve")
        assert r.status_code == 200
        assert r.json()["updatedCount"] == 0

    def test_invalid_format_is_400(self):
        use_tmdb({DISCOVER_PATH: {"status_message": "Invalid API key"}})
        r = client.get("/retrieve")
        assert r.status_code == 400
        assert r.json()["message"] == "Invalid response format from TMDB API"

    def test_missing_fields_is_400(self):
        bad = {k: v for k, v in CANDIDATE.items() if k != "vote_count"}
        use_tmdb({DISCOVER_PATH: [bad]})
        r = client.get("/retrieve")
        assert r.status_code == 400
        assert "missing required fields" in r.json()["message"]

    def test_missing_details_is_400_and_nothing_stored(self):
        second = {**CANDIDATE, "id": 2}
        use_tmdb({DISCOVER_PATH: [CANDIDATE, second], "/movie/1": {"genres": DRAMA}})

        r = client.get("/retrieve")

        assert r.status_code == 400
        assert client.get("/movies").json() == []

    def test_upstream_failure_is_500(self):
        use_tmdb({}, error=UpstreamRequestError("TMDB request failed with HTTP 503.", status_code=503))
        r = client.get("/retrieve")
        assert r.status_code == 500
        assert r.json()["message"].startswith("Failed to update database:")

    def test_missing_token_is_500(self, monkeypatch):
        monkeypatch.delenv("TMDB_API_ACCESS_TOKEN", raising=False)
        monkeypatch.setattr(dependencies, "_movie_fetcher", None)
        r = client.get("/retrieve")
        assert r.status_code == 500
        assert "TMDB_API_ACCESS_TOKEN" in r.json()["message"]

    def test_malformed_genre_is_400_and_listing_still_works(self):
        use_tmdb({DISCOVER_PATH: [CANDIDATE], "/movie/1": {"genres": [{"id": 18}, "junk"]}})

        r = client.get("/retrieve")

        assert r.status_code == 400
        assert "genres" in r.json()["message"]
        listing = client.get("/movies")
        assert listing.status_code == 200
        assert listing.json() == []
