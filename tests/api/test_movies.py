"""
API tests for movie CRUD endpoints.

Uses FastAPI TestClient with the database dependency pointed at an in-memory
SQLite database.
"""

import pytest
from fastapi.testclient import TestClient

from moviesync.api.dependencies import get_db
from moviesync.api import main
from moviesync.api.main import app
from moviesync.database.connection import DatabaseManager

client = TestClient(app)

PAYLOAD = {
    "tmdb_id": 278,
    "name": "The Shawshank Redemption",
    "overview": "Two imprisoned men bond over a number of years...",
    "popularity": 82.953,
    "voteAverage": 8.7,
    "voteCount": 24000,
    "releaseDate": "1994-09-23",
    "genres": [{"id": 18, "name": "Drama"}, {"id": 80, "name": "Crime"}],
}


@pytest.fixture(autouse=True)
def db_manager():
    """Route every request to a fresh in-memory database."""
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()

    def override_get_db():
        with manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield manager
    app.dependency_overrides.clear()
    manager.close()


def create(payload=None):
    r = client.post("/movies", json=payload or PAYLOAD)
    assert r.status_code == 201
    return r.json()


class TestMovieEndpoints:
    """Tests for POST/GET/PUT/PATCH/DELETE /movies."""

    def test_create_movie(self):
        """POST /movies returns 201 with the stored record and a generated id."""
        data = create()
        assert data["id"]
        for key, value in PAYLOAD.items():
            assert data[key] == value

    def test_create_accepts_snake_case(self):
        payload = {k: v for k, v in PAYLOAD.items() if k not in ("voteAverage", "voteCount", "releaseDate")}
        payload.update(vote_average=8.7, vote_count=24000, release_date="1994-09-23")
        data = create(payload)
        assert data["voteAverage"] == 8.7
        assert data["releaseDate"] == "1994-09-23"

    @pytest.mark.parametrize("change", [
        {"name": ""},
        {"voteAverage": 11},
        {"releaseDate": "23/09/1994"},
        {"genres": "Drama"},
        {"unexpected": True},
    ])
    def test_create_invalid_body(self, change):
        """POST /movies with an invalid body returns 400 with validation errors."""
        r = client.post("/movies", json={**PAYLOAD, **change})
        assert r.status_code == 400
        body = r.json()
        assert body["statusCode"] == 400
        assert body["message"] == "Validation failed"
        assert body["path"] == "/movies"
        assert body["errors"]

    def test_create_missing_field(self):
        payload = {k: v for k, v in PAYLOAD.items() if k != "overview"}
        r = client.post("/movies", json=payload)
        assert r.status_code == 400

    def test_create_duplicate_tmdb_id(self):
        """POST /movies returns 409 when the TMDB id is already stored."""
        create()
        r = client.post("/movies", json={**PAYLOAD, "name": "Copy"})
        assert r.status_code == 409
        assert "278" in r.json()["message"]

    def test_list_movies(self):
        assert client.get("/movies").json() == []
        create()
        create({**PAYLOAD, "tmdb_id": 238, "name": "The Godfather"})

        r = client.get("/movies")
        assert r.status_code == 200
        assert {m["tmdb_id"] for m in r.json()} == {278, 238}

    def test_round_trip(self):
        """Creating then fetching by id returns the same fields."""
        created = create()
        r = client.get(f"/movies/{created['id']}")
        assert r.status_code == 200
        assert r.json() == created

    def test_get_movie_not_found(self):
        """GET /movies/{id} returns 404 for a non-existent movie."""
        r = client.get("/movies/does-not-exist")
        assert r.status_code == 404
        body = r.json()
        assert body["statusCode"] == 404
        assert "not found" in body["message"].lower()
        assert body["timestamp"]

    @pytest.mark.parametrize("method", ["put", "patch"])
    def test_update_movie(self, method):
        """PUT and PATCH /movies/{id} apply partial updates."""
        created = create()
        r = client.request(method.upper(), f"/movies/{created['id']}", json={"name": "Renamed", "voteCount": 30000})
        assert r.status_code == 200
        data = r.json()
        assert data["name"] == "Renamed"
        assert data["voteCount"] == 30000
        assert data["overview"] == PAYLOAD["overview"]
        assert client.get(f"/movies/{created['id']}").json()["name"] == "Renamed"

    def test_update_movie_not_found(self):
        r = client.patch("/movies/missing", json={"name": "x"})
        assert r.status_code == 404

    def test_update_to_taken_tmdb_id(self):
        create()
        other = create({**PAYLOAD, "tmdb_id": 238})
        r = client.patch(f"/movies/{other['id']}", json={"tmdb_id": 278})
        assert r.status_code == 409

    def test_delete_movie(self):
        """DELETE returns the deleted record; a later GET is 404."""
        created = create()
        r = client.delete(f"/movies/{created['id']}")
        assert r.status_code == 200
        assert r.json() == created

        assert client.get(f"/movies/{created['id']}").status_code == 404
        assert client.delete(f"/movies/{created['id']}").status_code == 404


class TestSystemEndpoints:
    """Tests for / and /api/health."""

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/health"

    def test_health(self):
        create()
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "database": "connected", "movies": 1}

    def test_lifespan_configures_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main, "configure_api_logging", lambda **kw: calls.append(kw))

        with TestClient(app) as started:
            assert started.get("/").status_code == 200

        assert calls == [{"level": main.get_log_level()}]
        assert app.router.on_startup == []
