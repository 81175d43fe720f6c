from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from cinemax.core.config import get_settings
from cinemax.main import app
from cinemax.services.tmdb import TMDbClient, get_tmdb_client


@pytest.fixture(autouse=True)
def reset_env(monkeypatch):
    # Keep a developer's real .env/TMDB_* settings out of the tests
    monkeypatch.setenv("TMDB_API_KEY", "test-key")
    monkeypatch.delenv("TMDB_TIMEOUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeProvider:
    """Canned TMDb responses keyed by URL path, recording every request."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload: object, status_code: int = 200) -> None:
        self.routes[f"/3{path}"] = (status_code, payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, payload = self.routes.get(request.url.path, (404, {"status_message": "not found"}))
        return httpx.Response(status_code, json=payload)

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [req for req in self.requests if req.url.path == f"/3{path}"]


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def tmdb_client(provider):
    return TMDbClient(api_key="test-key", transport=httpx.MockTransport(provider))


@pytest.fixture
def client(tmdb_client):
    app.dependency_overrides[get_tmdb_client] = lambda: tmdb_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def inception():
    return {
        "id": 27205,
        "title": "Inception",
        "poster_path": "/inception.jpg",
        "backdrop_path": "/dream.jpg",
        "vote_average": 8.4,
        "release_date": "2010-07-15",
        "overview": "Cobb steals secrets from dreams.",
        "runtime": 148,
        "budget": 160000000,
        "revenue": 839030630,
        "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
    }


@pytest.fixture
def inception_credits():
    return {
        "id": 27205,
        "cast": [
            {"id": i, "name": f"Actor {i}", "character": f"Role {i}", "profile_path": f"/p{i}.jpg" if i % 2 else None}
            for i in range(1, 9)
        ],
        "crew": [
            {"id": 100, "name": "Emma Thomas", "job": "Producer"},
            {"id": 525, "name": "Christopher Nolan", "job": "Director"},
            {"id": 526, "name": "Someone Else", "job": "Director"},
        ],
    }
