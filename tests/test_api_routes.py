import asyncio

import pytest

from cinemax.services import catalog
from cinemax.services.tmdb import TMDbError


def test_movie_details_merge_credits(client, provider, inception, inception_credits):
    provider.add("/movie/27205", inception)
    provider.add("/movie/27205/credits", inception_credits)

    resp = client.get("/api/movie/27205")

    assert resp.status_code == 200
    body = resp.json()
    for key, value in inception.items():
        assert body[key] == value
    assert body["cast"] == inception_credits["cast"]
    assert body["crew"] == inception_credits["crew"]
    assert len(provider.requests) == 2


@pytest.mark.parametrize("failing", ["/movie/27205", "/movie/27205/credits"])
def test_movie_details_all_or_nothing(client, provider, inception, inception_credits, failing):
    provider.add("/movie/27205", inception)
    provider.add("/movie/27205/credits", inception_credits)
    provider.add(failing, {"status_message": "down"}, status_code=500)

    resp = client.get("/api/movie/27205")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch movie details"}
    # both sub-requests still ran to completion
    assert len(provider.requests) == 2


def test_movie_details_requests_run_concurrently():
    class GatedClient:
        def __init__(self):
            self.credits_started = asyncio.Event()

        async def movie(self, movie_id):
            await self.credits_started.wait()
            return {"id": movie_id, "title": "Heat"}

        async def movie_credits(self, movie_id):
            self.credits_started.set()
            return {"cast": [{"name": "Al Pacino"}], "crew": []}

    async def scenario():
        return await asyncio.wait_for(catalog.fetch_movie_details("949", client=GatedClient()), timeout=1)

    merged = asyncio.run(scenario())
    assert merged == {"id": "949", "title": "Heat", "cast": [{"name": "Al Pacino"}], "crew": []}


def test_movie_details_missing_credit_arrays_become_empty(tmdb_client, provider):
    provider.add("/movie/5", {"id": 5, "title": "Four Rooms"})
    provider.add("/movie/5/credits", {"id": 5})

    merged = asyncio.run(catalog.fetch_movie_details("5", client=tmdb_client))

    assert merged["cast"] == [] and merged["crew"] == []


def test_search_requires_query(client, provider):
    for url in ("/api/search", "/api/search?query=", "/api/search?page=2"):
        resp = client.get(url)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Query parameter is required"}
    assert provider.requests == []


def test_search_relays_provider_payload(client, provider):
    payload = {
        "page": 2,
        "results": [{"id": 268, "title": "Batman"}],
        "total_pages": 7,
        "total_results": 130,
    }
    provider.add("/search/movie", payload)

    resp = client.get("/api/search", params={"query": "batman", "page": "2"})

    assert resp.status_code == 200
    assert resp.json() == payload
    (request,) = provider.calls_to("/search/movie")
    assert len(provider.requests) == 1
    assert request.url.params["query"] == "batman"
    assert request.url.params["page"] == "2"


def test_search_defaults_to_first_page_and_passes_page_verbatim(client, provider):
    provider.add("/search/movie", {"page": 1, "results": [], "total_pages": 0, "total_results": 0})

    client.get("/api/search", params={"query": "amélie & co"})
    client.get("/api/search", params={"query": "heat", "page": "-3"})

    first, second = provider.requests
    assert first.url.params["query"] == "amélie & co"
    assert first.url.params["page"] == "1"
    assert second.url.params["page"] == "-3"


def test_search_provider_failure(client, provider):
    provider.add("/search/movie", {"status_message": "invalid key"}, status_code=401)

    resp = client.get("/api/search", params={"query": "heat"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to search movies"}


def test_trending_proxy(client, provider):
    provider.add("/trending/movie/week", {"page": 1, "results": [{"id": 1, "title": "Dune"}]})

    resp = client.get("/api/trending")

    assert resp.status_code == 200
    assert resp.json()["results"][0]["title"] == "Dune"
    assert "test-key" not in resp.text


def test_trending_proxy_failure(client, monkeypatch):
    async def _boom(*_, **__):
        raise TMDbError("down")

    monkeypatch.setattr(catalog, "fetch_trending", _boom)

    resp = client.get("/api/trending")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch trending movies"}


def test_search_proxy_non_object_payload(client, provider):
    provider.add("/search/movie", ["not", "an", "object"])

    resp = client.get("/api/search", params={"query": "heat"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to search movies"}
