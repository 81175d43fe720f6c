"""Service helpers behind the JSON proxies and the page controllers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from cinemax.services.tmdb import TMDbClient, TMDbError


logger = logging.getLogger(__name__)


async def fetch_movie_details(movie_id: str, *, client: TMDbClient | None = None) -> dict[str, Any]:
    """Fetch a movie and its credits in parallel and merge them into one document.

    Both requests always run to completion before anything is decided; if
    either one failed the whole lookup fails with a single ``TMDbError``.
    """

    client = client or TMDbClient()
    movie, credits = await asyncio.gather(
        client.movie(movie_id),
        client.movie_credits(movie_id),
        return_exceptions=True,
    )
    for outcome in (movie, credits):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.warning("Movie %s lookup failed: %s", movie_id, outcome)
            raise TMDbError(f"Failed to fetch movie details for {movie_id}") from outcome
    if not isinstance(movie, dict) or not isinstance(credits, dict):
        raise TMDbError(f"Unexpected TMDb payload shape for movie {movie_id}")

    return {
        **movie,
        "cast": credits.get("cast") or [],
        "crew": credits.get("crew") or [],
    }


async def search_movies(query: str, page: str = "1", *, client: TMDbClient | None = None) -> dict[str, Any]:
    """Relay a title search to TMDb and return its payload untouched."""

    client = client or TMDbClient()
    return _expect_object(await client.search_movies(query=query, page=page), "search")


async def fetch_trending(window: str = "week", *, client: TMDbClient | None = None) -> dict[str, Any]:
    client = client or TMDbClient()
    return _expect_object(await client.trending_movies(window=window), "trending")


def _expect_object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise TMDbError(f"Unexpected TMDb {what} payload shape: {type(payload).__name__}")
    return payload
