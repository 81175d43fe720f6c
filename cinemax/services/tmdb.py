"""Thin async wrapper around the TMDb API used by the proxies."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from cinemax.core.config import get_settings


logger = logging.getLogger(__name__)


class TMDbError(Exception):
    """Base exception for TMDb-related failures."""


class TMDbClient:
    """Simple TMDb HTTP client using API key auth."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key or settings.tmdb_api_key
        self.base_url = (base_url or settings.tmdb_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.tmdb_timeout
        self.transport = transport

    async def _request(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        if not self.api_key:
            raise TMDbError("TMDB_API_KEY is not configured")
        url = f"{self.base_url}{path}"
        query = {"api_key": self.api_key}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})
        logger.debug("TMDb GET %s params=%s", path, {k: v for k, v in query.items() if k != "api_key"})
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=query)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TMDbError(f"TMDb returned HTTP {exc.response.status_code} for {path}") from exc
        except httpx.HTTPError as exc:
            raise TMDbError(f"TMDb request failed for {path}: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise TMDbError(f"TMDb returned non-JSON response for {path}") from exc

    async def trending_movies(self, *, window: str = "week") -> dict[str, Any]:
        return await self._request(f"/trending/movie/{window}")

    async def search_movies(self, *, query: str, page: str = "1") -> dict[str, Any]:
        """Run a title search; ``page`` is forwarded as given."""

        return await self._request("/search/movie", params={"query": query, "page": page})

    async def movie(self, movie_id: str) -> dict[str, Any]:
        return await self._request(f"/movie/{_segment(movie_id)}")

    async def movie_credits(self, movie_id: str) -> dict[str, Any]:
        return await self._request(f"/movie/{_segment(movie_id)}/credits")


def _segment(raw: str | int) -> str:
    return quote(str(raw), safe="")


def get_tmdb_client() -> TMDbClient:
    """FastAPI dependency returning a client bound to current settings."""

    return TMDbClient()
