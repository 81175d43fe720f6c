"""Presentational helpers: card model, search input, pagination and formatters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from urllib.parse import urlencode

from cinemax.core.config import get_settings
from cinemax.services.models import MovieSummary

FALLBACK_POSTER = "/static/abstract-movie-poster.svg"
PLACEHOLDER_IMAGE = "/static/placeholder.svg"


def _one_decimal(value: float) -> str:
    # exact binary value, halves round up: 3.25 -> "3.3"
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_rating(vote_average: float | None) -> str:
    """TMDb scores are 0-10; the UI shows them on a five star scale."""

    return _one_decimal((vote_average or 0) / 2)


def format_currency(value: int | float | None) -> str:
    if not value:
        return "N/A"
    return f"${_one_decimal(value / 1_000_000)}M"


def _parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw[:10]).date()
    except ValueError:
        return None


def format_release_date(raw: str | None) -> str:
    parsed = _parse_date(raw)
    if parsed is None:
        return "N/A"
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def release_year(raw: str | None) -> str:
    parsed = _parse_date(raw)
    return str(parsed.year) if parsed else "N/A"


def image_url(path: str | None, size: str, *, fallback: str | None = PLACEHOLDER_IMAGE) -> str | None:
    if not path:
        return fallback
    base = get_settings().tmdb_image_base.rstrip("/")
    return f"{base}/{size}{path}"


def search_location(query: str, page: int | str | None = None) -> str:
    params = {"q": query}
    if page is not None:
        params["page"] = str(page)
    return f"/search?{urlencode(params)}"


@dataclass(frozen=True)
class MovieCard:
    """Everything a card template needs, derived from one summary."""

    href: str
    title: str
    year: str
    rating: str
    poster_url: str
    overview: str

    @classmethod
    def from_summary(cls, movie: MovieSummary) -> MovieCard:
        return cls(
            href=f"/movie/{movie.id}",
            title=movie.title,
            year=release_year(movie.release_date),
            rating=format_rating(movie.vote_average),
            poster_url=image_url(movie.poster_path, "w500", fallback=FALLBACK_POSTER),
            overview=movie.overview or "No description available.",
        )


@dataclass
class SearchInput:
    text: str = ""
    placeholder: str = "Search movies, actors, directors..."

    def submit(self) -> str | None:
        """Return the search page location, or None when there is nothing to search."""

        if not self.text.strip():
            return None
        return search_location(self.text)


@dataclass(frozen=True)
class Pagination:
    query: str
    current_page: int
    total_pages: int

    @property
    def visible(self) -> bool:
        return self.total_pages > 1

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def previous_href(self) -> str | None:
        if not self.has_previous:
            return None
        return search_location(self.query, self.current_page - 1)

    @property
    def next_href(self) -> str | None:
        if not self.has_next:
            return None
        return search_location(self.query, self.current_page + 1)
