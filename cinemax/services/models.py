"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _as_float(raw: Any) -> float:
    try:
        return float(raw or 0)
    except (TypeError, ValueError):
        return 0.0


def _objects(items: Any) -> list[dict[str, Any]]:
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _as_int(raw: Any) -> int:
    try:
        return int(raw or 0)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True, slots=True)
class MovieSummary:
    """Single movie as shown in list views."""

    id: int
    title: str
    poster_path: str | None = None
    vote_average: float = 0.0
    release_date: str | None = None
    overview: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> MovieSummary:
        return cls(
            id=payload.get("id"),
            title=payload.get("title") or "",
            poster_path=payload.get("poster_path"),
            vote_average=_as_float(payload.get("vote_average")),
            release_date=payload.get("release_date") or None,
            overview=payload.get("overview"),
        )


@dataclass(frozen=True, slots=True)
class Genre:
    id: int
    name: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Genre:
        return cls(id=payload.get("id"), name=payload.get("name") or "")


@dataclass(frozen=True, slots=True)
class CastMember:
    id: int
    name: str
    character: str | None = None
    profile_path: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CastMember:
        return cls(
            id=payload.get("id"),
            name=payload.get("name") or "",
            character=payload.get("character"),
            profile_path=payload.get("profile_path"),
        )


@dataclass(frozen=True, slots=True)
class CrewMember:
    id: int
    name: str
    job: str | None = None
    profile_path: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CrewMember:
        return cls(
            id=payload.get("id"),
            name=payload.get("name") or "",
            job=payload.get("job"),
            profile_path=payload.get("profile_path"),
        )


@dataclass(frozen=True, slots=True)
class MovieDetail:
    """Aggregated movie + credits record used by the detail page."""

    id: int
    title: str
    poster_path: str | None = None
    vote_average: float = 0.0
    release_date: str | None = None
    overview: str | None = None
    backdrop_path: str | None = None
    runtime: int | None = None
    budget: int = 0
    revenue: int = 0
    genres: tuple[Genre, ...] = ()
    cast: tuple[CastMember, ...] = ()
    crew: tuple[CrewMember, ...] = ()

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> MovieDetail:
        summary = MovieSummary.from_payload(payload)
        return cls(
            id=summary.id,
            title=summary.title,
            poster_path=summary.poster_path,
            vote_average=summary.vote_average,
            release_date=summary.release_date,
            overview=summary.overview,
            backdrop_path=payload.get("backdrop_path"),
            runtime=payload.get("runtime"),
            budget=_as_int(payload.get("budget")),
            revenue=_as_int(payload.get("revenue")),
            genres=tuple(Genre.from_payload(g) for g in _objects(payload.get("genres"))),
            cast=tuple(CastMember.from_payload(c) for c in _objects(payload.get("cast"))),
            crew=tuple(CrewMember.from_payload(c) for c in _objects(payload.get("crew"))),
        )

    @property
    def director(self) -> CrewMember | None:
        return next((member for member in self.crew if member.job == "Director"), None)

    def top_cast(self, limit: int = 6) -> tuple[CastMember, ...]:
        return self.cast[:limit]


@dataclass(frozen=True, slots=True)
class SearchResultPage:
    """One page of Provider search results."""

    results: tuple[MovieSummary, ...] = ()
    page: int = 1
    total_pages: int = 0
    total_results: int = 0

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> SearchResultPage:
        return cls(
            results=summaries_from_results(payload.get("results")),
            page=_as_int(payload.get("page")) or 1,
            total_pages=_as_int(payload.get("total_pages")),
            total_results=_as_int(payload.get("total_results")),
        )


def summaries_from_results(results: Any) -> tuple[MovieSummary, ...]:
    """Summaries for every object in a TMDb ``results`` list; anything else is skipped."""

    return tuple(MovieSummary.from_payload(item) for item in _objects(results))
