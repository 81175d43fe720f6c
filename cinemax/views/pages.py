"""Page controllers: fetch through the catalog services and expose view state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cinemax.services import catalog
from cinemax.services.models import MovieDetail, SearchResultPage, summaries_from_results
from cinemax.services.tmdb import TMDbClient, TMDbError
from cinemax.views.components import (
    MovieCard,
    Pagination,
    SearchInput,
    format_currency,
    format_rating,
    format_release_date,
    image_url,
)
from cinemax.views.state import Failed, FetchTracker, Loaded


logger = logging.getLogger(__name__)


class HomePage:
    """Weekly trending grid."""

    skeleton_count = 8

    def __init__(self, client: TMDbClient | None = None) -> None:
        self.client = client
        self.tracker = FetchTracker()

    @property
    def state(self):
        return self.tracker.state

    async def load(self) -> None:
        token = self.tracker.begin()
        try:
            payload = await catalog.fetch_trending(client=self.client)
        except TMDbError as exc:
            logger.warning("Trending fetch failed: %s", exc)
            self.tracker.settle(token, Failed("Failed to fetch movies"))
            return
        cards = [MovieCard.from_summary(movie) for movie in summaries_from_results(payload.get("results"))]
        self.tracker.settle(token, Loaded(cards))


class SearchPage:
    """Search results for the ``q``/``page`` pair taken from the URL."""

    skeleton_count = 8

    def __init__(self, client: TMDbClient | None = None) -> None:
        self.client = client
        self.tracker = FetchTracker()
        self.query: str | None = None
        self.page = "1"
        self.current_page = 1
        self.total_pages = 0

    @property
    def state(self):
        return self.tracker.state

    @property
    def search_input(self) -> SearchInput:
        return SearchInput()

    @property
    def pagination(self) -> Pagination:
        return Pagination(query=self.query or "", current_page=self.current_page, total_pages=self.total_pages)

    async def navigate(self, query: str | None, page: str | None = None) -> None:
        self.query = query or None
        self.page = page or "1"
        if not self.query:
            self.tracker.reset()
            return

        token = self.tracker.begin()
        try:
            payload = await catalog.search_movies(self.query, self.page, client=self.client)
        except TMDbError as exc:
            logger.warning("Search for %r failed: %s", self.query, exc)
            self.tracker.settle(token, Failed("Failed to fetch search results"))
            return

        result = SearchResultPage.from_payload(payload)
        cards = [MovieCard.from_summary(movie) for movie in result.results]
        if self.tracker.settle(token, Loaded(cards)):
            self.current_page = result.page
            self.total_pages = result.total_pages


@dataclass(frozen=True)
class MovieDetailView:
    """Display-ready fields for the movie detail template."""

    title: str
    backdrop_url: str
    poster_url: str
    rating: str
    release_date: str
    runtime: int | None
    genres: list[str]
    overview: str
    budget: str
    revenue: str
    director: str | None
    cast: list[dict] = field(default_factory=list)

    @classmethod
    def from_detail(cls, movie: MovieDetail) -> MovieDetailView:
        director = movie.director
        return cls(
            title=movie.title,
            backdrop_url=image_url(movie.backdrop_path, "original"),
            poster_url=image_url(movie.poster_path, "w500"),
            rating=format_rating(movie.vote_average),
            release_date=format_release_date(movie.release_date),
            runtime=movie.runtime,
            genres=[genre.name for genre in movie.genres],
            overview=movie.overview or "No overview available.",
            budget=format_currency(movie.budget),
            revenue=format_currency(movie.revenue),
            director=director.name if director else None,
            cast=[
                {
                    "name": member.name,
                    "character": member.character or "",
                    "photo_url": image_url(member.profile_path, "w200", fallback=None),
                }
                for member in movie.top_cast(6)
            ],
        )


class MovieDetailPage:
    def __init__(self, client: TMDbClient | None = None) -> None:
        self.client = client
        self.tracker = FetchTracker()

    @property
    def state(self):
        return self.tracker.state

    async def load(self, movie_id: str) -> None:
        token = self.tracker.begin()
        try:
            payload = await catalog.fetch_movie_details(movie_id, client=self.client)
        except TMDbError:
            self.tracker.settle(token, Failed("Failed to fetch movie details"))
            return
        if not payload or not payload.get("id"):
            self.tracker.settle(token, Failed("Movie not found"))
            return
        self.tracker.settle(token, Loaded(MovieDetailView.from_detail(MovieDetail.from_payload(payload))))
