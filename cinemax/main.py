"""FastAPI entrypoint: TMDb proxies plus the server-rendered pages."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from cinemax.core.config import require_api_key
from cinemax.services import catalog
from cinemax.services.tmdb import TMDbClient, TMDbError, get_tmdb_client
from cinemax.views.pages import HomePage, MovieDetailPage, SearchPage

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Refuse to start without a TMDb key."""

    require_api_key()
    logger.info("CineMax ready")
    yield


app = FastAPI(title="CineMax", lifespan=lifespan)
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/api/movie/{movie_id}")
async def get_movie(movie_id: str, client: TMDbClient = Depends(get_tmdb_client)):
    """Movie metadata merged with its cast and crew."""

    try:
        return await catalog.fetch_movie_details(movie_id, client=client)
    except TMDbError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch movie details")


@app.get("/api/search")
async def search(
    query: str | None = None,
    page: str = "1",
    client: TMDbClient = Depends(get_tmdb_client),
):
    if not query:
        return _error(status.HTTP_400_BAD_REQUEST, "Query parameter is required")
    try:
        return await catalog.search_movies(query, page, client=client)
    except TMDbError as exc:
        logger.warning("Search proxy failed for %r: %s", query, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to search movies")


@app.get("/api/trending")
async def trending(client: TMDbClient = Depends(get_tmdb_client)):
    try:
        return await catalog.fetch_trending(client=client)
    except TMDbError as exc:
        logger.warning("Trending proxy failed: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch trending movies")


@app.get("/", response_class=HTMLResponse)
async def home_page(request: Request, client: TMDbClient = Depends(get_tmdb_client)):
    page = HomePage(client)
    await page.load()
    return templates.TemplateResponse(
        request,
        "home.html",
        {"page": page, "state": page.state},
    )


@app.get("/search", response_class=HTMLResponse)
async def search_page(
    request: Request,
    q: str | None = None,
    page: str | None = None,
    client: TMDbClient = Depends(get_tmdb_client),
):
    view = SearchPage(client)
    await view.navigate(q, page)
    return templates.TemplateResponse(
        request,
        "search.html",
        {
            "page": view,
            "state": view.state,
            "search_input": view.search_input,
            "pagination": view.pagination,
        },
    )


@app.get("/movie/{movie_id}", response_class=HTMLResponse)
async def movie_page(request: Request, movie_id: str, client: TMDbClient = Depends(get_tmdb_client)):
    view = MovieDetailPage(client)
    await view.load(movie_id)
    return templates.TemplateResponse(
        request,
        "movie.html",
        {"page": view, "state": view.state},
    )
