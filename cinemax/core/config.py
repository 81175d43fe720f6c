"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing at startup."""


class Settings(BaseSettings):
    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_image_base: str = Field(default="https://image.tmdb.org/t/p")
    tmdb_timeout: float | None = Field(default=None, alias="TMDB_TIMEOUT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def require_api_key(settings: Settings | None = None) -> str:
    """Return the TMDb key or fail loudly so the server never starts without one."""

    settings = settings or get_settings()
    api_key = (settings.tmdb_api_key or "").strip()
    if not api_key:
        raise ConfigurationError("TMDB_API_KEY is not configured")
    return api_key
