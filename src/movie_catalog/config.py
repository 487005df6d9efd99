"""Configuration management using environment variables (optionally from .env)."""

import os
from pathlib import Path

from attrs import define
from dotenv import load_dotenv


class ConfigError(RuntimeError):
    """Raised when required settings are missing or malformed."""


@define
class Settings:
    """Application settings."""

    tmdb_api_key: str
    catalog_file: Path = Path("data/movies.json")
    posters_dir: Path = Path("assets/images/posters")
    poster_url_prefix: str = "/assets/images/posters"
    targets_file: Path | None = None
    primary_region: str = "IN"
    fallback_region: str = "US"
    trending_threshold: float = 50.0
    description_word_limit: int = 250
    concurrency: int = 1
    log_level: str = "INFO"
    log_file: Path | None = None


def _env_number(name: str, default, cast):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _env_path(name: str) -> Path | None:
    raw = os.environ.get(name, "").strip()
    return Path(raw).expanduser() if raw else None


def load_settings() -> Settings:
    """Build settings from the process environment."""
    load_dotenv(Path(".env"), override=False)

    api_key = os.environ.get("TMDB_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("TMDB_API_KEY is not set")

    concurrency = _env_number("MOVIE_CATALOG_CONCURRENCY", 1, int)
    if concurrency < 1:
        raise ConfigError("MOVIE_CATALOG_CONCURRENCY must be at least 1")

    return Settings(
        tmdb_api_key=api_key,
        catalog_file=_env_path("MOVIE_CATALOG_FILE") or Path("data/movies.json"),
        posters_dir=_env_path("MOVIE_CATALOG_POSTERS_DIR") or Path("assets/images/posters"),
        poster_url_prefix=os.environ.get(
            "MOVIE_CATALOG_POSTER_URL_PREFIX", "/assets/images/posters"
        ).rstrip("/"),
        targets_file=_env_path("MOVIE_CATALOG_TARGETS"),
        primary_region=os.environ.get("MOVIE_CATALOG_PRIMARY_REGION", "IN").upper(),
        fallback_region=os.environ.get("MOVIE_CATALOG_FALLBACK_REGION", "US").upper(),
        trending_threshold=_env_number("MOVIE_CATALOG_TRENDING_THRESHOLD", 50.0, float),
        description_word_limit=_env_number("MOVIE_CATALOG_DESCRIPTION_WORDS", 250, int),
        concurrency=concurrency,
        log_level=os.environ.get("MOVIE_CATALOG_LOG_LEVEL", "INFO").upper(),
        log_file=_env_path("MOVIE_CATALOG_LOG_FILE"),
    )
