"""Shared pytest fixtures."""

import pytest

from movie_catalog.models.catalog import MovieRecord, TargetSpec


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in (
        "TMDB_API_KEY",
        "MOVIE_CATALOG_FILE",
        "MOVIE_CATALOG_POSTERS_DIR",
        "MOVIE_CATALOG_POSTER_URL_PREFIX",
        "MOVIE_CATALOG_TARGETS",
        "MOVIE_CATALOG_PRIMARY_REGION",
        "MOVIE_CATALOG_FALLBACK_REGION",
        "MOVIE_CATALOG_TRENDING_THRESHOLD",
        "MOVIE_CATALOG_DESCRIPTION_WORDS",
        "MOVIE_CATALOG_CONCURRENCY",
        "MOVIE_CATALOG_LOG_LEVEL",
        "MOVIE_CATALOG_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dhurandhar_target() -> TargetSpec:
    return TargetSpec(name="Dhurandhar", year=2025, category="Action", tags=("Action", "India"))


@pytest.fixture
def sample_record() -> MovieRecord:
    return MovieRecord(
        id=1,
        slug="kill",
        title="Kill",
        year=2023,
        genre_primary="Action",
        genres=["Action"],
        tags=["Action", "India"],
    )
