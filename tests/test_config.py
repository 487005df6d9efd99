"""Tests for settings loading."""

from pathlib import Path

import pytest

from movie_catalog.config import ConfigError, load_settings


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run from an empty directory so no stray .env is picked up."""
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_requires_api_key(self):
        with pytest.raises(ConfigError, match="TMDB_API_KEY"):
            load_settings()

    def test_blank_api_key_rejected(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "   ")
        with pytest.raises(ConfigError):
            load_settings()

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        settings = load_settings()

        assert settings.tmdb_api_key == "abc"
        assert settings.catalog_file == Path("data/movies.json")
        assert settings.posters_dir == Path("assets/images/posters")
        assert settings.primary_region == "IN"
        assert settings.fallback_region == "US"
        assert settings.trending_threshold == 50.0
        assert settings.description_word_limit == 250
        assert settings.concurrency == 1
        assert settings.targets_file is None

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        monkeypatch.setenv("MOVIE_CATALOG_FILE", "/srv/site/movies.json")
        monkeypatch.setenv("MOVIE_CATALOG_PRIMARY_REGION", "gb")
        monkeypatch.setenv("MOVIE_CATALOG_TRENDING_THRESHOLD", "75.5")
        monkeypatch.setenv("MOVIE_CATALOG_CONCURRENCY", "4")
        monkeypatch.setenv("MOVIE_CATALOG_POSTER_URL_PREFIX", "/static/posters/")
        settings = load_settings()

        assert settings.catalog_file == Path("/srv/site/movies.json")
        assert settings.primary_region == "GB"
        assert settings.trending_threshold == 75.5
        assert settings.concurrency == 4
        assert settings.poster_url_prefix == "/static/posters"

    def test_malformed_number(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        monkeypatch.setenv("MOVIE_CATALOG_DESCRIPTION_WORDS", "many")
        with pytest.raises(ConfigError, match="MOVIE_CATALOG_DESCRIPTION_WORDS"):
            load_settings()

    def test_zero_concurrency(self, monkeypatch):
        monkeypatch.setenv("TMDB_API_KEY", "abc")
        monkeypatch.setenv("MOVIE_CATALOG_CONCURRENCY", "0")
        with pytest.raises(ConfigError):
            load_settings()

    def test_reads_dotenv(self, tmp_path, monkeypatch):
        # undo also removes the value loaded from .env
        monkeypatch.setenv("TMDB_API_KEY", "placeholder")
        monkeypatch.delenv("TMDB_API_KEY")
        (tmp_path / ".env").write_text("TMDB_API_KEY=from-dotenv\n", encoding="utf-8")
        settings = load_settings()
        assert settings.tmdb_api_key == "from-dotenv"
