"""Tests for watch provider normalization."""

import httpx
import pytest
import respx

from movie_catalog.models.catalog import AccessType
from movie_catalog.models.tmdb import TMDbProvider, TMDbRegionProviders
from movie_catalog.services.platforms import Platform, match_platform, search_link
from movie_catalog.services.providers import (
    ProviderNormalizer,
    build_provider_entries,
    select_region,
)
from movie_catalog.services.tmdb import TMDbService
from tests.fixtures.tmdb_responses import API, providers_payload


class TestPlatformTable:
    """Tests for the known platform lookup."""

    @pytest.mark.parametrize(
        "name, platform",
        [
            ("Netflix", Platform.NETFLIX),
            ("Netflix basic with Ads", Platform.NETFLIX),
            ("Amazon Prime Video", Platform.PRIME_VIDEO),
            ("Prime Video", Platform.PRIME_VIDEO),
            ("Disney Plus Hotstar", Platform.HOTSTAR),
            ("YouTube", Platform.YOUTUBE),
            ("Apple TV", Platform.APPLE_TV),
            ("JioCinema", Platform.JIOCINEMA),
            ("Zee5", Platform.ZEE5),
            ("SonyLIV", Platform.SONYLIV),
        ],
    )
    def test_match(self, name, platform):
        assert match_platform(name) is platform

    def test_unknown_provider(self):
        assert match_platform("Amazon Video") is None
        assert match_platform("MUBI") is None

    def test_search_link_encodes_title(self):
        assert search_link(Platform.NETFLIX, "Joe's Road Trip") == (
            "https://www.netflix.com/search?q=Joe%27s%20Road%20Trip"
        )
        assert search_link(Platform.PRIME_VIDEO, "Kill") == (
            "https://www.amazon.in/s?k=Kill&i=instant-video"
        )


class TestBuildProviderEntries:
    """Tests for flattening and deduplicating provider buckets."""

    def region(self):
        return TMDbRegionProviders(
            link="https://www.themoviedb.org/movie/1/watch?locale=IN",
            flatrate=[TMDbProvider("Netflix", "/netflix.png")],
            rent=[TMDbProvider("Netflix", "/netflix.png"), TMDbProvider("Amazon Video", "/amazon.png")],
            buy=[TMDbProvider("Netflix", "/netflix.png"), TMDbProvider("Apple TV", "/apple.png")],
        )

    def test_first_access_type_wins(self):
        """Netflix listed under stream, rent and buy is kept once as Stream."""
        entries = build_provider_entries(self.region(), "Kill")
        netflix = [e for e in entries if e.name == "Netflix"]
        assert len(netflix) == 1
        assert netflix[0].access_type is AccessType.STREAM

    def test_scan_order_and_links(self):
        entries = build_provider_entries(self.region(), "Kill")
        assert [(e.name, e.access_type) for e in entries] == [
            ("Netflix", AccessType.STREAM),
            ("Amazon Video", AccessType.RENT),
            ("Apple TV", AccessType.BUY),
        ]
        assert entries[0].link == "https://www.netflix.com/search?q=Kill"
        assert entries[1].link == "https://www.themoviedb.org/movie/1/watch?locale=IN"
        assert entries[2].link == "https://tv.apple.com/search?term=Kill"
        assert entries[2].logo_ref == "/apple.png"

    def test_empty_region(self):
        assert build_provider_entries(TMDbRegionProviders(), "Kill") == []


class TestSelectRegion:
    """Tests for region preference."""

    def test_primary_preferred(self):
        india, us = TMDbRegionProviders(link="in"), TMDbRegionProviders(link="us")
        assert select_region({"US": us, "IN": india}, "IN", "US") is india

    def test_fallback(self):
        us = TMDbRegionProviders(link="us")
        assert select_region({"US": us, "GB": TMDbRegionProviders()}, "IN", "US") is us

    def test_neither(self):
        assert select_region({"GB": TMDbRegionProviders()}, "IN", "US") is None


class TestProviderNormalizer:
    """Tests for ProviderNormalizer against a mocked TMDb."""

    @pytest.fixture
    def normalizer(self):
        return ProviderNormalizer(tmdb=TMDbService(api_key="k"), primary_region="IN", fallback_region="US")

    @pytest.mark.asyncio
    @respx.mock
    async def test_falls_back_to_secondary_region(self, normalizer):
        respx.get(f"{API}/movie/1001/watch/providers").mock(
            return_value=httpx.Response(200, json=providers_payload("US"))
        )
        entries = await normalizer.normalize(1001, "Dhurandhar")
        assert [e.name for e in entries] == ["Netflix", "Amazon Video", "Apple TV"]
        assert entries[1].link.endswith("locale=US")

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_region_data(self, normalizer):
        respx.get(f"{API}/movie/1001/watch/providers").mock(
            return_value=httpx.Response(200, json=providers_payload("GB"))
        )
        assert await normalizer.normalize(1001, "Dhurandhar") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_failure_gives_empty_list(self, normalizer):
        respx.get(f"{API}/movie/1001/watch/providers").mock(return_value=httpx.Response(500))
        assert await normalizer.normalize(1001, "Dhurandhar") == []
