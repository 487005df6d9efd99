"""Tests for tag derivation."""

from movie_catalog.services.tags import derive_tags, is_featured, merge_tags


class TestDeriveTags:
    """Tests for derive_tags()."""

    def test_popular_title_gains_trending(self):
        assert derive_tags(("Action", "India"), 88.2, 50) == ["Action", "India", "Trending"]

    def test_threshold_is_exclusive(self):
        assert derive_tags(("Action",), 50, 50) == ["Action"]

    def test_no_popularity(self):
        assert derive_tags(("Horror",), None, 50) == ["Horror"]

    def test_trending_not_duplicated(self):
        assert derive_tags(("Netflix", "Trending"), 120, 50) == ["Netflix", "Trending"]


class TestMergeAndFeatured:
    def test_merge_keeps_existing_tags(self):
        assert merge_tags(["Action", "India"], ["Netflix", "India"]) == ["Action", "India", "Netflix"]

    def test_featured(self):
        assert is_featured(["India", "Trending"])
        assert is_featured(["Netflix"])
        assert not is_featured(["Horror", "India"])
