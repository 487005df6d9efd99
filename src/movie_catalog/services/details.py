"""Movie details retrieval and the field formatting derived from it."""

from decimal import ROUND_HALF_UP, Decimal

import httpx
from attrs import define
from loguru import logger

from ..models.catalog import UNANNOUNCED_YEAR
from ..models.tmdb import TMDbMovie, TMDbVideo
from ..stages import FetchDetails
from .tmdb import TMDbService


VIDEO_SITE = "YouTube"
EMBED_URL = "https://www.youtube.com/embed/{key}"


@define
class DetailFetcher(FetchDetails):
    """Fetch full metadata for a resolved TMDb id."""

    tmdb: TMDbService

    async def fetch(self, tmdb_id: int) -> TMDbMovie | None:
        try:
            return await self.tmdb.get_movie(tmdb_id)
        except httpx.HTTPError as e:
            logger.warning("Details request failed for TMDb id {}: {}", tmdb_id, e)
            return None


def select_trailer(videos: list[TMDbVideo]) -> str:
    """Pick the best trailer and return its embed URL, or "" if none fits.

    Preference: an official trailer, then any trailer, then a teaser. Only
    videos hosted on YouTube are considered.
    """
    hosted = [v for v in videos if v.site == VIDEO_SITE and v.key]
    passes = (
        lambda v: v.type == "Trailer" and "Official" in v.name,
        lambda v: v.type == "Trailer",
        lambda v: v.type == "Teaser",
    )
    for matches in passes:
        for video in hosted:
            if matches(video):
                return EMBED_URL.format(key=video.key)
    return ""


def primary_genre(genres: list[str]) -> str:
    return genres[0] if genres else "Unknown"


def format_rating(vote_average: float | None) -> str:
    """One decimal place, halves rounded up on the exact binary value."""
    if not vote_average:
        return "N/A"
    return str(Decimal(vote_average).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_runtime(runtime: int | None) -> str:
    if not runtime:
        return "TBA"
    return f"{runtime // 60}h {runtime % 60}m"


def truncate_words(text: str | None, limit: int) -> str:
    """Cut text to at most ``limit`` words, marking the cut with an ellipsis."""
    if not text:
        return ""
    words = text.split()
    if len(words) > limit:
        return " ".join(words[:limit]) + "..."
    return text


def release_year(release_date: str | None, fallback: int | None) -> int | str:
    """Year from an ISO release date, else the requested year, else unannounced."""
    if release_date and release_date[:4].isdigit():
        return int(release_date[:4])
    if fallback:
        return fallback
    return UNANNOUNCED_YEAR
