"""Watch provider normalization."""

import httpx
from attrs import define
from loguru import logger

from ..models.catalog import AccessType, ProviderEntry
from ..models.tmdb import TMDbRegionProviders
from ..stages import NormalizeProviders
from .platforms import match_platform, search_link
from .tmdb import TMDbService


def select_region(
    regions: dict[str, TMDbRegionProviders], primary: str, fallback: str
) -> TMDbRegionProviders | None:
    """Prefer the primary region, then the fallback one."""
    return regions.get(primary) or regions.get(fallback)


def build_provider_entries(region: TMDbRegionProviders, title: str) -> list[ProviderEntry]:
    """Flatten stream/rent/buy buckets into one list, first name seen wins."""
    entries: list[ProviderEntry] = []
    seen: set[str] = set()
    buckets = (
        (region.flatrate, AccessType.STREAM),
        (region.rent, AccessType.RENT),
        (region.buy, AccessType.BUY),
    )
    for providers, access_type in buckets:
        for provider in providers:
            if provider.provider_name in seen:
                continue
            seen.add(provider.provider_name)
            platform = match_platform(provider.provider_name)
            entries.append(
                ProviderEntry(
                    name=provider.provider_name,
                    access_type=access_type,
                    link=search_link(platform, title) if platform else region.link,
                    logo_ref=provider.logo_path,
                )
            )
    return entries


@define
class ProviderNormalizer(NormalizeProviders):
    """Produce a link-annotated provider list for one region."""

    tmdb: TMDbService
    primary_region: str = "IN"
    fallback_region: str = "US"

    async def normalize(self, tmdb_id: int, title: str) -> list[ProviderEntry]:
        try:
            regions = await self.tmdb.get_watch_providers(tmdb_id)
        except (httpx.HTTPError, ValueError, TypeError, AttributeError, KeyError) as e:
            logger.warning("Watch providers request failed for {!r}: {}", title, e)
            return []

        region = select_region(regions, self.primary_region, self.fallback_region)
        if region is None:
            logger.debug("No provider data in {}/{} for {!r}", self.primary_region, self.fallback_region, title)
            return []
        return build_provider_entries(region, title)
