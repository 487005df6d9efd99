"""Title resolution against TMDb search."""

import httpx
from attrs import define
from loguru import logger

from ..models.catalog import TargetSpec
from ..stages import Resolve
from .tmdb import TMDbService


@define
class Resolver(Resolve):
    """Resolve a (title, year) pair to the top-ranked TMDb id."""

    tmdb: TMDbService

    async def resolve(self, target: TargetSpec) -> int | None:
        try:
            return await self.tmdb.search_movie(target.name, target.year)
        except httpx.HTTPError as e:
            logger.warning("Search failed for {!r}: {}", target.name, e)
            return None
