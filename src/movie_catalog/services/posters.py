"""Local poster cache: download, resize and transcode TMDb posters."""

import asyncio
from io import BytesIO
from pathlib import Path

import httpx
from attrs import define, field
from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..stages import CachePoster
from .tmdb import TMDbService


POSTER_SIZE = (440, 660)
POSTER_FORMAT = "WEBP"
POSTER_EXTENSION = ".webp"


@define
class PosterCache(CachePoster):
    """Cache one transcoded poster per slug on disk."""

    tmdb: TMDbService
    output_dir: Path = field(factory=lambda: Path("./assets/images/posters"))
    url_prefix: str = "/assets/images/posters"
    _locks: dict[str, asyncio.Lock] = field(factory=dict)

    def __attrs_post_init__(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, slug: str) -> Path:
        return self.output_dir / f"{slug}{POSTER_EXTENSION}"

    def reference_for(self, slug: str) -> str:
        return f"{self.url_prefix}/{slug}{POSTER_EXTENSION}"

    async def cache(self, poster_path: str | None, slug: str) -> str | None:
        if not poster_path:
            return None

        lock = self._locks.setdefault(slug, asyncio.Lock())
        async with lock:
            local_path = self.path_for(slug)
            if local_path.exists():
                return self.reference_for(slug)

            try:
                image_data = await self.tmdb.get_poster(poster_path)
                await asyncio.to_thread(self.write_poster, image_data, local_path)
            except (httpx.HTTPError, OSError, UnidentifiedImageError) as e:
                logger.warning("Poster caching failed for {}: {}", slug, e)
                return None

            logger.info("Saved poster: {}", local_path.name)
            return self.reference_for(slug)

    def write_poster(self, image_data: bytes, local_path: Path) -> None:
        """Resize and transcode image bytes into the cache file."""
        img = Image.open(BytesIO(image_data))
        img = img.convert("RGB").resize(POSTER_SIZE, Image.Resampling.LANCZOS)

        # Write beside the target first so a failed save never looks cached
        tmp_path = local_path.with_suffix(local_path.suffix + ".tmp")
        try:
            img.save(tmp_path, POSTER_FORMAT)
            tmp_path.replace(local_path)
        finally:
            tmp_path.unlink(missing_ok=True)
