"""TMDb API service for search, details, watch providers and poster images."""

import httpx
from attrs import define
from loguru import logger

from ..models.tmdb import TMDbMovie, TMDbProvider, TMDbRegionProviders, TMDbVideo


TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
POSTER_SOURCE_WIDTH = "w500"

DETAIL_APPENDS = "videos,similar,credits,release_dates"


@define
class TMDbService:
    """Client for TMDb API."""

    api_key: str
    timeout: float = 30.0
    _client: httpx.AsyncClient | None = None
    _image_client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"Accept": "application/json"}
            params = {}
            # v4 read access tokens are long JWTs, v3 keys are 32 hex chars
            if len(self.api_key) > 40:
                headers["Authorization"] = f"Bearer {self.api_key}"
            else:
                params["api_key"] = self.api_key
            self._client = httpx.AsyncClient(
                base_url=TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
        return self._client

    async def _get_image_client(self) -> httpx.AsyncClient:
        if self._image_client is None:
            self._image_client = httpx.AsyncClient(
                base_url=TMDB_IMAGE_BASE_URL,
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self._image_client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
        if self._image_client:
            await self._image_client.aclose()
            self._image_client = None

    async def search_movie(self, title: str, year: int | None = None) -> int | None:
        """Search for a movie and return the TMDb ID of the best match."""
        client = await self._get_client()
        params = {"query": title}
        if year:
            params["year"] = year

        resp = await client.get("/search/movie", params=params)
        resp.raise_for_status()
        data = resp.json()

        results = data.get("results", [])
        if results:
            return results[0]["id"]
        return None

    async def get_movie(self, tmdb_id: int) -> TMDbMovie | None:
        """Fetch movie details with videos and similar titles inlined."""
        client = await self._get_client()
        try:
            resp = await client.get(
                f"/movie/{tmdb_id}",
                params={"append_to_response": DETAIL_APPENDS},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.debug("TMDb details for {} returned {}", tmdb_id, e.response.status_code)
            return None

        data = resp.json()
        videos_data = (data.get("videos") or {}).get("results", [])
        similar_data = (data.get("similar") or {}).get("results", [])

        return TMDbMovie(
            id=data["id"],
            title=data["title"],
            overview=data.get("overview"),
            runtime=data.get("runtime"),
            genres=[g["name"] for g in data.get("genres") or []],
            release_date=data.get("release_date"),
            original_language=data.get("original_language"),
            vote_average=data.get("vote_average"),
            popularity=data.get("popularity"),
            poster_path=data.get("poster_path"),
            videos=[
                TMDbVideo(
                    key=v.get("key", ""),
                    name=v.get("name") or "",
                    site=v.get("site", ""),
                    type=v.get("type", ""),
                )
                for v in videos_data
            ],
            similar=[s["title"] for s in similar_data if s.get("title")],
        )

    async def get_watch_providers(self, tmdb_id: int) -> dict[str, TMDbRegionProviders]:
        """Fetch watch providers keyed by region code."""
        client = await self._get_client()
        resp = await client.get(f"/movie/{tmdb_id}/watch/providers")
        resp.raise_for_status()
        data = resp.json()

        return {
            region: TMDbRegionProviders(
                link=payload.get("link"),
                flatrate=self._parse_providers(payload.get("flatrate")),
                rent=self._parse_providers(payload.get("rent")),
                buy=self._parse_providers(payload.get("buy")),
            )
            for region, payload in (data.get("results") or {}).items()
        }

    def _parse_providers(self, items: list[dict] | None) -> list[TMDbProvider]:
        return [
            TMDbProvider(provider_name=p["provider_name"], logo_path=p.get("logo_path"))
            for p in items or []
            if p.get("provider_name")
        ]

    async def get_poster(self, poster_path: str) -> bytes:
        """Download a poster image at the source resolution."""
        client = await self._get_image_client()
        resp = await client.get(f"/{POSTER_SOURCE_WIDTH}/{poster_path.lstrip('/')}")
        resp.raise_for_status()
        return resp.content
