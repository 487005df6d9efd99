"""Pipeline stage interfaces.

The ingest pipeline only talks to these, so stage implementations can be
swapped for test doubles or wrapped with a different scheduling strategy.
"""

from abc import ABC, abstractmethod

from .models.catalog import ProviderEntry, TargetSpec
from .models.tmdb import TMDbMovie


class Resolve(ABC):
    @abstractmethod
    async def resolve(self, target: TargetSpec) -> int | None:
        """Return the upstream id for a target, or None when not found."""


class FetchDetails(ABC):
    @abstractmethod
    async def fetch(self, tmdb_id: int) -> TMDbMovie | None:
        """Return full movie metadata, or None on failure."""


class NormalizeProviders(ABC):
    @abstractmethod
    async def normalize(self, tmdb_id: int, title: str) -> list[ProviderEntry]:
        """Return the deduplicated provider list; empty on failure."""


class CachePoster(ABC):
    @abstractmethod
    async def cache(self, poster_path: str | None, slug: str) -> str | None:
        """Return a local poster reference, or None when unavailable."""
