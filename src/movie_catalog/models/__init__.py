"""Data models for the movie catalog."""

from .catalog import AccessType, MovieRecord, ProviderEntry, TargetSpec
from .tmdb import TMDbMovie, TMDbProvider, TMDbRegionProviders, TMDbVideo

__all__ = [
    "AccessType",
    "MovieRecord",
    "ProviderEntry",
    "TargetSpec",
    "TMDbMovie",
    "TMDbProvider",
    "TMDbRegionProviders",
    "TMDbVideo",
]
