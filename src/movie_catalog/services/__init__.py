"""Service layer: TMDb client and the pipeline stages built on it."""

from .details import DetailFetcher
from .posters import PosterCache
from .providers import ProviderNormalizer
from .resolver import Resolver
from .tmdb import TMDbService

__all__ = ["DetailFetcher", "PosterCache", "ProviderNormalizer", "Resolver", "TMDbService"]
