"""Ingest orchestration: resolve, fetch, enrich and reconcile each target."""

import asyncio
from enum import Enum

from attrs import define, field
from loguru import logger

from .catalog import Catalog, ReconcileOutcome, load_catalog, save_catalog, slugify
from .config import Settings
from .models.catalog import MovieRecord, ProviderEntry, TargetSpec
from .models.tmdb import TMDbMovie
from .services.details import (
    DetailFetcher,
    format_rating,
    format_runtime,
    primary_genre,
    release_year,
    select_trailer,
    truncate_words,
)
from .services.posters import PosterCache
from .services.providers import ProviderNormalizer
from .services.resolver import Resolver
from .services.tags import derive_tags, is_featured
from .services.tmdb import TMDbService
from .stages import CachePoster, FetchDetails, NormalizeProviders, Resolve


class TargetState(str, Enum):
    RESOLVING = "resolving"
    FETCHING = "fetching"
    ENRICHING = "enriching"
    RECONCILING = "reconciling"
    DONE = "done"
    SKIPPED = "skipped"


@define
class TargetResult:
    """What happened to one target during a run."""

    target: TargetSpec
    state: TargetState = TargetState.RESOLVING
    record: MovieRecord | None = None
    outcome: ReconcileOutcome | None = None
    reason: str | None = None

    def skip(self, reason: str) -> "TargetResult":
        self.state = TargetState.SKIPPED
        self.reason = reason
        return self


@define
class RunSummary:
    results: list[TargetResult] = field(factory=list)

    def _count(self, outcome: ReconcileOutcome) -> int:
        return sum(1 for r in self.results if r.outcome is outcome)

    @property
    def added(self) -> int:
        return self._count(ReconcileOutcome.ADDED)

    @property
    def updated(self) -> int:
        return self._count(ReconcileOutcome.UPDATED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.state is TargetState.SKIPPED)


def build_record(
    target: TargetSpec,
    details: TMDbMovie,
    providers: list[ProviderEntry],
    poster_ref: str | None,
    trending_threshold: float = 50.0,
    description_word_limit: int = 250,
) -> MovieRecord:
    """Assemble a catalog record; the id is assigned during reconciliation."""
    tags = derive_tags(target.tags, details.popularity, trending_threshold)
    return MovieRecord(
        id=0,
        slug=slugify(details.title),
        title=details.title,
        year=release_year(details.release_date, target.year),
        genre_primary=primary_genre(details.genres),
        genres=list(details.genres),
        rating=format_rating(details.vote_average),
        duration_text=format_runtime(details.runtime),
        poster_ref=poster_ref or details.poster_path,
        trailer_embed_url=select_trailer(details.videos),
        description=truncate_words(details.overview, description_word_limit),
        platforms=[p.name for p in providers[:2]],
        providers=providers,
        language=(details.original_language or "").upper(),
        tags=tags,
        featured=is_featured(tags),
    )


@define
class IngestPipeline:
    """Run every target through the stages and merge results into a catalog.

    Stage work for different targets may overlap up to ``concurrency``;
    reconciliation always happens afterwards in target order.
    """

    resolver: Resolve
    details: FetchDetails
    providers: NormalizeProviders
    posters: CachePoster
    trending_threshold: float = 50.0
    description_word_limit: int = 250
    concurrency: int = 1

    async def run(self, targets: list[TargetSpec], catalog: Catalog) -> RunSummary:
        semaphore = asyncio.Semaphore(max(1, self.concurrency))

        async def bounded(target: TargetSpec) -> TargetResult:
            async with semaphore:
                return await self.process(target)

        results = await asyncio.gather(*(bounded(t) for t in targets))

        for result in results:
            if result.state is TargetState.SKIPPED:
                continue
            record, outcome = catalog.reconcile(result.record)
            result.record = record
            result.outcome = outcome
            result.state = TargetState.DONE
            logger.info("{}: {} (id {})", outcome.value.capitalize(), result.target.name, record.id)

        summary = RunSummary(results=list(results))
        logger.info(
            "Run complete: {} added, {} updated, {} skipped, {} records in catalog",
            summary.added,
            summary.updated,
            summary.skipped,
            len(catalog),
        )
        return summary

    async def process(self, target: TargetSpec) -> TargetResult:
        """Take one target as far as a candidate record, or skip it."""
        result = TargetResult(target=target)
        logger.info("Processing: {} ({})", target.name, target.year or "Any")
        try:
            tmdb_id = await self.resolver.resolve(target)
            if tmdb_id is None:
                logger.info("Movie not found: {}", target.name)
                return result.skip("not found")

            result.state = TargetState.FETCHING
            details = await self.details.fetch(tmdb_id)
            if details is None:
                logger.warning("Details unavailable for {} (TMDb id {})", target.name, tmdb_id)
                return result.skip("details unavailable")

            result.state = TargetState.ENRICHING
            slug = slugify(details.title)
            poster_ref = await self.posters.cache(details.poster_path, slug)
            providers = await self.providers.normalize(tmdb_id, details.title)

            result.record = build_record(
                target,
                details,
                providers,
                poster_ref,
                trending_threshold=self.trending_threshold,
                description_word_limit=self.description_word_limit,
            )
            result.state = TargetState.RECONCILING
            return result
        except Exception:
            logger.exception("Error while processing {}", target.name)
            return result.skip("error")


async def run_ingest(settings: Settings, targets: list[TargetSpec]) -> RunSummary:
    """Load the catalog, process all targets and write the catalog once."""
    catalog = load_catalog(settings.catalog_file)
    tmdb = TMDbService(api_key=settings.tmdb_api_key)
    pipeline = IngestPipeline(
        resolver=Resolver(tmdb=tmdb),
        details=DetailFetcher(tmdb=tmdb),
        providers=ProviderNormalizer(
            tmdb=tmdb,
            primary_region=settings.primary_region,
            fallback_region=settings.fallback_region,
        ),
        posters=PosterCache(
            tmdb=tmdb,
            output_dir=settings.posters_dir,
            url_prefix=settings.poster_url_prefix,
        ),
        trending_threshold=settings.trending_threshold,
        description_word_limit=settings.description_word_limit,
        concurrency=settings.concurrency,
    )
    try:
        summary = await pipeline.run(targets, catalog)
    finally:
        await tmdb.close()

    save_catalog(catalog, settings.catalog_file)
    return summary
