"""Command line entry point for the catalog ingest run."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from .catalog import CatalogLoadError, CatalogWriteError
from .config import ConfigError, load_settings
from .logging_config import configure_logging
from .pipeline import run_ingest
from .targets import DEFAULT_TARGETS, load_targets

app = typer.Typer(
    name="movie-catalog",
    help="Build the movie catalog from the curated target list.",
    add_completion=False,
)


@app.command()
def ingest(
    targets: Annotated[
        Optional[Path],
        typer.Option("--targets", help="JSON file of targets (defaults to the curated list)"),
    ] = None,
    concurrency: Annotated[
        Optional[int],
        typer.Option("--concurrency", min=1, help="Targets fetched in parallel"),
    ] = None,
) -> None:
    """Resolve, enrich and reconcile every target, then write the catalog."""
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error("Configuration error: {}", e)
        raise typer.Exit(code=2)

    configure_logging(settings.log_level, settings.log_file)
    if concurrency is not None:
        settings.concurrency = concurrency

    targets_file = targets or settings.targets_file
    if targets_file is not None:
        try:
            target_list = load_targets(targets_file)
        except (OSError, ValueError) as e:
            logger.error("Cannot load targets from {}: {}", targets_file, e)
            raise typer.Exit(code=2)
    else:
        target_list = DEFAULT_TARGETS
    logger.info("Processing {} targets", len(target_list))

    try:
        summary = asyncio.run(run_ingest(settings, target_list))
    except (CatalogLoadError, CatalogWriteError) as e:
        logger.error("{}", e)
        raise typer.Exit(code=1)

    typer.echo(
        f"Done: {summary.added} added, {summary.updated} updated, {summary.skipped} skipped"
    )


def main() -> None:
    app()
