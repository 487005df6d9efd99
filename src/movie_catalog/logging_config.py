"""Logging setup via loguru.

Console output is coloured and human readable. When a log file is configured,
a second sink writes JSON lines with rotation for later inspection.
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(log_level: str = "INFO", log_file: Path | None = None) -> None:
    """Replace loguru's default sink with the application sinks."""
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation="10 MB",
            retention=5,
            enqueue=True,
        )

    logger.debug("Logging configured (level={}, file={})", log_level, log_file)
