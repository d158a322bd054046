"""Centralized logging configuration."""

from __future__ import annotations

import sys

from loguru import logger

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
    )
)


def _stderr_sink(message: str) -> None:
    # Resolve sys.stderr per write so redirected streams are honoured.
    sys.stderr.write(message)


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a single stderr sink."""
    logger.remove()
    logger.add(_stderr_sink, level=level.upper(), format=log_format, colorize=False)
