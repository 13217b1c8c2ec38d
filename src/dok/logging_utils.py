"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

_LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    """Configure process-level logging once per level."""

    global _CONFIGURED_LEVEL
    resolved = "DEBUG" if verbose else level.upper()
    if resolved == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=resolved,
        format=_LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = resolved
