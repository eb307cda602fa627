from __future__ import annotations

import logging
import os
import sys

from loguru import logger

from gridtext.config import get as cfg_get

__all__ = ["InterceptHandler", "logger", "setup_logging"]


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        # Skip internal frames from the logging module
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(
    default_level: int = logging.INFO,
    *,
    stdout: bool = False,
) -> None:
    """Configure loguru logging based on configuration and environment."""

    debug_env = os.getenv("GRIDTEXT_DEBUG", "0")
    level_name = os.getenv("GRIDTEXT_LOG_LEVEL", cfg_get("LOG_LEVEL", "INFO")).upper()

    is_debug = debug_env not in {"0", "", "false", "False"}

    if is_debug:
        level_name = "DEBUG"

    level = getattr(logging, level_name, default_level)
    if not isinstance(level, int):
        level = default_level

    stream = sys.stdout if stdout else sys.stderr

    logger.remove()
    logger.add(
        stream,
        level=level,
        format="{level} - {time:HH:mm:ss}: {message}",
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=level, force=True)

    logger.debug(
        f"Logging setup: GRIDTEXT_DEBUG={debug_env}, "
        f"GRIDTEXT_LOG_LEVEL={logging.getLevelName(level)}"
    )
