"""loguru sink setup shared by the server and the one-shot CLI."""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {module}:{function}:{line} - {message}"


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Replace loguru's default sink with stderr (and optionally a rotating file)."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level=level, format=LOG_FORMAT, rotation="10 MB", encoding="utf-8")


__all__ = ["configure_logging", "logger"]
