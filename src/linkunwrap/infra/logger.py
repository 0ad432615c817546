"""
Logging setup for the ``linkunwrap`` logger tree.
"""

from __future__ import annotations

__all__ = ["setup_logging"]

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from linkunwrap.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILENAME = f"{PACKAGE_NAME}.log"


def setup_logging(
    log_level: str | int = "INFO",
    log_dir: str | Path | None = None,
    *,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure console (and optionally file) logging for the package.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        log_level: Level name or number.
        log_dir: Directory for a rotating ``linkunwrap.log``; console only if
            not given.
        max_bytes: Rotation threshold of the log file.
        backup_count: Number of rotated files to keep.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_NAME)
    level = log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir:
        path = Path(log_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path / LOG_FILENAME,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
