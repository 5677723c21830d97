"""Logging setup for the ``typp`` logger namespace.

The terminal is in raw mode for the whole session, so records go to a file
rather than stdout/stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "typp"
LOG_FILENAME = "typp.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(LOGGER_NAME, appauthor=False)) / LOG_FILENAME


def setup_logging(level: str | int = logging.WARNING, log_file: Path | None = None) -> logging.Logger:
    """Configure the package logger and return it.

    Uses ``log_file`` when given, otherwise the per-user log directory. When
    the file cannot be opened a ``NullHandler`` is installed instead.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Avoid duplicate handlers when main() runs more than once in one process.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    path = log_file if log_file is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.debug("logging initialized at %s", path)
    return logger
