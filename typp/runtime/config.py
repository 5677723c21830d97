"""Persistent JSON config helpers.

Stores the tab stop used for row rendering and the default log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..text import DEFAULT_TAB_STOP

APP_NAME = "typp"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

MIN_TAB_STOP = 1
MAX_TAB_STOP = 16
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVEL_NAMES = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored to keep runtime behavior non-fatal when the
    config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        logging.getLogger(__name__).warning("could not write config to %s", CONFIG_PATH)


def load_tab_stop() -> int:
    """Return the configured tab stop.

    Booleans, non-integers, and values outside ``[1, 16]`` fall back to the
    default of 8 columns.
    """
    value = load_config().get("tab_stop")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_TAB_STOP
    if not MIN_TAB_STOP <= value <= MAX_TAB_STOP:
        return DEFAULT_TAB_STOP
    return value


def save_tab_stop(tab_stop: int) -> None:
    """Persist a tab stop, clamped into the accepted range."""
    config = load_config()
    config["tab_stop"] = max(MIN_TAB_STOP, min(MAX_TAB_STOP, int(tab_stop)))
    save_config(config)


def load_log_level() -> str:
    """Return the configured log level name, upper-cased, or ``WARNING``."""
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    return name if name in _LOG_LEVEL_NAMES else DEFAULT_LOG_LEVEL
