"""Command-line front door for typp.

Parses CLI options, sets up logging and config, and loads the document.
Then hands the terminal to the navigator; fatal terminal errors end here.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import PRODUCT_NAME, __version__
from .document import Document
from .log import setup_logging
from .runtime import Navigator, TerminalController, TerminalIOError
from .runtime.config import MAX_TAB_STOP, MIN_TAB_STOP, load_log_level, load_tab_stop, save_tab_stop

logger = logging.getLogger(__name__)


def _tab_stop(value: str) -> int:
    """argparse type for tab stops within the supported range."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not MIN_TAB_STOP <= parsed <= MAX_TAB_STOP:
        raise argparse.ArgumentTypeError(f"value must be between {MIN_TAB_STOP} and {MAX_TAB_STOP}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typp",
        description="View a text file in the terminal and move around it with vim-style keys.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to view. Omit for an empty document.")
    parser.add_argument("--tab-stop", type=_tab_stop, default=None, help="Tab width in columns (default: config or 8).")
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Store --tab-stop as the default in the config file.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: config or WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"{PRODUCT_NAME} {__version__}")
    return parser


def load_document(path: Path | None, tab_stop: int) -> Document:
    """Load ``path``, falling back to an empty document on any read failure."""
    if path is None:
        return Document()
    try:
        return Document.open(path, tab_stop=tab_stop)
    except OSError as exc:
        logger.warning("could not open %s, starting with an empty document: %s", path, exc)
        return Document()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the navigator on the standard streams.

    Exits with status 0 after a clean quit. A terminal failure is logged and
    turned into ``SystemExit`` with a diagnostic, after raw mode is restored.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or load_log_level(), args.log_file)

    tab_stop = args.tab_stop if args.tab_stop is not None else load_tab_stop()
    if args.remember and args.tab_stop is not None:
        save_tab_stop(args.tab_stop)

    document = load_document(Path(args.path) if args.path else None, tab_stop)
    try:
        terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
        Navigator(terminal, document).run()
    except TerminalIOError as exc:
        logger.exception("terminal failure")
        raise SystemExit(f"Problem reading input: {exc}") from exc


if __name__ == "__main__":
    main()
