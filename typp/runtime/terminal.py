"""Terminal control helpers for the viewer session.

Owns raw-mode lifecycle, buffered cursor/clear escape output, and key reads.
Every device failure surfaces as ``TerminalIOError``.
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import termios
import tty
from typing import NamedTuple

from ..input import KeyEvent, read_key
from ..navigation import Position

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_SCREEN = "\x1b[2J"
CLEAR_LINE = "\x1b[2K"
FALLBACK_SIZE = (80, 24)


class TerminalIOError(OSError):
    """Terminal read/write failure; rendering cannot continue after one."""


class TerminalSize(NamedTuple):
    width: int
    height: int


class TerminalController:
    """Manage terminal mode transitions and buffered screen output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalIOError(f"stdin is not a terminal: {exc}") from exc
        self._buffer: list[str] = []

    def enable_raw_mode(self) -> None:
        """Switch stdin to raw mode so keys arrive unbuffered and unechoed."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalIOError(f"cannot enter raw mode: {exc}") from exc
        logger.debug("raw mode enabled on fd %d", self.stdin_fd)

    def disable_raw_mode(self) -> None:
        """Show the cursor and restore the tty attributes saved at construction."""
        self._buffer.clear()
        try:
            os.write(self.stdout_fd, SHOW_CURSOR.encode("ascii"))
        except OSError:
            logger.warning("could not re-show cursor while restoring terminal", exc_info=True)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            raise TerminalIOError(f"cannot restore terminal mode: {exc}") from exc
        logger.debug("terminal mode restored on fd %d", self.stdin_fd)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/restore calls."""
        self.enable_raw_mode()
        try:
            yield self
        finally:
            self.disable_raw_mode()

    def size(self) -> TerminalSize:
        """Return the current grid size; queried fresh on every call."""
        term = shutil.get_terminal_size(FALLBACK_SIZE)
        return TerminalSize(width=term.columns, height=term.lines)

    def read_key(self) -> KeyEvent:
        """Block for the next key event."""
        try:
            return read_key(self.stdin_fd)
        except EOFError as exc:
            raise TerminalIOError("input stream closed") from exc
        except OSError as exc:
            raise TerminalIOError(f"read failed: {exc}") from exc

    def cursor_hide(self) -> None:
        self._buffer.append(HIDE_CURSOR)

    def cursor_show(self) -> None:
        self._buffer.append(SHOW_CURSOR)

    def cursor_position(self, pos: Position) -> None:
        # Escape sequence coordinates are 1-based, row first.
        self._buffer.append(f"\x1b[{pos.y + 1};{pos.x + 1}H")

    def clear_screen(self) -> None:
        self._buffer.append(CLEAR_SCREEN)

    def clear_current_line(self) -> None:
        self._buffer.append(CLEAR_LINE)

    def write_line(self, text: str) -> None:
        """Queue ``text`` followed by a raw-mode line break."""
        self._buffer.append(text)
        self._buffer.append("\r\n")

    def flush(self) -> None:
        """Write all queued output in a single call."""
        if not self._buffer:
            return
        payload = "".join(self._buffer).encode("utf-8", errors="replace")
        self._buffer.clear()
        try:
            while payload:
                written = os.write(self.stdout_fd, payload)
                payload = payload[written:]
        except OSError as exc:
            raise TerminalIOError(f"write failed: {exc}") from exc
