"""Main interactive loop: refresh, check quit, read one key, apply it.

The navigator owns the logical cursor position and the quit flag. Viewport
bounds are read from the terminal surface every time they are needed so a
resize between keystrokes is honored on the very next key.
"""

from __future__ import annotations

import logging

from ..document import Document
from ..input import describe_key
from ..navigation import KeyAction, Position, Viewport, classify_key, move_cursor
from ..render import FAREWELL_MESSAGE, frame_rows
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class Navigator:
    """Owns cursor state and drives the draw/keypress cycle."""

    def __init__(self, terminal: TerminalController, document: Document | None = None) -> None:
        self.terminal = terminal
        self.document = document if document is not None else Document()
        self.cursor_position = Position()
        self.should_quit = False

    def viewport(self) -> Viewport:
        size = self.terminal.size()
        return Viewport.from_terminal_size(size.width, size.height)

    def run(self) -> None:
        """Run the loop until the quit key has been handled and the farewell painted.

        ``TerminalIOError`` propagates; the raw-mode context restores the
        terminal before it reaches the caller.
        """
        with self.terminal.raw_mode():
            while True:
                self.refresh_screen()
                if self.should_quit:
                    break
                self.process_keypress()
        logger.info("session ended at %s", self.cursor_position)

    def process_keypress(self) -> None:
        key = self.terminal.read_key()
        action = classify_key(key)
        if action is KeyAction.QUIT:
            self.should_quit = True
        elif action is KeyAction.MOVE:
            self.cursor_position = move_cursor(self.cursor_position, key, self.viewport())
        else:
            logger.debug("ignored key %s", describe_key(key))

    def refresh_screen(self) -> None:
        terminal = self.terminal
        terminal.cursor_hide()
        terminal.cursor_position(Position())
        if self.should_quit:
            terminal.clear_screen()
            terminal.write_line(FAREWELL_MESSAGE)
        else:
            self.draw_rows()
            terminal.cursor_position(self.cursor_position)
        terminal.cursor_show()
        terminal.flush()

    def draw_rows(self) -> None:
        size = self.terminal.size()
        for text in frame_rows(self.document, size.width, size.height):
            self.terminal.clear_current_line()
            self.terminal.write_line(text)
