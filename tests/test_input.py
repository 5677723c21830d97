"""Regression tests for raw-key decoding.

Covers control-key mapping, ESC timing, arrow/meta sequences, and UTF-8.
These tests protect interactive input handling in raw terminal mode.
"""

from __future__ import annotations

import os
import time
import unittest

from typp import input as input_mod
from typp.input import Alt, Char, Ctrl, Special, describe_key
from typp.navigation import KeyAction, Position, Viewport, classify_key, move_cursor


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_printable_characters_decode_as_char(self) -> None:
        self.assertEqual(self._read_all(b"jkH$0", 5), [Char("j"), Char("k"), Char("H"), Char("$"), Char("0")])

    def test_ctrl_q_is_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x11", 1), [Ctrl("q")])

    def test_control_range_maps_to_letters_and_digits(self) -> None:
        keys = self._read_all(b"\x01\x1a\x1c\x1f", 4)
        self.assertEqual(keys, [Ctrl("a"), Ctrl("z"), Ctrl("4"), Ctrl("7")])

    def test_enter_tab_and_backspace(self) -> None:
        keys = self._read_all(b"\r\n\t\x7f\x08", 5)
        self.assertEqual(
            keys,
            [Char("\n"), Char("\n"), Char("\t"), Special("BACKSPACE"), Special("BACKSPACE")],
        )

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, Special("ESC"))
        self.assertLess(elapsed, 0.2)

    def test_arrow_and_tilde_sequences(self) -> None:
        keys = self._read_all(b"\x1b[A\x1b[D\x1b[3~\x1b[6~\x1bOH", 5)
        self.assertEqual(
            keys,
            [Special("UP"), Special("LEFT"), Special("DELETE"), Special("PAGE_DOWN"), Special("HOME")],
        )

    def test_unrecognized_csi_sequences_are_consumed_whole(self) -> None:
        keys = self._read_all(b"\x1b[20~\x1b[15~\x1b[1;2Hx", 4)
        self.assertEqual(keys, [Special("UNKNOWN"), Special("UNKNOWN"), Special("UNKNOWN"), Char("x")])

    def test_function_and_modified_keys_do_not_move_cursor(self) -> None:
        viewport = Viewport.from_terminal_size(80, 24)
        for payload in (b"\x1b[20~", b"\x1b[15~", b"\x1b[1;2H"):
            input_mod._PENDING_BYTES.clear()
            read_fd, write_fd = os.pipe()
            try:
                os.write(write_fd, payload)
                os.close(write_fd)
                pos = Position(5, 5)
                while True:
                    try:
                        key = input_mod.read_key(read_fd)
                    except EOFError:
                        break
                    self.assertIs(classify_key(key), KeyAction.NONE, payload)
                    pos = move_cursor(pos, key, viewport)
            finally:
                os.close(read_fd)
            self.assertEqual(pos, Position(5, 5), payload)

    def test_truncated_csi_sequence_is_unknown(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[1;", 1), [Special("UNKNOWN")])

    def test_unknown_ss3_key_is_unknown(self) -> None:
        self.assertEqual(self._read_all(b"\x1bOPq", 2), [Special("UNKNOWN"), Char("q")])

    def test_escape_followed_by_printable_is_alt(self) -> None:
        self.assertEqual(self._read_all(b"\x1bx", 1), [Alt("x")])

    def test_escape_does_not_swallow_following_control_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1b\x11", 2), [Special("ESC"), Ctrl("q")])

    def test_multibyte_utf8_is_one_key(self) -> None:
        self.assertEqual(self._read_all("é漢".encode("utf-8"), 2), [Char("é"), Char("漢")])

    def test_closed_input_raises_eof(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with self.assertRaises(EOFError):
                input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)


class DescribeKeyTests(unittest.TestCase):
    def test_labels(self) -> None:
        self.assertEqual(describe_key(Char("j")), "'j'")
        self.assertEqual(describe_key(Ctrl("q")), "Ctrl+q")
        self.assertEqual(describe_key(Alt("b")), "Alt+b")
        self.assertEqual(describe_key(Special("UP")), "UP")


if __name__ == "__main__":
    unittest.main()
