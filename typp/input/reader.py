"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyEvent`` values.
Handles ESC-sequence timing, control/meta combos, and multi-byte UTF-8.
"""

from __future__ import annotations

import os
import select

from .keys import (
    BACKSPACE,
    DELETE,
    DOWN,
    END,
    ESC,
    HOME,
    INSERT,
    LEFT,
    NULL,
    PAGE_DOWN,
    PAGE_UP,
    RIGHT,
    UNKNOWN,
    UP,
    Alt,
    Char,
    Ctrl,
    KeyEvent,
)

ESC_SEQUENCE_TIMEOUT_MS = 25
_CSI_MAX_PARAM_BYTES = 32
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS = {
    b"A": UP,
    b"B": DOWN,
    b"C": RIGHT,
    b"D": LEFT,
    b"H": HOME,
    b"F": END,
}

_CSI_TILDE_KEYS = {
    b"1": HOME,
    b"2": INSERT,
    b"3": DELETE,
    b"4": END,
    b"5": PAGE_UP,
    b"6": PAGE_DOWN,
    b"7": HOME,
    b"8": END,
}


def _read_byte(fd: int) -> bytes:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    ch = os.read(fd, 1)
    if not ch:
        raise EOFError("end of input")
    return ch


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    if _PENDING_BYTES:
        return _PENDING_BYTES.pop(0)
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_char(fd: int, first: bytes) -> str:
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        if nxt[0] & 0xC0 != 0x80:
            _PENDING_BYTES.append(nxt)
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _decode_escape(fd: int) -> KeyEvent:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return ESC
    if seq not in {b"[", b"O"}:
        if 0x20 <= seq[0] < 0x7F:
            return Alt(seq.decode("ascii"))
        _PENDING_BYTES.append(seq)
        return ESC

    code = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if code is None:
        return Alt(seq.decode("ascii"))
    if seq == b"O":
        return _CSI_FINAL_KEYS.get(code, UNKNOWN)

    # CSI: parameter/intermediate bytes up to one final byte in 0x40-0x7E.
    params = b""
    while 0x20 <= code[0] <= 0x3F:
        params += code
        if len(params) > _CSI_MAX_PARAM_BYTES:
            return UNKNOWN
        code = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if code is None:
            return UNKNOWN
    if not 0x40 <= code[0] <= 0x7E:
        _PENDING_BYTES.append(code)
        return UNKNOWN
    if not params and code in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[code]
    if code == b"~" and params in _CSI_TILDE_KEYS:
        return _CSI_TILDE_KEYS[params]
    return UNKNOWN


def read_key(fd: int) -> KeyEvent:
    """Block until one key arrives on ``fd`` and return it decoded.

    Raises ``EOFError`` when the input stream is closed and lets ``OSError``
    from the underlying read propagate.
    """
    ch = _read_byte(fd)
    code = ch[0]

    if ch in {b"\r", b"\n"}:
        return Char("\n")
    if ch == b"\t":
        return Char("\t")
    if ch in {b"\x08", b"\x7f"}:
        return BACKSPACE
    if ch == b"\x00":
        return NULL
    if ch == b"\x1b":
        return _decode_escape(fd)
    if 0x01 <= code <= 0x1A:
        return Ctrl(chr(code - 0x01 + ord("a")))
    if 0x1C <= code <= 0x1F:
        return Ctrl(chr(code - 0x1C + ord("4")))
    if code < 0x80:
        return Char(ch.decode("ascii"))
    return Char(_decode_char(fd, ch))


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "_PENDING_BYTES", "read_key"]
