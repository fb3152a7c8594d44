"""Single-keypress input for the terminal frontends.

Turns raw key presses into game actions: moving the card cursor,
revealing the card under it, and the handful of screen commands.
Reads without waiting for Enter on macOS / Linux (tty + termios) and
Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time
from enum import StrEnum
from typing import Callable


class Action(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    REVEAL = "reveal"
    RETRY = "retry"
    NEW_GAME = "new_game"
    OVERRIDE = "override"
    THEME = "theme"
    QUIT = "quit"


CURSOR_MOVES = frozenset({Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT})

_BINDINGS: tuple[tuple[str, Action], ...] = (
    ("wW", Action.UP),
    ("sS", Action.DOWN),
    ("aA", Action.LEFT),
    ("dD", Action.RIGHT),
    (" \r\n", Action.REVEAL),
    ("rR", Action.RETRY),
    ("nN", Action.NEW_GAME),
    ("oO", Action.OVERRIDE),
    ("tT", Action.THEME),
    ("qQ\x03", Action.QUIT),  # \x03 is Ctrl-C in raw mode
)

_KEYS: dict[str, Action] = {ch: action for chars, action in _BINDINGS for ch in chars}

# ESC [ A..D on terminals, a 0x00 / 0xE0 prefix then H/P/M/K from msvcrt
_ANSI_ARROWS = {"A": Action.UP, "B": Action.DOWN, "C": Action.RIGHT, "D": Action.LEFT}
_CONSOLE_ARROWS = {"H": Action.UP, "P": Action.DOWN, "M": Action.RIGHT, "K": Action.LEFT}


def decode(ch: str, next_char: Callable[[], str]) -> str:
    """Map the keypress starting with *ch* to an action string.

    *next_char* returns the following byte of a multi-byte sequence, or
    ``""`` if none arrives.  Unbound printable keys come back as
    themselves (the frontends use ``"1"``-``"3"``); anything else is
    ``""``.
    """
    if ch == "\x1b":
        if next_char() != "[":
            return Action.QUIT  # bare Escape
        return _ANSI_ARROWS.get(next_char(), "")
    if ch in ("\x00", "\xe0"):
        return _CONSOLE_ARROWS.get(next_char(), "")
    if ch in _KEYS:
        return _KEYS[ch]
    return ch if ch.isprintable() else ""


# -- platform readers ----------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def read_byte(wait: float | None) -> str:
        # os.read, not sys.stdin, so select() still sees the rest of an
        # escape sequence
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return ""
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = read_byte(timeout)
        if not ch:
            return None
        return decode(ch, lambda: read_byte(0.1))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    def follow() -> str:
        return msvcrt.getwch() if msvcrt.kbhit() else ""

    return decode(msvcrt.getwch(), follow)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    key = None
    while key is None:
        key = _read(None)
    return key


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key``, but return ``None`` after *timeout* seconds."""
    return _read(max(0.0, timeout))
