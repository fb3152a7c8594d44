"""Tests for turning raw key presses into actions."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import Action, decode


def _then(*chars: str):
    """Return a ``next_char`` that yields *chars*, then ``""``."""
    rest = list(chars)
    return lambda: rest.pop(0) if rest else ""


@pytest.mark.parametrize(
    "ch, follow, expected",
    [
        ("\x1b", "[A", Action.UP),
        ("\x1b", "[B", Action.DOWN),
        ("\x1b", "[C", Action.RIGHT),
        ("\x1b", "[D", Action.LEFT),
        ("\x1b", "", Action.QUIT),
        ("\x1b", "[Z", ""),
        ("\xe0", "H", Action.UP),
        ("\x00", "K", Action.LEFT),
        ("\xe0", "?", ""),
    ],
    ids=["esc-up", "esc-down", "esc-right", "esc-left", "bare-esc", "esc-unknown",
         "console-up", "console-left", "console-unknown"],
)
def test_escape_sequences(ch: str, follow: str, expected: str) -> None:
    assert decode(ch, _then(*follow)) == expected


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("w", Action.UP),
        ("D", Action.RIGHT),
        (" ", Action.REVEAL),
        ("\r", Action.REVEAL),
        ("r", Action.RETRY),
        ("N", Action.NEW_GAME),
        ("o", Action.OVERRIDE),
        ("t", Action.THEME),
        ("\x03", Action.QUIT),
        ("1", "1"),
        ("h", "h"),
        ("\x07", ""),
    ],
)
def test_single_keys(ch: str, expected: str) -> None:
    assert decode(ch, _then()) == expected


def test_plain_key_reads_nothing_more() -> None:
    def unexpected() -> str:
        raise AssertionError("read past a single-byte key")

    assert decode("s", unexpected) == Action.DOWN
