"""Tests for the helpers shared by the terminal frontends."""

from __future__ import annotations

import pytest

from backend.engine.difficulty import Difficulty
from backend.engine.gameplay import GamePlay
from backend.models.config import GameConfig
from frontend.cli.common import LEVEL_KEYS, StatusListener, move_cursor

from conftest import pairs_deck


@pytest.mark.parametrize(
    "cursor, key, expected",
    [
        (0, "up", 0),
        (0, "left", 0),
        (0, "right", 1),
        (0, "down", 4),
        (15, "down", 15),
        (15, "right", 15),
        (5, "up", 1),
        (5, "left", 4),
        (3, "reveal", 3),
    ],
)
def test_move_cursor_stays_on_grid(cursor: int, key: str, expected: int) -> None:
    assert move_cursor(cursor, key, 4) == expected


def test_level_keys() -> None:
    assert LEVEL_KEYS == {
        "1": Difficulty.EASY,
        "2": Difficulty.MEDIUM,
        "3": Difficulty.HARD,
    }


def test_status_listener_tracks_last_event() -> None:
    listener = StatusListener()
    config = GameConfig(grid_size=4, group_size=2, move_limit=2)
    game = GamePlay.from_deck(config, pairs_deck(), listener=listener)

    game.reveal(0)
    game.reveal(1)
    assert listener.event == "matched"

    game.reveal(2)
    game.reveal(4)
    assert listener.event == "lost"
    assert listener.moves == 2

    listener.clear()
    assert listener.event == ""
