"""Shared fixtures and fakes for the engine tests."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import SessionListener
from backend.models.card import Card


def make_deck(faces: str | list[str]) -> list[Card]:
    """Build an unshuffled deck, one card per face identifier."""
    return [Card(face_id=f) for f in faces]


def pairs_deck(n: int = 8) -> list[Card]:
    """Deck laid out as AABBCC..., so cards 2k and 2k+1 match."""
    return make_deck([f for f in "ABCDEFGHIJKLMNOP"[:n] for _ in range(2)])


class RecordingListener(SessionListener):
    """Collects every session event in order."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_reveal(self, index: int) -> None:
        self.events.append(("reveal", index))

    def on_move_count_changed(self, moves: int) -> None:
        self.events.append(("moves", moves))

    def on_matched(self, indices: list[int]) -> None:
        self.events.append(("matched", tuple(indices)))

    def on_mismatch_pending(self, indices: list[int]) -> None:
        self.events.append(("mismatch", tuple(indices)))

    def on_mismatch_resolved(self) -> None:
        self.events.append(("resolved",))

    def on_won(self, moves: int) -> None:
        self.events.append(("won", moves))

    def on_lost(self, moves: int) -> None:
        self.events.append(("lost", moves))

    def names(self) -> list[str]:
        return [e[0] for e in self.events]


class FakeScoreRecord:
    """In-memory score record that counts writes."""

    def __init__(self, best: dict[int, int] | None = None) -> None:
        self.best: dict[int, int] = dict(best or {})
        self.writes = 0

    def get_best(self, grid_size: int) -> int | None:
        return self.best.get(grid_size)

    def set_best(self, grid_size: int, moves: int) -> None:
        self.best[grid_size] = moves
        self.writes += 1


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def scores() -> FakeScoreRecord:
    return FakeScoreRecord()
