"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.models.card import Card, CardState


class Outcome(StrEnum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


class SessionState:
    """Holds the deck, current selection, move counter, and outcome."""

    def __init__(self, deck: list[Card], generation: int = 0) -> None:
        self.deck = deck
        self.generation = generation
        self.selection: list[int] = []
        self.moves: int = 0
        self.matched_groups: int = 0
        self.outcome: Outcome = Outcome.ONGOING

    # -- selection ------------------------------------------------------------

    def select(self, index: int) -> None:
        self.deck[index].state = CardState.REVEALED
        self.selection.append(index)

    def selected_faces(self) -> list[str]:
        return [self.deck[i].face_id for i in self.selection]

    def take_selection(self, state: CardState) -> list[int]:
        """Move every selected card to *state* and return the cleared indices."""
        indices = self.selection
        for i in indices:
            self.deck[i].state = state
        self.selection = []
        return indices

    # -- queries --------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.ONGOING
