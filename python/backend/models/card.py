"""Card model for the memory game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CardState(StrEnum):
    HIDDEN = "hidden"
    REVEALED = "revealed"
    MATCHED = "matched"


@dataclass
class Card:
    """A single tile on the grid.

    ``face_id`` decides which cards match and never changes once the card
    is dealt; only ``state`` moves between hidden, revealed and matched.
    """

    face_id: str
    state: CardState = CardState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        return self.state is CardState.HIDDEN

    @property
    def is_matched(self) -> bool:
        return self.state is CardState.MATCHED
