"""Exceptions raised by the memory game engine."""

from __future__ import annotations


class MemoryGameError(Exception):
    """Base class for engine errors."""


class InvalidLevel(MemoryGameError, ValueError):
    """Raised when a difficulty name is not in the level table."""

    def __init__(self, level: object) -> None:
        super().__init__(f"Unknown difficulty level: {level!r}")
        self.level = level


class IndexOutOfRange(MemoryGameError, IndexError):
    """Raised when a card index falls outside the deck."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Card index {index} is out of range for a deck of {size} cards."
        )
        self.index = index
        self.size = size
