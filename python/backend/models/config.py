"""Immutable configuration of a single game session."""

from __future__ import annotations

from dataclasses import dataclass

MIN_GROUP_SIZE = 2
MAX_GROUP_SIZE = 10
MIN_MOVE_LIMIT = 1
MAX_MOVE_LIMIT = 999


@dataclass(frozen=True)
class GameConfig:
    grid_size: int
    group_size: int
    move_limit: int

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"Grid size must be at least 1, got {self.grid_size}.")
        if not MIN_GROUP_SIZE <= self.group_size <= MAX_GROUP_SIZE:
            raise ValueError(
                f"Group size must be between {MIN_GROUP_SIZE} and "
                f"{MAX_GROUP_SIZE}, got {self.group_size}."
            )
        if not MIN_MOVE_LIMIT <= self.move_limit <= MAX_MOVE_LIMIT:
            raise ValueError(
                f"Move limit must be between {MIN_MOVE_LIMIT} and "
                f"{MAX_MOVE_LIMIT}, got {self.move_limit}."
            )
        if self.total_cards < self.group_size:
            raise ValueError(
                f"A {self.grid_size}×{self.grid_size} grid cannot hold a group "
                f"of {self.group_size} cards."
            )

    @property
    def total_cards(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def groups_to_win(self) -> int:
        """Number of complete groups that must be matched to win."""
        return self.total_cards // self.group_size
