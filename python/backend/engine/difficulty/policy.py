"""Difficulty levels and user override handling."""

from __future__ import annotations

import math
import re
from enum import StrEnum

from backend.errors import InvalidLevel
from backend.models.config import (
    MAX_GROUP_SIZE,
    MAX_MOVE_LIMIT,
    MIN_GROUP_SIZE,
    MIN_MOVE_LIMIT,
    GameConfig,
)

DEFAULT_GROUP_SIZE = 2
DEFAULT_MOVE_LIMIT = 999

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


_LEVELS: dict[Difficulty, GameConfig] = {
    Difficulty.EASY: GameConfig(grid_size=4, group_size=2, move_limit=50),
    Difficulty.MEDIUM: GameConfig(grid_size=6, group_size=4, move_limit=120),
    Difficulty.HARD: GameConfig(grid_size=8, group_size=6, move_limit=200),
}


def _parse_int(raw: object) -> int | None:
    """Read the leading integer of *raw*, or ``None`` if there isn't one.

    Strings are parsed like a form field: ``"12abc"`` gives 12 and
    ``"3.7"`` gives 3.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


class DifficultyPolicy:
    """Stateless mapping from levels and raw input to ``GameConfig``."""

    @staticmethod
    def resolve(level: Difficulty | str) -> GameConfig:
        """Return the configuration for a named *level*."""
        try:
            return _LEVELS[Difficulty(level)]
        except ValueError:
            raise InvalidLevel(level) from None

    @staticmethod
    def clamp_overrides(raw_group_size: object, raw_move_limit: object) -> tuple[int, int]:
        """Correct user-entered group size and move limit.

        Missing, non-numeric and zero values fall back to the defaults.
        The group size is clamped into ``[2, 10]``.  A move limit above 999
        is reset to the default rather than clamped (the two happen to
        coincide at 999); below 1 it is clamped to 1.
        """
        group_size = _parse_int(raw_group_size) or DEFAULT_GROUP_SIZE
        if group_size > MAX_GROUP_SIZE:
            group_size = MAX_GROUP_SIZE
        group_size = max(MIN_GROUP_SIZE, group_size)

        move_limit = _parse_int(raw_move_limit) or DEFAULT_MOVE_LIMIT
        if move_limit > MAX_MOVE_LIMIT:
            move_limit = DEFAULT_MOVE_LIMIT
        move_limit = max(MIN_MOVE_LIMIT, move_limit)

        return group_size, move_limit

    @staticmethod
    def configure(
        level: Difficulty | str,
        raw_group_size: object = None,
        raw_move_limit: object = None,
    ) -> GameConfig:
        """Return *level*'s configuration with any user overrides applied.

        The level always decides the grid size.  Overrides left as ``None``
        keep the level's own value.
        """
        base = DifficultyPolicy.resolve(level)
        if raw_group_size is None and raw_move_limit is None:
            return base
        group_size, move_limit = DifficultyPolicy.clamp_overrides(
            base.group_size if raw_group_size is None else raw_group_size,
            base.move_limit if raw_move_limit is None else raw_move_limit,
        )
        return GameConfig(
            grid_size=base.grid_size,
            group_size=group_size,
            move_limit=move_limit,
        )
