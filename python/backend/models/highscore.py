"""Best score persistence, keyed by grid size."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ScoreRecord(Protocol):
    """Storage the engine reports winning move counts to."""

    def get_best(self, grid_size: int) -> int | None: ...

    def set_best(self, grid_size: int, moves: int) -> None: ...


class BestScoreManager:
    """Loads, saves, and queries best move counts from a JSON file.

    The file maps each grid size (as a string key) to the fewest moves
    ever needed to win on that grid.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._best: dict[str, int] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            self._best = {str(k): int(v) for k, v in data.items()}

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {k: self._best[k] for k in sorted(self._best, key=int)}
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def get_best(self, grid_size: int) -> int | None:
        return self._best.get(str(grid_size))

    def set_best(self, grid_size: int, moves: int) -> None:
        self._best[str(grid_size)] = moves
        self.save()
        logger.info("New best for %dx%d: %d moves", grid_size, grid_size, moves)

    def get_all_sizes(self) -> list[int]:
        return sorted(int(k) for k in self._best)
