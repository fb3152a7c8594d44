"""Pieces shared by the terminal frontends, including the game loop."""

from __future__ import annotations

import time
from typing import Callable

from backend.engine.difficulty import Difficulty, DifficultyPolicy
from backend.engine.gameplay import GamePlay, SessionListener
from backend.models.preferences import ThemePreference
from frontend.cli.input_handler import CURSOR_MOVES, Action, get_key, get_key_timeout

MISMATCH_DELAY = 0.9  # seconds a mismatched group stays face up

LEVELS: list[Difficulty] = list(Difficulty)

LEVEL_KEYS: dict[str, Difficulty] = {
    "1": Difficulty.EASY,
    "2": Difficulty.MEDIUM,
    "3": Difficulty.HARD,
}

DEFAULT_LEVEL = Difficulty.EASY


class StatusListener(SessionListener):
    """Keeps the latest session event as a one-line status for the screen."""

    def __init__(self) -> None:
        self.event = ""
        self.moves = 0

    def clear(self) -> None:
        self.event = ""

    def on_matched(self, indices: list[int]) -> None:
        self.event = "matched"

    def on_mismatch_pending(self, indices: list[int]) -> None:
        self.event = "mismatch"

    def on_won(self, moves: int) -> None:
        self.event = "won"
        self.moves = moves

    def on_lost(self, moves: int) -> None:
        self.event = "lost"
        self.moves = moves


class MismatchTimer:
    """The one scheduled flip-back of a mismatched group.

    The deadline is set once, when the mismatch happens; key presses
    while it runs do not move it.
    """

    def __init__(
        self,
        delay: float = MISMATCH_DELAY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay = delay
        self.clock = clock
        self._deadline: float | None = None
        self._resolve: Callable[[], bool] | None = None

    @property
    def armed(self) -> bool:
        return self._resolve is not None

    def arm(self, resolve: Callable[[], bool]) -> None:
        """Schedule *resolve*, replacing any callback left by an older game."""
        self._deadline = self.clock() + self.delay
        self._resolve = resolve

    def remaining(self) -> float:
        if self._deadline is None:
            return 0.0
        return max(0.0, self._deadline - self.clock())

    def fire(self) -> bool:
        resolve = self._resolve
        self._deadline = None
        self._resolve = None
        return resolve() if resolve is not None else False


def move_cursor(cursor: int, key: str, grid_size: int) -> int:
    """Return the cursor index after an arrow key, staying on the grid."""
    row, col = divmod(cursor, grid_size)
    if key == Action.UP:
        row = max(0, row - 1)
    elif key == Action.DOWN:
        row = min(grid_size - 1, row + 1)
    elif key == Action.LEFT:
        col = max(0, col - 1)
    elif key == Action.RIGHT:
        col = min(grid_size - 1, col + 1)
    return row * grid_size + col


# -- game loop ----------------------------------------------------------------


def play(
    game: GamePlay,
    level: Difficulty,
    listener: StatusListener,
    prefs: ThemePreference,
    draw: Callable[[GamePlay, int, Difficulty], None],
    ask_overrides: Callable[[GamePlay], tuple[int, int]],
    timer: MismatchTimer | None = None,
) -> None:
    """Run one game screen until the player backs out.

    *draw* renders the screen from the game, the cursor index and the
    level; the frontend reads ``listener.event`` for the status line.
    ``R`` retries with the current settings, ``N`` starts over at the
    default difficulty.
    """
    if timer is None:
        timer = MismatchTimer()
    cursor = 0

    while True:
        draw(game, cursor, level)

        if timer.armed:
            key = get_key_timeout(timer.remaining())
            if key is None:
                timer.fire()
                listener.clear()
                continue
        else:
            key = get_key()

        if key in CURSOR_MOVES:
            cursor = move_cursor(cursor, key, game.config.grid_size)
        elif key == Action.REVEAL:
            listener.clear()
            if game.reveal(cursor) and game.session.mismatch_pending:
                timer.arm(game.mismatch_resolver())
        elif key == Action.RETRY:
            listener.clear()
            game.restart()
        elif key == Action.NEW_GAME or key in LEVEL_KEYS:
            level = LEVEL_KEYS.get(key, DEFAULT_LEVEL)
            listener.clear()
            game.restart(DifficultyPolicy.resolve(level))
            cursor = 0
        elif key == Action.OVERRIDE:
            new_group, new_limit = ask_overrides(game)
            game.restart(DifficultyPolicy.configure(level, new_group, new_limit))
            listener.event = "overrides"
        elif key == Action.THEME:
            prefs.toggle()
        elif key == Action.QUIT:
            return
