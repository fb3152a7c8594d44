"""Owns the live session and replaces it on restart."""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.session import MatchSession, SessionListener
from backend.models.card import Card
from backend.models.config import GameConfig
from backend.models.faces import DEFAULT_FACE_POOL
from backend.models.highscore import ScoreRecord

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates consecutive game sessions.

    Every session gets a generation number one higher than the last.
    Delayed work handed out by ``mismatch_resolver`` remembers the
    generation it was created for, so it cannot touch a session that
    replaced the one it belongs to.
    """

    def __init__(
        self,
        config: GameConfig,
        *,
        listener: SessionListener | None = None,
        score_record: ScoreRecord | None = None,
        face_pool: Sequence[str] = DEFAULT_FACE_POOL,
        rng: random.Random | None = None,
    ) -> None:
        self.listener = listener
        self.score_record = score_record
        self.face_pool = face_pool
        self.rng = rng
        self._generation = 0
        self.session = self._new_session(config)

    @classmethod
    def from_deck(
        cls,
        config: GameConfig,
        deck: list[Card],
        *,
        listener: SessionListener | None = None,
        score_record: ScoreRecord | None = None,
    ) -> "GamePlay":
        """Create a game whose first session uses a prepared *deck*."""
        obj = object.__new__(cls)
        obj.listener = listener
        obj.score_record = score_record
        obj.face_pool = DEFAULT_FACE_POOL
        obj.rng = None
        obj._generation = 0
        obj.session = MatchSession(
            config, deck, listener=listener, score_record=score_record
        )
        return obj

    # -- lifecycle ------------------------------------------------------------

    def restart(self, config: GameConfig | None = None) -> MatchSession:
        """Throw the current session away and deal a new one.

        Passing *config* reconfigures the game; otherwise the current
        configuration is reused.
        """
        self._generation += 1
        self.session = self._new_session(config or self.session.config)
        return self.session

    def mismatch_resolver(self) -> Callable[[], bool]:
        """Return a callback that flips back the current mismatch.

        The callback does nothing (and returns False) once the session it
        was issued for has been replaced.
        """
        generation = self._generation

        def resolve() -> bool:
            if generation != self._generation:
                logger.debug("Dropped stale mismatch callback (generation %d)", generation)
                return False
            return self.session.resolve_mismatch()

        return resolve

    # -- actions --------------------------------------------------------------

    def reveal(self, index: int) -> bool:
        return self.session.reveal(index)

    # -- queries --------------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self.session.config

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def best(self) -> int | None:
        if self.score_record is None:
            return None
        return self.score_record.get_best(self.config.grid_size)

    # -- helpers --------------------------------------------------------------

    def _new_session(self, config: GameConfig) -> MatchSession:
        deck = GameGenerator.generate(config, self.face_pool, self.rng)
        logger.debug(
            "Starting session %d: %dx%d, groups of %d, %d moves",
            self._generation, config.grid_size, config.grid_size,
            config.group_size, config.move_limit,
        )
        return MatchSession(
            config,
            deck,
            generation=self._generation,
            listener=self.listener,
            score_record=self.score_record,
        )
