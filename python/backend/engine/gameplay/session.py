"""Core gameplay logic: processes reveals and decides win or loss."""

from __future__ import annotations

import logging

from backend.engine.gamestate import Outcome, SessionState
from backend.errors import IndexOutOfRange
from backend.models.card import Card, CardState
from backend.models.config import GameConfig
from backend.models.highscore import ScoreRecord

logger = logging.getLogger(__name__)


class SessionListener:
    """Receives session events.  Every hook is a no-op by default.

    Frontends subclass this and override what they need to show.
    """

    def on_reveal(self, index: int) -> None:
        pass

    def on_move_count_changed(self, moves: int) -> None:
        pass

    def on_matched(self, indices: list[int]) -> None:
        pass

    def on_mismatch_pending(self, indices: list[int]) -> None:
        pass

    def on_mismatch_resolved(self) -> None:
        pass

    def on_won(self, moves: int) -> None:
        pass

    def on_lost(self, moves: int) -> None:
        pass


class MatchSession:
    """A single playthrough, from a fresh deck to a win or a loss."""

    def __init__(
        self,
        config: GameConfig,
        deck: list[Card],
        *,
        generation: int = 0,
        listener: SessionListener | None = None,
        score_record: ScoreRecord | None = None,
    ) -> None:
        if len(deck) != config.total_cards:
            raise ValueError(
                f"Expected {config.total_cards} cards for a "
                f"{config.grid_size}×{config.grid_size} grid, got {len(deck)}."
            )
        self.config = config
        self.state = SessionState(deck, generation)
        self.listener = listener if listener is not None else SessionListener()
        self.score_record = score_record
        self._mismatch_pending = False

    # -- actions --------------------------------------------------------------

    def reveal(self, index: int) -> bool:
        """Reveal the card at *index*.

        Returns False without changing anything when the reveal is not
        allowed right now (finished game, card already face up, a full
        selection waiting to be resolved, or no moves left to start a new
        group).  Raises ``IndexOutOfRange`` for an index outside the deck.
        """
        state = self.state
        if not 0 <= index < len(state.deck):
            raise IndexOutOfRange(index, len(state.deck))

        if (
            state.is_over
            or not state.deck[index].is_hidden
            or len(state.selection) >= self.config.group_size
            or (state.moves >= self.config.move_limit and not state.selection)
        ):
            return False

        state.select(index)
        self.listener.on_reveal(index)

        if len(state.selection) == self.config.group_size:
            self._complete_group()
        return True

    def resolve_mismatch(self) -> bool:
        """Turn a mismatched selection face down again.

        Meant to run once the frontend's display delay is over.  Returns
        False if there was nothing to resolve.
        """
        if not self._mismatch_pending:
            return False
        self._mismatch_pending = False
        self.state.take_selection(CardState.HIDDEN)
        self.listener.on_mismatch_resolved()
        return True

    # -- queries --------------------------------------------------------------

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    @property
    def generation(self) -> int:
        return self.state.generation

    @property
    def mismatch_pending(self) -> bool:
        return self._mismatch_pending

    @property
    def moves_left(self) -> int:
        return max(0, self.config.move_limit - self.state.moves)

    # -- helpers --------------------------------------------------------------

    def _complete_group(self) -> None:
        state = self.state
        state.increment_moves()
        self.listener.on_move_count_changed(state.moves)

        if len(set(state.selected_faces())) == 1:
            indices = state.take_selection(CardState.MATCHED)
            state.matched_groups += 1
            self.listener.on_matched(indices)
            if state.matched_groups == self.config.groups_to_win:
                self._finish(Outcome.WON)
        else:
            self._mismatch_pending = True
            self.listener.on_mismatch_pending(list(state.selection))

        if state.moves >= self.config.move_limit and not state.is_over:
            self._finish(Outcome.LOST)

    def _finish(self, outcome: Outcome) -> None:
        state = self.state
        state.outcome = outcome
        logger.info(
            "Game %s on %dx%d after %d moves",
            outcome, self.config.grid_size, self.config.grid_size, state.moves,
        )
        if outcome is Outcome.WON:
            self.listener.on_won(state.moves)
            self._record_best()
        else:
            self.listener.on_lost(state.moves)

    def _record_best(self) -> None:
        if self.score_record is None:
            return
        grid_size = self.config.grid_size
        best = self.score_record.get_best(grid_size)
        if best is None or self.state.moves < best:
            self.score_record.set_best(grid_size, self.state.moves)
