"""GamePlay tests — restarts, generation tagging, and stale callbacks."""

from __future__ import annotations

import random

from backend.engine.difficulty import DifficultyPolicy
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Outcome
from backend.models.config import GameConfig

from conftest import FakeScoreRecord, RecordingListener, pairs_deck

EASY = GameConfig(grid_size=4, group_size=2, move_limit=50)


def _mismatched_pair(game: GamePlay) -> tuple[int, int]:
    deck = game.session.state.deck
    first = deck[0].face_id
    other = next(i for i, card in enumerate(deck) if card.face_id != first)
    return 0, other


def _force_mismatch(game: GamePlay) -> tuple[int, int]:
    a, b = _mismatched_pair(game)
    game.reveal(a)
    game.reveal(b)
    assert game.session.mismatch_pending
    return a, b


# -- lifecycle ----------------------------------------------------------------


def test_new_game_deals_a_full_deck() -> None:
    game = GamePlay(EASY, rng=random.Random(5))
    assert len(game.session.state.deck) == 16
    assert game.generation == 0
    assert game.session.generation == 0
    assert game.session.outcome is Outcome.ONGOING


def test_seeded_game_matches_generator() -> None:
    game = GamePlay(EASY, rng=random.Random(9))
    expected = GameGenerator.generate(EASY, rng=random.Random(9))
    assert [c.face_id for c in game.session.state.deck] == [c.face_id for c in expected]


def test_restart_replaces_session() -> None:
    game = GamePlay(EASY)
    old = game.session
    game.reveal(0)

    new = game.restart()

    assert new is game.session
    assert new is not old
    assert game.generation == 1
    assert new.generation == 1
    assert new.state.selection == []
    assert new.state.moves == 0
    assert new.config == EASY


def test_restart_with_new_config() -> None:
    game = GamePlay(EASY)
    medium = DifficultyPolicy.resolve("medium")

    game.restart(medium)

    assert game.config == medium
    assert len(game.session.state.deck) == 36


def test_listener_and_scores_carry_over_restart() -> None:
    listener = RecordingListener()
    scores = FakeScoreRecord()
    game = GamePlay(EASY, listener=listener, score_record=scores)
    game.restart()

    assert game.session.listener is listener
    assert game.session.score_record is scores


# -- mismatch resolver --------------------------------------------------------


def test_resolver_flips_back_current_mismatch() -> None:
    game = GamePlay(EASY, rng=random.Random(1))
    a, b = _force_mismatch(game)

    resolve = game.mismatch_resolver()

    assert resolve()
    assert game.session.state.deck[a].is_hidden
    assert game.session.state.deck[b].is_hidden
    assert not resolve()


def test_stale_resolver_cannot_touch_new_session() -> None:
    game = GamePlay(EASY, rng=random.Random(2))
    _force_mismatch(game)
    stale = game.mismatch_resolver()

    game.restart()
    a, b = _force_mismatch(game)

    assert not stale()
    assert game.session.mismatch_pending
    assert game.session.state.selection == [a, b]

    assert game.mismatch_resolver()()
    assert game.session.state.selection == []


def test_stale_resolver_after_restart_without_mismatch() -> None:
    game = GamePlay(EASY, rng=random.Random(3))
    _force_mismatch(game)
    stale = game.mismatch_resolver()

    game.restart(DifficultyPolicy.resolve("hard"))

    assert not stale()
    assert game.session.state.selection == []
    assert all(card.is_hidden for card in game.session.state.deck)


# -- prepared decks and scores ------------------------------------------------


def test_from_deck_then_win_updates_best() -> None:
    scores = FakeScoreRecord()
    game = GamePlay.from_deck(EASY, pairs_deck(), score_record=scores)

    assert game.best is None
    for i in range(16):
        game.reveal(i)

    assert game.session.outcome is Outcome.WON
    assert game.best == 8


def test_best_without_score_record() -> None:
    assert GamePlay(EASY).best is None
