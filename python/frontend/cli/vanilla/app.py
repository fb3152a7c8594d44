"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for difficulty selection, play, and best scores.
"""

from __future__ import annotations

import sys
from pathlib import Path

from backend.engine.difficulty import Difficulty, DifficultyPolicy
from backend.engine.gamestate import Outcome
from backend.engine.gameplay import GamePlay
from backend.models.card import CardState
from backend.models.highscore import BestScoreManager
from backend.models.preferences import Theme, ThemePreference
from frontend.cli.common import LEVELS, StatusListener, play
from frontend.cli.input_handler import Action, get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_REV = "\033[7m"     # reverse video (cursor)
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected level)

_CARD_BACK = {
    Theme.LIGHT: "\033[44;37;1m",  # white on blue
    Theme.DARK: "\033[100;37m",    # grey on dark grey
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _stats_line(game: GamePlay) -> str:
    session = game.session
    best = game.best
    return (
        f"  Moves: {_Y}{session.state.moves}/{session.config.move_limit}{_R}  |  "
        f"Groups: {_Y}{session.state.matched_groups}/{session.config.groups_to_win}{_R}  |  "
        f"Best: {_Y}{'—' if best is None else best}{_R}"
    )


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: int, theme: Theme) -> str:
    """Return an ANSI-coloured text representation of the card grid."""
    session = game.session
    size = session.config.grid_size
    sep = "+" + ("---+" * size)
    wrong = set(session.state.selection) if session.mismatch_pending else set()

    lines: list[str] = [sep]
    for r in range(size):
        cells: list[str] = []
        for c in range(size):
            i = r * size + c
            card = session.state.deck[i]
            mark = _REV if i == cursor else ""
            if card.state is CardState.HIDDEN:
                cells.append(f"{_CARD_BACK[theme]}{mark} ? {_R}")
            elif card.state is CardState.MATCHED:
                cells.append(f"{_G}{_DIM}{mark} {card.face_id} {_R}")
            elif i in wrong:
                cells.append(f"{_RED}{mark} {card.face_id} {_R}")
            else:
                cells.append(f"{_Y}{mark} {card.face_id} {_R}")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- menu screen --------------------------------------------------------------


def _show_menu(sel_level: Difficulty, prefs: ThemePreference) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}       M E M O R Y   M A T C H       {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()

    levels_str = ""
    for level in LEVELS:
        config = DifficultyPolicy.resolve(level)
        label = f"{level.value} {config.grid_size}×{config.grid_size}"
        if level is sel_level:
            levels_str += f"  {_BG_SEL} {label} {_R}"
        else:
            levels_str += f"  {_DIM}{label}{_R}"
    print(f"    Level:{levels_str}")
    print(f"    {_DIM}← → to change{_R}")
    print()

    print(f"    {_C}1{_R}  Play")
    print(f"    {_DIM}2{_R}  Best Scores")
    print(f"    {_DIM}T{_R}  Theme ({prefs.theme})")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


# -- game screens -------------------------------------------------------------


def _show_game(
    game: GamePlay,
    cursor: int,
    level: Difficulty,
    theme: Theme,
    status: str = "",
) -> None:
    _clear()
    config = game.config
    print(
        f"  {_C}=== Memory Match ({level.value}, {config.grid_size}×"
        f"{config.grid_size}, groups of {config.group_size}) ==={_R}"
    )
    print()
    print(_render_board(game, cursor, theme))
    print()

    outcome = game.session.outcome
    if outcome is Outcome.WON:
        print(f"  {_G}★ CONGRATULATIONS! Finished in {game.session.state.moves} moves! ★{_R}")
        print()
    elif outcome is Outcome.LOST:
        print(f"  {_RED}Out of moves. Try again!{_R}")
        print()

    print(_stats_line(game))
    if status:
        print(f"  {status}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}Space{_R}: reveal  |  "
        f"{_C}1-3{_R}: difficulty  |  "
        f"{_C}O{_R}: overrides  |  "
        f"{_C}T{_R}: theme  |  "
        f"{_C}R{_R}: retry  |  "
        f"{_C}N{_R}: new game  |  "
        f"{_C}Q{_R}: back"
    )
    sys.stdout.flush()


def _show_highscores(manager: BestScoreManager) -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== BEST SCORES ==={_R}")
    sizes = manager.get_all_sizes()
    if not sizes:
        print(f"\n  {_DIM}No best scores yet.{_R}")
    else:
        print()
        for size in sizes:
            print(
                f"  {_C}{size:>2}×{size:<2}{_R}  "
                f"{_Y}{manager.get_best(size):>4}{_R} moves"
            )
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


def _ask_overrides(game: GamePlay) -> tuple[int, int]:
    config = game.config
    print()
    raw_group = input(f"  Group size (2-10) [{config.group_size}]: ").strip() or config.group_size
    raw_limit = input(f"  Move limit (1-999) [{config.move_limit}]: ").strip() or config.move_limit
    return DifficultyPolicy.clamp_overrides(raw_group, raw_limit)


def _event_status(listener: StatusListener, game: GamePlay) -> str:
    if listener.event == "overrides":
        config = game.config
        return f"{_C}Group size {config.group_size}, move limit {config.move_limit}.{_R}"
    return {
        "matched": f"{_G}Match!{_R}",
        "mismatch": f"{_RED}No match.{_R}",
        "won": f"{_G}You won!{_R}  {_C}R{_R} to play again, {_C}N{_R} for a new game.",
        "lost": f"{_RED}Move limit reached.{_R}  {_C}R{_R} to retry, {_C}N{_R} for a new game.",
    }.get(listener.event, "")


# -- game loop ----------------------------------------------------------------


def _play_game(
    level: Difficulty,
    manager: BestScoreManager,
    prefs: ThemePreference,
    group_size: object = None,
    move_limit: object = None,
) -> None:
    listener = StatusListener()
    game = GamePlay(
        DifficultyPolicy.configure(level, group_size, move_limit),
        listener=listener,
        score_record=manager,
    )

    def draw(game: GamePlay, cursor: int, level: Difficulty) -> None:
        _show_game(game, cursor, level, prefs.theme, _event_status(listener, game))

    play(game, level, listener, prefs, draw, _ask_overrides)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(manager: BestScoreManager, prefs: ThemePreference) -> None:
    sel = 0

    while True:
        _show_menu(LEVELS[sel], prefs)
        key = get_key()

        if key == Action.QUIT:
            _clear()
            print("  Goodbye!\n")
            return
        elif key == Action.LEFT:
            sel = max(0, sel - 1)
        elif key == Action.RIGHT:
            sel = min(len(LEVELS) - 1, sel + 1)
        elif key in ("1", Action.REVEAL):
            _play_game(LEVELS[sel], manager, prefs)
        elif key == "2":
            _show_highscores(manager)
        elif key == Action.THEME:
            prefs.toggle()


# -- public entry point -------------------------------------------------------


def run(
    data_dir: Path,
    level: Difficulty | None = None,
    group_size: str | int | None = None,
    move_limit: str | int | None = None,
) -> None:
    """Launch the vanilla CLI, straight into a game when *level* is given."""
    manager = BestScoreManager(data_dir / "highscores.json")
    prefs = ThemePreference(data_dir / "preferences.json")
    if level is not None:
        _play_game(level, manager, prefs, group_size, move_limit)
        return
    _menu_loop(manager, prefs)
