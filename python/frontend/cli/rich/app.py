"""Rich terminal frontend — styled grid, panels, and score tables.

Uses the ``rich`` library for output while sharing the same input
handler and backend as the vanilla CLI.  Includes a built-in menu for
difficulty selection, play, best scores, and the light / dark theme.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from backend.engine.difficulty import Difficulty, DifficultyPolicy
from backend.engine.gamestate import Outcome
from backend.engine.gameplay import GamePlay
from backend.models.card import CardState
from backend.models.highscore import BestScoreManager
from backend.models.preferences import Theme, ThemePreference
from frontend.cli.common import LEVELS, StatusListener, play
from frontend.cli.input_handler import Action, get_key

console = Console()

_PALETTES: dict[Theme, dict[str, str]] = {
    Theme.LIGHT: {
        "border": "bright_blue",
        "back": "bold white on blue",
        "face": "bold black on bright_yellow",
        "wrong": "bold white on red",
        "matched": "green",
        "cursor": "reverse",
    },
    Theme.DARK: {
        "border": "grey50",
        "back": "bold grey70 on grey23",
        "face": "bold bright_white on dark_blue",
        "wrong": "bold white on dark_red",
        "matched": "dim green",
        "cursor": "reverse",
    },
}


# -- board rendering ----------------------------------------------------------


def _render_board(game: GamePlay, cursor: int, palette: dict[str, str]) -> Table:
    """Return a Rich Table representing the card grid."""
    session = game.session
    size = session.config.grid_size
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style=palette["border"],
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=3, justify="center")

    wrong = set(session.state.selection) if session.mismatch_pending else set()
    deck = session.state.deck
    for r in range(size):
        cells: list[Text] = []
        for c in range(size):
            i = r * size + c
            card = deck[i]
            if card.state is CardState.HIDDEN:
                cell = Text(" ? ", style=palette["back"])
            elif card.state is CardState.MATCHED:
                cell = Text(f" {card.face_id} ", style=palette["matched"])
            elif i in wrong:
                cell = Text(f" {card.face_id} ", style=palette["wrong"])
            else:
                cell = Text(f" {card.face_id} ", style=palette["face"])
            if i == cursor:
                cell.stylize(palette["cursor"])
            cells.append(cell)
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    session = game.session
    best = game.best
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(f"{session.state.moves}/{session.config.move_limit}", style="bold yellow")
    stats.append("    Groups: ", style="dim")
    stats.append(
        f"{session.state.matched_groups}/{session.config.groups_to_win}",
        style="bold yellow",
    )
    stats.append("    Best: ", style="dim")
    stats.append("—" if best is None else f"{best} moves", style="bold yellow")
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_level: Difficulty, prefs: ThemePreference) -> None:
    """Draw the main menu."""
    console.clear()
    palette = _PALETTES[prefs.theme]

    levels = Text()
    for i, level in enumerate(LEVELS):
        if i:
            levels.append("  ")
        config = DifficultyPolicy.resolve(level)
        label = f" {level.value} {config.grid_size}×{config.grid_size} "
        if level is sel_level:
            levels.append(label, style="bold green on #313244")
        else:
            levels.append(label, style="dim")

    nav = Text("  ← →  change difficulty", style="dim")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("2", style="dim bold")
    opts.append("  Best scores    ", style="dim")
    opts.append("T", style="dim bold")
    opts.append(f"  Theme ({prefs.theme})    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(levels),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]M E M O R Y   M A T C H[/bold]",
        border_style=palette["border"],
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(
    game: GamePlay,
    cursor: int,
    level: Difficulty,
    prefs: ThemePreference,
    status: str = "",
) -> None:
    """Draw the game screen, with an end-of-game banner once it is over."""
    console.clear()
    palette = _PALETTES[prefs.theme]
    config = game.config
    outcome = game.session.outcome

    parts: list = [Align.center(_render_board(game, cursor, palette))]
    if outcome is Outcome.WON:
        banner = Text()
        banner.append("\n  ★ ", style="bold yellow")
        banner.append("CONGRATULATIONS!", style="bold green")
        banner.append(f"  Finished in {game.session.state.moves} moves  ", style="green")
        banner.append("★\n", style="bold yellow")
        parts.append(Align.center(banner))
    elif outcome is Outcome.LOST:
        banner = Text("\n  Out of moves. Try again!\n", style="bold red")
        parts.append(Align.center(banner))

    border = {
        Outcome.ONGOING: palette["border"],
        Outcome.WON: "bold green",
        Outcome.LOST: "bold red",
    }[outcome]
    title = (
        f"[bold cyan]Memory Match  {level.value}  {config.grid_size}×"
        f"{config.grid_size}  groups of {config.group_size}[/bold cyan]"
    )
    panel = Panel(Group(*parts), title=title, border_style=border, padding=(1, 2))

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  reveal   ", style="dim")
    controls.append("1 2 3", style="bold cyan")
    controls.append("  difficulty   ", style="dim")
    controls.append("O", style="bold cyan")
    controls.append("  overrides   ", style="dim")
    controls.append("T", style="bold cyan")
    controls.append("  theme   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  retry   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_highscores(manager: BestScoreManager) -> None:
    """Full-screen best scores view (used from the menu)."""
    console.clear()

    sizes = manager.get_all_sizes()
    if not sizes:
        body: Text | Align = Text("  No best scores yet.", style="dim")
    else:
        hs_table = Table(
            box=rich.box.ROUNDED,
            border_style="dim",
            show_lines=False,
        )
        hs_table.add_column("Grid", justify="right", style="cyan")
        hs_table.add_column("Best moves", justify="right", style="yellow")
        for size in sizes:
            hs_table.add_row(f"{size}×{size}", str(manager.get_best(size)))
        body = Align.center(hs_table)

    panel = Panel(
        body,
        title="[bold]BEST  SCORES[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _ask_overrides(game: GamePlay) -> tuple[int, int]:
    """Prompt for group size and move limit, returning the clamped values."""
    config = game.config
    console.print()
    raw_group = Prompt.ask("  Group size (2-10)", default=str(config.group_size))
    raw_limit = Prompt.ask("  Move limit (1-999)", default=str(config.move_limit))
    return DifficultyPolicy.clamp_overrides(raw_group, raw_limit)


def _event_status(listener: StatusListener, game: GamePlay) -> str:
    if listener.event == "overrides":
        config = game.config
        return (
            f"[cyan]Group size {config.group_size}, "
            f"move limit {config.move_limit}.[/cyan]"
        )
    return {
        "matched": "[green]Match![/green]",
        "mismatch": "[red]No match.[/red]",
        "won": "[bold green]You won![/bold green]  R to play again, N for a new game.",
        "lost": "[bold red]Move limit reached.[/bold red]  R to retry, N for a new game.",
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
        _draw_game(game, cursor, level, prefs, _event_status(listener, game))

    play(game, level, listener, prefs, draw, _ask_overrides)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(manager: BestScoreManager, prefs: ThemePreference) -> None:
    sel = 0

    while True:
        _draw_menu(LEVELS[sel], prefs)
        key = get_key()

        if key == Action.QUIT:
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key == Action.LEFT:
            sel = max(0, sel - 1)
        elif key == Action.RIGHT:
            sel = min(len(LEVELS) - 1, sel + 1)
        elif key in ("1", Action.REVEAL):
            _play_game(LEVELS[sel], manager, prefs)
        elif key == "2":
            _draw_highscores(manager)
        elif key == Action.THEME:
            prefs.toggle()


# -- public entry point -------------------------------------------------------


def run(
    data_dir: Path,
    level: Difficulty | None = None,
    group_size: str | int | None = None,
    move_limit: str | int | None = None,
) -> None:
    """Launch the Rich CLI.

    With a *level* the game starts straight away; otherwise the menu is
    shown first.
    """
    manager = BestScoreManager(data_dir / "highscores.json")
    prefs = ThemePreference(data_dir / "preferences.json")
    if level is not None:
        _play_game(level, manager, prefs, group_size, move_limit)
        return
    _menu_loop(manager, prefs)
