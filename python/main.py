#!/usr/bin/env python3
"""Memory Match.

Usage::

    python main.py                       # interactive menu
    python main.py -f rich -l medium     # Rich terminal, 6×6, groups of 4
    python main.py -f vanilla -g 3 -m 40 # easy grid, groups of 3, 40 moves
    python main.py --scores              # view best scores
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.difficulty import Difficulty  # noqa: E402

logger = logging.getLogger("memory_match")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_highscores(data_dir: Path) -> None:
    from backend.models.highscore import BestScoreManager

    manager = BestScoreManager(data_dir / "highscores.json")
    sizes = manager.get_all_sizes()

    print("\n  === BEST SCORES ===")
    if not sizes:
        print("  No best scores yet.\n")
        return
    for size in sizes:
        print(f"  {size:>2}×{size:<2}  {manager.get_best(size):>4} moves")
    print()


def _menu_loop(
    data_dir: Path,
    level: Optional[Difficulty] = None,
    group_size: Optional[str] = None,
    move_limit: Optional[str] = None,
) -> None:
    while True:
        print()
        print("  ====================================")
        print("        M E M O R Y   M A T C H      ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  View Best Scores")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            frontend = {"1": Frontend.vanilla, "2": Frontend.rich}[choice]
            mod = importlib.import_module(_RUNNERS[frontend])
            mod.run(
                data_dir=data_dir,
                level=level,
                group_size=group_size,
                move_limit=move_limit,
            )

        elif choice == "3":
            _print_highscores(data_dir)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    level: Optional[Difficulty] = typer.Option(
        None, "-l", "--level",
        help="Start straight into a game at this difficulty.",
    ),
    group_size: Optional[str] = typer.Option(
        None, "-g", "--group-size",
        help="Cards per matching group (2-10). Clamped if out of range.",
    ),
    move_limit: Optional[str] = typer.Option(
        None, "-m", "--move-limit",
        help="Moves allowed (1-999). Values above 999 reset to 999.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Where best scores and the theme preference are stored.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show best scores and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Memory Match."""
    _configure_logging(log_level)

    if scores:
        _print_highscores(data_dir)
        return

    if level is None and (group_size is not None or move_limit is not None):
        level = Difficulty.EASY

    if frontend is None:
        _menu_loop(data_dir, level, group_size, move_limit)
        return

    logger.debug("Launching %s frontend (level=%s)", frontend, level)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(data_dir=data_dir, level=level, group_size=group_size, move_limit=move_limit)


if __name__ == "__main__":
    app()
