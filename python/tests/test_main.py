"""Tests for the ``memory-match`` command line."""

from __future__ import annotations

import sys
import types

import pytest
from typer.testing import CliRunner

import main
from backend.engine.difficulty import Difficulty

runner = CliRunner()


@pytest.fixture
def frontend_calls(monkeypatch) -> list[dict]:
    """Route both frontends to a module that records ``run`` arguments."""
    calls: list[dict] = []
    fake = types.ModuleType("recording_frontend")
    fake.run = lambda **kwargs: calls.append(kwargs)
    monkeypatch.setitem(sys.modules, "recording_frontend", fake)
    monkeypatch.setattr(
        main, "_RUNNERS", {f: "recording_frontend" for f in main.Frontend}
    )
    return calls


def test_frontend_gets_level_and_overrides(frontend_calls, tmp_path) -> None:
    result = runner.invoke(
        main.app,
        ["-f", "rich", "-l", "medium", "-g", "3", "-m", "40", "--data-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert frontend_calls == [
        {"data_dir": tmp_path, "level": Difficulty.MEDIUM, "group_size": "3", "move_limit": "40"}
    ]


def test_overrides_alone_start_at_easy(frontend_calls, tmp_path) -> None:
    result = runner.invoke(
        main.app, ["-f", "vanilla", "-m", "20", "--data-dir", str(tmp_path)]
    )

    assert result.exit_code == 0, result.output
    assert frontend_calls[0]["level"] is Difficulty.EASY
    assert frontend_calls[0]["move_limit"] == "20"


def test_menu_passes_options_to_chosen_frontend(frontend_calls, tmp_path) -> None:
    result = runner.invoke(
        main.app,
        ["-g", "3", "--data-dir", str(tmp_path)],
        input="2\n0\n",
    )

    assert result.exit_code == 0, result.output
    assert frontend_calls == [
        {"data_dir": tmp_path, "level": Difficulty.EASY, "group_size": "3", "move_limit": None}
    ]
    assert "Goodbye!" in result.output


def test_menu_without_options_opens_frontend_menu(frontend_calls, tmp_path) -> None:
    result = runner.invoke(main.app, ["--data-dir", str(tmp_path)], input="1\n0\n")

    assert result.exit_code == 0, result.output
    assert frontend_calls[0]["level"] is None
    assert frontend_calls[0]["group_size"] is None


def test_scores_with_empty_store(tmp_path) -> None:
    result = runner.invoke(main.app, ["--scores", "--data-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "No best scores yet." in result.output
