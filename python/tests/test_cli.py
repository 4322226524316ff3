"""Command-line entry point, driven through typer's test runner."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_list() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("square-root")
    assert "4×5" in lines[0]
    assert any(line.startswith("boxed-in") for line in lines)


def test_show_vanilla() -> None:
    result = runner.invoke(app, ["show", "-p", "square-root"])
    assert result.exit_code == 0
    assert "=== Square Root (4×5) ===" in result.output
    assert "|abbc|\n|abbc|\n|deef|\n|dghf|\n|i  j|\n" in result.output


def test_solve_vanilla_with_boards() -> None:
    result = runner.invoke(app, ["solve", "-p", "warm-up", "-f", "vanilla"])
    assert result.exit_code == 0, result.output
    out = result.output
    assert "Found solution (7 moves, 38 configurations, 70 skipped):" in out
    assert "1: c -> down\n" in out
    assert out.endswith("7: a -> right\n ___\n| b |\n| bc|\n| aa|\n ~~~\n")
    assert "\033[" not in out


def test_solve_vanilla_move_list_only() -> None:
    result = runner.invoke(app, ["solve", "-p", "warm-up", "-f", "vanilla", "--no-boards"])
    assert result.exit_code == 0
    tail = result.output.split("skipped):\n", 1)[1]
    assert tail.splitlines() == [
        "1: c -> down",
        "2: a -> down",
        "3: c -> right",
        "4: a -> down",
        "5: b -> left",
        "6: c -> up",
        "7: a -> right",
    ]


def test_solve_unsolvable_exits_1() -> None:
    result = runner.invoke(app, ["solve", "-p", "boxed-in", "-f", "vanilla"])
    assert result.exit_code == 1
    assert "Couldn't find solution" in result.output


def test_solve_with_state_limit_exits_1() -> None:
    result = runner.invoke(
        app, ["solve", "-p", "warm-up", "-f", "vanilla", "--max-states", "5"]
    )
    assert result.exit_code == 1
    assert "Search stopped after" in result.output


def test_max_states_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_MAX_STATES", "5")
    result = runner.invoke(app, ["solve", "-p", "warm-up", "-f", "vanilla"])
    assert result.exit_code == 1


def test_bad_environment_exits_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_MAX_STATES", "many")
    result = runner.invoke(app, ["solve", "-p", "warm-up"])
    assert result.exit_code == 2
    assert "BLOCKSLIDE_MAX_STATES" in result.output


def test_bad_log_level_exits_2(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKSLIDE_LOG_LEVEL", "loud")
    result = runner.invoke(app, ["solve", "-p", "warm-up", "-f", "vanilla"])
    assert result.exit_code == 2, result.output
    assert "BLOCKSLIDE_LOG_LEVEL" in result.output
    assert "Found solution" not in result.output


def test_unknown_puzzle_exits_2() -> None:
    result = runner.invoke(app, ["solve", "-p", "klotski"])
    assert result.exit_code == 2
    assert "Unknown puzzle: klotski" in result.output


def test_solve_rich() -> None:
    result = runner.invoke(app, ["solve", "-p", "warm-up", "-f", "rich", "--no-boards"])
    assert result.exit_code == 0, result.output
    assert "Found solution (7 moves)" in result.output
    assert "right" in result.output


def test_solve_rich_unsolvable() -> None:
    result = runner.invoke(app, ["solve", "-p", "boxed-in"])
    assert result.exit_code == 1
    assert "Couldn't find solution" in result.output
