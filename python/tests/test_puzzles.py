"""Built-in puzzle registry."""

from __future__ import annotations

import pytest

from blockslide.engine.puzzles import get_puzzle, puzzle_names
from blockslide.models import Cell


def test_puzzle_names() -> None:
    assert puzzle_names() == ["square-root", "warm-up", "boxed-in"]


@pytest.mark.parametrize("name", ["square-root", "warm-up", "boxed-in"])
def test_puzzles_start_unsolved(name: str) -> None:
    puzzle = get_puzzle(name)
    assert puzzle.name == name
    assert not puzzle.goal(puzzle.board)


def test_square_root_goal() -> None:
    puzzle = get_puzzle("square-root")
    assert (puzzle.board.width, puzzle.board.height) == (4, 5)
    assert len(puzzle.board.pieces) == 10
    assert puzzle.board.piece("b").position == Cell(1, 0)


def test_get_puzzle_returns_fresh_instances() -> None:
    assert get_puzzle("warm-up") is not get_puzzle("warm-up")


def test_unknown_puzzle() -> None:
    with pytest.raises(KeyError, match="Available: square-root"):
        get_puzzle("klotski")
