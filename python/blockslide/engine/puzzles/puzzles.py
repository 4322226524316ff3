"""Built-in puzzle definitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from blockslide.engine.goals import GoalPredicate, piece_at
from blockslide.models.board import Board
from blockslide.models.geometry import Cell


@dataclass(frozen=True)
class Puzzle:
    """A starting board bundled with the goal that solves it."""

    name: str
    title: str
    board: Board
    goal: GoalPredicate
    description: str = ""


def square_root() -> Puzzle:
    #    0123
    #    ____
    # 0 |abbc|
    # 1 |abbc|
    # 2 |deef|
    # 3 |dghf|
    # 4 |i  j|
    #    ~~~~
    board = Board.from_layout([
        "abbc",
        "abbc",
        "deef",
        "dghf",
        "i  j",
    ])
    return Puzzle(
        name="square-root",
        title="Square Root",
        board=board,
        goal=piece_at("b", Cell(1, 3)),
        description="Bring the 2×2 block b to the bottom middle, where it can slide out.",
    )


def warm_up() -> Puzzle:
    board = Board.from_layout([
        "aab",
        " cb",
        "   ",
    ])
    return Puzzle(
        name="warm-up",
        title="Warm-up",
        board=board,
        goal=piece_at("a", Cell(1, 2)),
        description="Move the 2×1 block a to the bottom-right corner.",
    )


def boxed_in() -> Puzzle:
    board = Board.from_layout([
        "ab",
        "cd",
    ])
    return Puzzle(
        name="boxed-in",
        title="Boxed In",
        board=board,
        goal=piece_at("a", Cell(1, 1)),
        description="A full board with no free cell: no move is possible.",
    )


_BUILTINS: dict[str, Callable[[], Puzzle]] = {
    "square-root": square_root,
    "warm-up": warm_up,
    "boxed-in": boxed_in,
}


def puzzle_names() -> list[str]:
    return list(_BUILTINS)


def get_puzzle(name: str) -> Puzzle:
    """Return the built-in puzzle called *name*.

    Raises:
        KeyError: If no puzzle has that name.
    """
    try:
        factory = _BUILTINS[name]
    except KeyError:
        available = ", ".join(_BUILTINS)
        raise KeyError(f"Unknown puzzle: {name}. Available: {available}") from None
    return factory()
