"""Vanilla terminal frontend — no third-party dependencies.

Prints the solution as a numbered move list, optionally with a board
diagram after every step.
"""

from __future__ import annotations

import sys

from blockslide.config import SearchConfig
from blockslide.engine.puzzles import Puzzle
from blockslide.engine.replay import replay
from blockslide.engine.solver import Solution, SearchStatus, Solver
from blockslide.frontend.text import render_board, render_moves


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_R = "\033[0m"       # reset


def _paint(text: str, code: str, color: bool | None) -> str:
    if color is None:
        color = sys.stdout.isatty()
    return f"{code}{text}{_R}" if color else text


# -- output -------------------------------------------------------------------


def _summary(solution: Solution) -> str:
    stats = solution.stats
    if solution.solved:
        return (
            f"Found solution ({solution.length} moves, "
            f"{stats.configurations} configurations, {stats.skipped} skipped):"
        )
    if solution.status is SearchStatus.ABORTED:
        return (
            f"Search stopped after {stats.configurations} configurations "
            "without a solution."
        )
    return "Couldn't find solution"


def show_puzzle(puzzle: Puzzle, *, color: bool | None = None) -> None:
    """Print a puzzle's title and starting board."""
    board = puzzle.board
    title = f"=== {puzzle.title} ({board.width}×{board.height}) ==="
    print(_paint(title, _C, color))
    if puzzle.description:
        print(puzzle.description)
    print(render_board(board), end="")


def print_solution(
    puzzle: Puzzle, solution: Solution, *, boards: bool = True, color: bool | None = None
) -> None:
    code = _G if solution.solved else _Y
    print(_paint(_summary(solution), code, color))
    if not solution.solved:
        return

    if not boards:
        print(render_moves(solution.moves), end="")
        return

    states = replay(puzzle.board, solution.moves)
    print(render_board(states[0]), end="")
    for i, (move, board) in enumerate(zip(solution.moves, states[1:]), 1):
        print(f"{i}: {move}")
        print(render_board(board), end="")


# -- public entry point -------------------------------------------------------


def run(
    puzzle: Puzzle,
    config: SearchConfig | None = None,
    *,
    boards: bool = True,
    color: bool | None = None,
) -> Solution:
    """Solve *puzzle* and print the result to stdout."""
    show_puzzle(puzzle, color=color)
    print()
    solution = Solver.solve(puzzle.board, puzzle.goal, config=config)
    print_solution(puzzle, solution, boards=boards, color=color)
    return solution
