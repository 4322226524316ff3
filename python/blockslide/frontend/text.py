"""Plain-text drawings of boards and move lists."""

from __future__ import annotations

from collections.abc import Iterable

from blockslide.models.board import Board, Move


def render_board(board: Board) -> str:
    """Return the framed grid, e.g.::

         ____
        |abbc|
        |abbc|
        |deef|
        |dghf|
        |i  j|
         ~~~~
    """
    lines = [" " + "_" * board.width]
    lines.extend(f"|{row}|" for row in board.rows())
    lines.append(" " + "~" * board.width)
    return "\n".join(lines) + "\n"


def render_moves(moves: Iterable[Move]) -> str:
    """Number moves from 1, one per line."""
    return "".join(f"{i}: {move}\n" for i, move in enumerate(moves, 1))
