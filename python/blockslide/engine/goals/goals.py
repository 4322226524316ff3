"""Goal predicates deciding when a board counts as solved."""

from __future__ import annotations

from collections.abc import Callable

from blockslide.models.board import Board
from blockslide.models.geometry import Cell

GoalPredicate = Callable[[Board], bool]


def piece_at(piece_id: str, cell: Cell) -> GoalPredicate:
    """Goal reached once *piece_id*'s upper-left square is on *cell*."""
    target = Cell(*cell)

    def _goal(board: Board) -> bool:
        return board.piece(piece_id).position == target

    _goal.__name__ = f"piece_at({piece_id!r}, {tuple(target)})"
    return _goal


def all_of(*predicates: GoalPredicate) -> GoalPredicate:
    if not predicates:
        raise ValueError("all_of() needs at least one predicate.")

    def _goal(board: Board) -> bool:
        return all(p(board) for p in predicates)

    return _goal
