"""Replays recorded move lists against a starting board."""

from __future__ import annotations

from collections.abc import Iterable

from blockslide.engine.goals import GoalPredicate
from blockslide.models.board import Board, Move
from blockslide.models.errors import IllegalMoveError


def replay(start: Board, moves: Iterable[Move]) -> list[Board]:
    """Apply *moves* in order, returning every board (start first).

    Raises ``IllegalMoveError`` naming the step that could not be played.
    """
    boards = [start]
    for i, move in enumerate(moves, 1):
        try:
            boards.append(boards[-1].apply(move))
        except IllegalMoveError as exc:
            raise IllegalMoveError(f"Step {i}: {exc}") from exc
    return boards


def verify(start: Board, moves: Iterable[Move], goal: GoalPredicate) -> bool:
    """True if *moves* are all legal from *start* and end on a goal board."""
    try:
        boards = replay(start, moves)
    except IllegalMoveError:
        return False
    return goal(boards[-1])
