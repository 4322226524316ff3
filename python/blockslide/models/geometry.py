"""Grid primitives shared by pieces and boards."""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple


class Direction(StrEnum):
    """One-cell slide directions, in canonical iteration order."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Read a direction from its name or initial, ignoring case.

        Example::

            Direction.parse("Up")   # Direction.UP
            Direction.parse("r")    # Direction.RIGHT
        """
        key = text.strip().lower()
        for direction in cls:
            if key in (direction.value, direction.value[0]):
                return direction
        raise ValueError(f"Unknown direction: {text!r}.")

    @property
    def offset(self) -> tuple[int, int]:
        """``(dx, dy)`` for a one-cell step; y grows downward."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Cell(NamedTuple):
    """A single 1×1 square of the grid, ``(0, 0)`` being the upper-left."""

    x: int
    y: int

    def shifted(self, direction: Direction) -> Cell:
        dx, dy = direction.offset
        return Cell(self.x + dx, self.y + dy)
