"""Rigid rectangular pieces."""

from __future__ import annotations

from dataclasses import dataclass, replace

from blockslide.models.errors import InvalidBoardError
from blockslide.models.geometry import Cell, Direction


@dataclass(frozen=True)
class Piece:
    """A ``width × height`` block whose upper-left square sits at ``(x, y)``.

    Pieces never rotate or resize; moving one yields a new ``Piece`` with
    the same id and shape.
    """

    id: str
    width: int
    height: int
    x: int
    y: int

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidBoardError("Piece id must be a non-empty string.")
        if self.width < 1 or self.height < 1:
            raise InvalidBoardError(
                f"Piece {self.id!r} must be at least 1×1, "
                f"got {self.width}×{self.height}."
            )

    # -- shape ----------------------------------------------------------------

    @property
    def position(self) -> Cell:
        return Cell(self.x, self.y)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def config(self) -> tuple[int, int, int, int]:
        """Size and location without the id."""
        return (self.width, self.height, self.x, self.y)

    def cells(self) -> list[Cell]:
        """Every covered cell, row-major."""
        return [
            Cell(x, y)
            for y in range(self.y, self.y + self.height)
            for x in range(self.x, self.x + self.width)
        ]

    def covers(self, cell: Cell) -> bool:
        return (
            self.x <= cell.x < self.x + self.width
            and self.y <= cell.y < self.y + self.height
        )

    # -- movement -------------------------------------------------------------

    def target_cells(self, direction: Direction) -> list[Cell]:
        """Cells this piece would newly enter by sliding one step."""
        match direction:
            case Direction.UP:
                return _row(self.y - 1, self.x, self.width)
            case Direction.DOWN:
                return _row(self.y + self.height, self.x, self.width)
            case Direction.LEFT:
                return _column(self.x - 1, self.y, self.height)
            case Direction.RIGHT:
                return _column(self.x + self.width, self.y, self.height)

    def moved(self, direction: Direction) -> Piece:
        """Return this piece shifted one cell. Bounds are the board's concern."""
        dx, dy = direction.offset
        return replace(self, x=self.x + dx, y=self.y + dy)


def _row(y: int, x: int, length: int) -> list[Cell]:
    return [Cell(x + i, y) for i in range(length)]


def _column(x: int, y: int, length: int) -> list[Cell]:
    return [Cell(x, y + i) for i in range(length)]
