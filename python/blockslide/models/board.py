"""Board model for the sliding block puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from blockslide.models.errors import IllegalMoveError, InvalidBoardError
from blockslide.models.fingerprint import Fingerprint, fingerprint
from blockslide.models.geometry import Cell, Direction
from blockslide.models.piece import Piece


@dataclass(frozen=True)
class Move:
    """Slide one piece a single cell."""

    piece_id: str
    direction: Direction

    @classmethod
    def parse(cls, text: str) -> Move:
        """Read ``"b:down"``, ``"b down"`` or ``"b -> down"``."""
        parts = text.replace("->", " ").replace(":", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Expected '<piece> <direction>', got {text!r}.")
        return cls(parts[0], Direction.parse(parts[1]))

    def inverse(self) -> Move:
        return Move(self.piece_id, self.direction.opposite)

    def __str__(self) -> str:
        return f"{self.piece_id} -> {self.direction.value}"


@dataclass(frozen=True)
class Board:
    """An immutable arrangement of pieces plus the moves that produced it.

    ``pieces`` is kept sorted by id so that move generation, and therefore
    tie-breaking between equally short solutions, is reproducible.
    Construction rejects any arrangement with a piece off the grid or two
    pieces sharing a cell.
    """

    width: int
    height: int
    pieces: tuple[Piece, ...]
    moves: tuple[Move, ...] = ()
    _occupancy: dict[Cell, str] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _index: dict[str, Piece] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidBoardError(
                f"Board must be at least 1×1, got {self.width}×{self.height}."
            )
        pieces = tuple(sorted(self.pieces, key=lambda p: p.id))
        object.__setattr__(self, "pieces", pieces)
        object.__setattr__(self, "moves", tuple(self.moves))

        for piece in pieces:
            if piece.id in self._index:
                raise InvalidBoardError(f"Duplicate piece id {piece.id!r}.")
            self._index[piece.id] = piece
            for cell in piece.cells():
                if not self.in_bounds(cell):
                    raise InvalidBoardError(
                        f"Piece {piece.id!r} leaves the "
                        f"{self.width}×{self.height} board at {tuple(cell)}."
                    )
                other = self._occupancy.get(cell)
                if other is not None:
                    raise InvalidBoardError(
                        f"Pieces {other!r} and {piece.id!r} overlap "
                        f"at {tuple(cell)}."
                    )
                self._occupancy[cell] = piece.id

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_layout(cls, rows: Sequence[str], blank: str = " ") -> Board:
        """Create a board from text rows, one character per cell.

        Every non-blank character names a piece and must fill a solid
        rectangle. Example::

            Board.from_layout([
                "abbc",
                "abbc",
                "deef",
                "dghf",
                "i  j",
            ])
        """
        if not rows:
            raise InvalidBoardError("Layout must have at least one row.")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidBoardError("Layout rows must all have the same length.")

        spans: dict[str, list[Cell]] = {}
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch != blank:
                    spans.setdefault(ch, []).append(Cell(x, y))

        pieces: list[Piece] = []
        for pid, cells in spans.items():
            x0 = min(c.x for c in cells)
            y0 = min(c.y for c in cells)
            w = max(c.x for c in cells) - x0 + 1
            h = max(c.y for c in cells) - y0 + 1
            if w * h != len(cells):
                raise InvalidBoardError(
                    f"Piece {pid!r} does not form a solid rectangle."
                )
            pieces.append(Piece(pid, w, h, x0, y0))
        return cls(width=width, height=len(rows), pieces=tuple(pieces))

    # -- queries --------------------------------------------------------------

    @property
    def depth(self) -> int:
        """Number of moves taken from the initial board."""
        return len(self.moves)

    def piece(self, piece_id: str) -> Piece:
        try:
            return self._index[piece_id]
        except KeyError:
            raise KeyError(f"No piece {piece_id!r} on this board.") from None

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def is_open(self, cell: Cell) -> bool:
        """True if *cell* is on the board and no piece covers it."""
        return self.in_bounds(cell) and cell not in self._occupancy

    def occupancy(self) -> dict[Cell, str]:
        """Map of every covered cell to the id of the piece covering it."""
        return dict(self._occupancy)

    def can_move(self, piece_id: str, direction: Direction) -> bool:
        piece = self.piece(piece_id)
        return all(self.is_open(c) for c in piece.target_cells(direction))

    def legal_moves(self) -> list[Move]:
        """All legal one-cell slides, by piece id then direction."""
        return [
            Move(piece.id, direction)
            for piece in self.pieces
            for direction in Direction
            if all(self.is_open(c) for c in piece.target_cells(direction))
        ]

    def fingerprint(self) -> Fingerprint:
        return fingerprint(self.pieces)

    # -- transitions ----------------------------------------------------------

    def apply(self, move: Move) -> Board:
        """Return a new board with *move* applied and recorded.

        Raises ``IllegalMoveError`` if the piece is unknown or blocked.
        """
        if move.piece_id not in self._index:
            raise IllegalMoveError(f"No piece {move.piece_id!r} on this board.")
        if not self.can_move(move.piece_id, move.direction):
            raise IllegalMoveError(f"Illegal move {move}: target cells are not open.")

        pieces = tuple(
            p.moved(move.direction) if p.id == move.piece_id else p
            for p in self.pieces
        )
        return Board(
            width=self.width,
            height=self.height,
            pieces=pieces,
            moves=self.moves + (move,),
        )

    # -- presentation ---------------------------------------------------------

    def rows(self, blank: str = " ") -> list[str]:
        """Text rows with each cell showing the first character of its piece id."""
        grid = [[blank] * self.width for _ in range(self.height)]
        for cell, pid in self._occupancy.items():
            grid[cell.y][cell.x] = pid[0]
        return ["".join(row) for row in grid]
