from blockslide.models.board import Board, Move
from blockslide.models.errors import BlockSlideError, IllegalMoveError, InvalidBoardError
from blockslide.models.fingerprint import Fingerprint, fingerprint
from blockslide.models.geometry import Cell, Direction
from blockslide.models.piece import Piece

__all__ = [
    "BlockSlideError",
    "Board",
    "Cell",
    "Direction",
    "Fingerprint",
    "IllegalMoveError",
    "InvalidBoardError",
    "Move",
    "Piece",
    "fingerprint",
]
