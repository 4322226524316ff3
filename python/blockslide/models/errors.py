"""Exceptions raised when a board or move breaks the puzzle rules."""


class BlockSlideError(Exception):
    """Base class for all blockslide errors."""


class InvalidBoardError(BlockSlideError, ValueError):
    """A board or piece definition that can never be a legal position."""


class IllegalMoveError(BlockSlideError, ValueError):
    """A move applied to a board on which it is not currently legal."""
