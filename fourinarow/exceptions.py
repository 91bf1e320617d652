"""
exceptions.py - Error types raised by the Four-in-a-Row game

Selecting a full column is not an error; the game ignores it. These
exceptions cover misuse that the browser page and terminal never produce on
their own: bad constructor arguments, out-of-range columns from hand-written
requests, and selections with no game running.
"""


class FourInARowError(Exception):
    """Base class for all game errors."""


class InvalidPlayerError(FourInARowError, ValueError):
    """A player was built with a bad color or number, or two players share a number."""


class InvalidBoardSizeError(FourInARowError, ValueError):
    """Board height or width is smaller than one."""


class InvalidColumnError(FourInARowError, ValueError):
    """A column index outside the board was selected."""

    def __init__(self, column, width):
        super().__init__(f"Column {column!r} is not between 0 and {width - 1}")
        self.column = column
        self.width = width


class CellOccupiedError(FourInARowError):
    """A piece was placed on a cell that already holds one."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Cell ({row}, {col}) is already occupied")
        self.row = row
        self.col = col


class NoActiveGameError(FourInARowError):
    """A column was selected before any game was started."""


class InvalidRequestError(FourInARowError, ValueError):
    """A browser request body could not be read as game input."""
