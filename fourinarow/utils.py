"""
utils.py - Constants, enumerations and helper functions for Four-in-a-Row

This module holds the pieces shared by the board, the game state machine
and the renderers: default board size, the game status enum, the four
scan directions and the text drawing of a grid.
"""

from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from fourinarow import config

# Game constants
DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win
EMPTY = 0      # Grid value of an unoccupied cell

Cell = Tuple[int, int]


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Directions a four-cell line can run from its starting cell."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col), in the order lines are checked
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def candidate_line(row: int, col: int, direction: Direction) -> List[Cell]:
    """
    Build the four cells of a possible line starting at (row, col).

    The cells are not bounds-checked; callers decide what to do with
    coordinates that fall off the board.
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def drop_offset(row: int) -> int:
    """Vertical pixel offset a piece starts from when dropped into ``row``."""
    return config.DROP_OFFSET_PX * (row + config.DROP_OFFSET_ROWS)


def render_board_ascii(grid: np.ndarray,
                       symbols: Optional[Dict[int, str]] = None,
                       highlight: Iterable[Cell] = ()) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: The board grid (0 empty, otherwise a player number)
        symbols: Character to draw for each player number
        highlight: Cells to draw in brackets, e.g. a winning line

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    symbols = symbols or {1: "X", 2: "O"}
    highlight = set(highlight)
    height, width = grid.shape

    border = "+" + "-" * (width * 3) + "+"
    result = [border]
    for row in range(height):
        line = "|"
        for col in range(width):
            value = int(grid[row, col])
            mark = "." if value == EMPTY else symbols.get(value, "?")
            line += f"[{mark}]" if (row, col) in highlight else f" {mark} "
        line += "|"
        result.append(line)
    result.append(border)
    result.append(" " + "".join(f"{col:^3}" for col in range(width)) + " ")

    return "\n".join(result)
