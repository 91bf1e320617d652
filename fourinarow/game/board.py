"""
board.py - Board representation for Four-in-a-Row

This module implements the Board class which stores the grid of pieces,
finds where a dropped piece lands and scans for four in a row. It knows
nothing about turns or players beyond their numbers; the Game class in
rules.py drives it.
"""

from typing import Dict, List, Optional

import numpy as np

from fourinarow.debug import debug
from fourinarow.exceptions import CellOccupiedError, InvalidBoardSizeError
from fourinarow.utils import (DEFAULT_HEIGHT, DEFAULT_WIDTH, EMPTY, Cell, Direction,
                              candidate_line, is_valid_position, render_board_ascii)


class Board:
    """
    A height x width grid of cells.

    Row 0 is the top and row height-1 the bottom; pieces settle downward.
    A cell holds EMPTY or the number of the player occupying it, and an
    occupied cell is never cleared.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """Initialize an empty board."""
        if height < 1 or width < 1:
            raise InvalidBoardSizeError(f"Board must be at least 1x1, got {height}x{width}")

        debug.debug(f"Initializing new {height}x{width} Board", "board")
        self.height = height
        self.width = width
        self.grid = np.full((height, width), EMPTY, dtype=int)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self.height, self.width)
        new_board.grid = self.grid.copy()
        return new_board

    def cell(self, row: int, col: int) -> int:
        """Value at (row, col): EMPTY or a player number."""
        return int(self.grid[row, col])

    def find_spot_for_col(self, col: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``col`` would land in.

        Args:
            col: The column to drop into (0-indexed)

        Returns:
            The lowest empty row, or None if the column is full
        """
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, col] == EMPTY:
                return row
        debug.debug(f"Column {col} is full", "board")
        return None

    def place(self, row: int, col: int, number: int) -> None:
        """
        Occupy a single cell.

        Raises:
            CellOccupiedError: if the cell already holds a piece
        """
        if self.grid[row, col] != EMPTY:
            raise CellOccupiedError(row, col)
        debug.trace(f"Placing piece {number} at ({row}, {col})", "board")
        self.grid[row, col] = number

    def is_full(self) -> bool:
        """Check whether every cell is occupied."""
        return bool(np.all(self.grid != EMPTY))

    def is_column_full(self, col: int) -> bool:
        """Check whether the top cell of ``col`` is occupied."""
        return self.grid[0, col] != EMPTY

    def find_win(self, number: int) -> List[Cell]:
        """
        Scan the whole board for four of ``number``'s pieces in a row.

        Every cell is tried as the start of a line, in row-major order,
        and from each start the horizontal, vertical, down-right and
        down-left lines are checked in that order.

        Args:
            number: Player number to look for, normally the player who just moved

        Returns:
            The four cells of the first winning line found, or an empty list
        """
        debug.start_timer("win_scan")
        try:
            for row in range(self.height):
                for col in range(self.width):
                    for direction in Direction:
                        cells = candidate_line(row, col, direction)
                        if self._is_line(cells, number):
                            debug.debug(f"Four in a row for {number}: {direction.name} from ({row}, {col})", "board")
                            return cells
            return []
        finally:
            debug.end_timer("win_scan", "board")

    def _is_line(self, cells: List[Cell], number: int) -> bool:
        return all(
            is_valid_position(row, col, self.height, self.width) and self.grid[row, col] == number
            for row, col in cells
        )

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the grid
        """
        return self.grid.copy()

    def render(self, symbols: Optional[Dict[int, str]] = None, highlight=()) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid, symbols, highlight)

    def __str__(self) -> str:
        return self.render()
