import numpy as np

from fourinarow.utils import EMPTY

# 6x7 grid with no four in a row anywhere: pairs alternate along each row
# and the pattern shifts by one every row.
TIE_GRID = np.array([
    [1 if ((x // 2) + y) % 2 == 0 else 2 for x in range(7)]
    for y in range(6)
])


def play(game, columns):
    """Select each column in turn; return the list of results."""
    return [game.handle_column_select(col) for col in columns]


def almost_tied(game):
    """Fill ``game`` with TIE_GRID except the top-right cell; player 2 moves next."""
    grid = TIE_GRID.copy()
    grid[0, 6] = EMPTY
    game.board.grid = grid
    game.current_player = game.p2
    return game
