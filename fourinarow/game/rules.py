"""
rules.py - Game state management for Four-in-a-Row

This module provides the Game class, a headless turn-based state machine:

    IN_PROGRESS --(four in a row after a placement)--> WON
    IN_PROGRESS --(board full, no line)--------------> TIED

WON and TIED are terminal. The game draws nothing itself. Every state
change is sent on a blinker signal owned by the game instance, and the
renderers in fourinarow.interfaces subscribe to those signals.
"""

from typing import List, NamedTuple, Optional

from blinker import Signal

from fourinarow import config
from fourinarow.debug import debug
from fourinarow.exceptions import InvalidColumnError, InvalidPlayerError
from fourinarow.game.board import Board
from fourinarow.game.player import Player
from fourinarow.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, Cell, GameStatus, drop_offset

TIE_MESSAGE = "Tie!"


class MoveResult(NamedTuple):
    """Outcome of a selection that placed a piece."""
    row: int
    col: int
    player: Player
    status: GameStatus


class Game:
    """
    A single game between two players.

    Signals (each sent with the game as sender):
        started:           board, current_player
        piece_placed:      row, col, player, offset
        cells_highlighted: cells, color
        turn_changed:      player
        game_over:         status, message, winner
    """

    def __init__(self, p1: Player, p2: Player,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        if p1.number == p2.number:
            raise InvalidPlayerError(f"Both players have number {p1.number}")

        debug.debug(f"Initializing Game: {p1} vs {p2} on {height}x{width}", "game")
        self.board = Board(height, width)
        self.height = height
        self.width = width

        self.p1 = p1
        self.p2 = p2
        self.current_player = p1

        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.winning_cells: List[Cell] = []
        self.moves: List[Cell] = []

        self.started = Signal("started")
        self.piece_placed = Signal("piece_placed")
        self.cells_highlighted = Signal("cells_highlighted")
        self.turn_changed = Signal("turn_changed")
        self.game_over = Signal("game_over")

    @property
    def signals(self) -> List[Signal]:
        return [self.started, self.piece_placed, self.cells_highlighted,
                self.turn_changed, self.game_over]

    @property
    def message(self) -> Optional[str]:
        """Outcome notification text, or None while the game is running."""
        if self.status == GameStatus.WON:
            return f"Player {self.winner.color} won!"
        if self.status == GameStatus.TIED:
            return TIE_MESSAGE
        return None

    def announce(self) -> None:
        """Send the starting state to whoever is listening now."""
        self.started.send(self, board=self.board, current_player=self.current_player)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns a piece can still be dropped into.

        Returns:
            List of column indices, empty once the game is over
        """
        if self.is_game_over():
            return []
        return [col for col in range(self.width) if not self.board.is_column_full(col)]

    def handle_column_select(self, col: int) -> Optional[MoveResult]:
        """
        Drop the current player's piece into a column.

        Selecting a full column, or any column once the game is over, is
        ignored.

        Args:
            col: The column to drop into (0-indexed)

        Returns:
            A MoveResult when a piece was placed, otherwise None

        Raises:
            InvalidColumnError: if ``col`` is not a column on this board
        """
        if isinstance(col, bool) or not isinstance(col, int) or not 0 <= col < self.width:
            raise InvalidColumnError(col, self.width)

        if self.is_game_over():
            debug.debug(f"Ignoring column {col}: game is over ({self.status.name})", "game")
            return None

        row = self.board.find_spot_for_col(col)
        if row is None:
            return None

        mover = self.current_player
        self.board.place(row, col, mover.number)
        self.moves.append((row, col))
        debug.debug(f"{mover} dropped into column {col}, landed on row {row}", "game")
        self.piece_placed.send(self, row=row, col=col, player=mover, offset=drop_offset(row))

        # The line check must see the mover, so it runs before the turn passes.
        cells = self.board.find_win(mover.number)
        if cells:
            self.status = GameStatus.WON
            self.winner = mover
            self.winning_cells = cells
            self.cells_highlighted.send(self, cells=list(cells), color=config.HIGHLIGHT_COLOR)
            self._end_game()
        elif self.board.is_full():
            self.status = GameStatus.TIED
            self._end_game()
        else:
            self.current_player = self.p2 if mover is self.p1 else self.p1
            self.turn_changed.send(self, player=self.current_player)

        return MoveResult(row, col, mover, self.status)

    def _end_game(self) -> None:
        debug.info(f"Game over after {len(self.moves)} moves: {self.message}", "game")
        self.game_over.send(self, status=self.status, message=self.message, winner=self.winner)

    def render(self) -> str:
        """
        Render the game as a string.

        Returns:
            String representation of the board
        """
        return self.board.render(highlight=self.winning_cells)
