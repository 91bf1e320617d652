"""
cli.py - Command-line interface for playing Four-in-a-Row in a terminal

Two people share the keyboard and take turns entering column numbers. The
board is drawn by a TerminalRenderer listening to the active game.
"""

import sys
from typing import Callable, Optional, TextIO

from fourinarow.debug import debug
from fourinarow.interfaces.render import TerminalRenderer
from fourinarow.session import GameSession

QUIT = -1
RESTART = -2


class SimpleCLI:
    """Interactive two-player game on standard input/output."""

    def __init__(self, p1_color: Optional[str] = None, p2_color: Optional[str] = None,
                 input_func: Callable[[str], str] = input, out: TextIO = None):
        self.p1_color = p1_color
        self.p2_color = p2_color
        self.input = input_func
        self.out = out or sys.stdout
        self.session = GameSession(lambda: TerminalRenderer(self.out))

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def start_game(self) -> None:
        self.session.start(self.p1_color, self.p2_color)

    def play_game(self) -> None:
        """Play games until the current one ends or the players quit."""
        self._print("Starting a new Four-in-a-Row game!")
        self._print("Enter a column number to drop a piece. 'q' quits, 'r' restarts.")
        self.start_game()

        while not self.session.game.is_game_over():
            move = self.get_human_move()

            if move is None:
                continue
            elif move == QUIT:
                self._print("Quitting game.")
                self.session.end()
                return
            elif move == RESTART:
                self._print("Game restarted.")
                self.start_game()
                continue

            if self.session.select_column(move) is None:
                self._print(f"Column {move} is full, pick another.")

        self._print("Game over!")

    def get_human_move(self) -> Optional[int]:
        """
        Read one move from the current player.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not usable
        """
        game = self.session.game
        last_col = game.width - 1
        try:
            user_input = self.input(f"{game.current_player}, your move (0-{last_col}, q/r): ")
        except EOFError:
            return QUIT

        user_input = user_input.strip().lower()
        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            move = int(user_input)
        except ValueError:
            debug.debug(f"Unparseable input {user_input!r}", "cli")
            self._print("Invalid input. Please enter a column number or q/r.")
            return None

        if not 0 <= move <= last_col:
            self._print(f"Column must be between 0 and {last_col}.")
            return None

        return move
