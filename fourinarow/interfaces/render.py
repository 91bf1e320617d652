"""
render.py - Renderers that draw a Game by listening to its signals

Two surfaces are provided:

1. TerminalRenderer prints the board and notifications to a text stream
2. BrowserRenderer keeps a JSON-ready view model that the browser page draws

A renderer is bound to exactly one game at a time. ``detach`` disconnects
every receiver it registered so a discarded game can no longer reach it.
"""

import sys
from typing import Any, Callable, Dict, List, Optional, TextIO, Tuple

from blinker import Signal

from fourinarow.debug import debug
from fourinarow.game.player import Player
from fourinarow.game.rules import Game


class Renderer:
    """Base class handling signal subscription for one game."""

    def __init__(self):
        self.game: Optional[Game] = None
        self._connections: List[Tuple[Signal, Callable]] = []

    def attach(self, game: Game) -> None:
        """Subscribe to every signal of ``game``; drops any previous binding."""
        self.detach()
        self.game = game
        for signal, receiver in (
            (game.started, self.on_started),
            (game.piece_placed, self.on_piece_placed),
            (game.cells_highlighted, self.on_cells_highlighted),
            (game.turn_changed, self.on_turn_changed),
            (game.game_over, self.on_game_over),
        ):
            signal.connect(receiver, sender=game, weak=False)
            self._connections.append((signal, receiver))
        debug.debug(f"{type(self).__name__} attached to game {id(game):#x}", "render")

    def detach(self) -> None:
        for signal, receiver in self._connections:
            signal.disconnect(receiver)
        if self._connections:
            debug.debug(f"{type(self).__name__} detached from game {id(self.game):#x}", "render")
        self._connections = []
        self.game = None

    @property
    def attached(self) -> bool:
        return bool(self._connections)

    def on_started(self, game, board, current_player):
        pass

    def on_piece_placed(self, game, row, col, player, offset):
        pass

    def on_cells_highlighted(self, game, cells, color):
        pass

    def on_turn_changed(self, game, player):
        pass

    def on_game_over(self, game, status, message, winner):
        pass


def piece_symbols(p1: Player, p2: Player) -> Dict[int, str]:
    """Pick one character per player: the color's initial, or X/O when they clash."""
    first = p1.color.strip()[0].upper()
    second = p2.color.strip()[0].upper()
    if first == second or not first.isalpha() or not second.isalpha():
        first, second = "X", "O"
    return {p1.number: first, p2.number: second}


class TerminalRenderer(Renderer):
    """Prints the board after every change."""

    def __init__(self, out: TextIO = None):
        super().__init__()
        self.out = out or sys.stdout
        self.symbols: Dict[int, str] = {}
        self.highlight: List[Tuple[int, int]] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _draw(self, game: Game) -> None:
        self._print(game.board.render(self.symbols, self.highlight))

    def _label(self, player: Player) -> str:
        return f"{player} ({self.symbols[player.number]})"

    def on_started(self, game, board, current_player):
        self.symbols = piece_symbols(game.p1, game.p2)
        self.highlight = []
        self._print(f"New game: {self._label(game.p1)} vs {self._label(game.p2)}")
        self._draw(game)
        self._print(f"{self._label(current_player)} to move.")

    def on_piece_placed(self, game, row, col, player, offset):
        self._print(f"\n{self._label(player)} plays column {col}")

    def on_cells_highlighted(self, game, cells, color):
        self.highlight = list(cells)

    def on_turn_changed(self, game, player):
        self._draw(game)
        self._print(f"{self._label(player)} to move.")

    def on_game_over(self, game, status, message, winner):
        self._draw(game)
        self._print(f"*** {message} ***")


class BrowserRenderer(Renderer):
    """
    Maintains the view model the browser page draws from.

    The page has one clickable header cell per column and one display cell
    per board position, addressed as "row-col". Occupied cells carry the
    piece color and the CSS ``top`` offset the drop animation starts from;
    cells of a winning line also carry the highlight color.
    """

    def __init__(self):
        super().__init__()
        self.view: Dict[str, Any] = {}

    @staticmethod
    def _player(player: Optional[Player]) -> Optional[Dict[str, Any]]:
        if player is None:
            return None
        return {"color": player.color, "number": player.number}

    def on_started(self, game, board, current_player):
        self.view = {
            "height": board.height,
            "width": board.width,
            "columns": [{"id": col, "enabled": True} for col in range(board.width)],
            "cells": {
                f"{row}-{col}": {"color": None, "top": None, "highlight": None}
                for row in range(board.height)
                for col in range(board.width)
            },
            "players": [self._player(game.p1), self._player(game.p2)],
            "current_player": self._player(current_player),
            "status": game.status.name,
            "message": None,
            "last_move": None,
        }

    def on_piece_placed(self, game, row, col, player, offset):
        cell = self.view["cells"][f"{row}-{col}"]
        cell["color"] = player.color
        cell["top"] = offset
        self.view["last_move"] = [row, col]

    def on_cells_highlighted(self, game, cells, color):
        for row, col in cells:
            self.view["cells"][f"{row}-{col}"]["highlight"] = color

    def on_turn_changed(self, game, player):
        self.view["current_player"] = self._player(player)

    def on_game_over(self, game, status, message, winner):
        for column in self.view["columns"]:
            column["enabled"] = False
        self.view["status"] = status.name
        self.view["message"] = message
