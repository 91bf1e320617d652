"""
fourinarow.game - Core game mechanics for Four-in-a-Row

This package contains the player value, the board representation and the
game state machine. Nothing here draws anything.
"""

from fourinarow.game.board import Board
from fourinarow.game.player import Player
from fourinarow.game.rules import Game, MoveResult

__all__ = ['Board', 'Game', 'MoveResult', 'Player']
