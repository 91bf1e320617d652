"""
fourinarow - Two-player Four-in-a-Row game

This package provides the game state machine, renderers that draw it in a
terminal or a browser page, and the session that owns the active game.
"""

# Version number
__version__ = '0.1.0'
