"""
session.py - Ownership of the single active game

A GameSession owns at most one Game and the renderer bound to it. Starting
a new game first detaches the renderer from the old one, so the discarded
game's signals have no receivers left and no selection is handled twice.
"""

from typing import Callable, Optional

from fourinarow import config
from fourinarow.debug import debug
from fourinarow.exceptions import NoActiveGameError
from fourinarow.game.player import Player
from fourinarow.game.rules import Game, MoveResult
from fourinarow.interfaces.render import Renderer
from fourinarow.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH


class GameSession:
    """
    Starts games and routes column selections to the active one.

    Args:
        renderer_factory: Builds the renderer for each new game. The
            session may reuse one renderer by returning the same object.
    """

    def __init__(self, renderer_factory: Callable[[], Renderer]):
        self._renderer_factory = renderer_factory
        self._game: Optional[Game] = None
        self._renderer: Optional[Renderer] = None
        self.games_started = 0

    @property
    def game(self) -> Optional[Game]:
        return self._game

    @property
    def renderer(self) -> Optional[Renderer]:
        return self._renderer

    def start(self, p1_color: Optional[str] = None, p2_color: Optional[str] = None,
              height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> Game:
        """
        Replace the active game with a fresh one.

        Blank colors fall back to the configured defaults.
        """
        p1 = Player(p1_color or config.DEFAULT_P1_COLOR, 1)
        p2 = Player(p2_color or config.DEFAULT_P2_COLOR, 2)
        game = Game(p1, p2, height, width)

        self.end()
        renderer = self._renderer_factory()
        renderer.attach(game)
        self._game = game
        self._renderer = renderer
        self.games_started += 1

        debug.info(f"Started game #{self.games_started}: {p1} vs {p2}", "session")
        game.announce()
        return game

    def select_column(self, col: int) -> Optional[MoveResult]:
        """Forward a column selection to the active game."""
        if self._game is None:
            raise NoActiveGameError("Start a game before selecting a column")
        return self._game.handle_column_select(col)

    def end(self) -> None:
        """Tear down the active game's renderer binding and forget the game."""
        if self._renderer is not None:
            self._renderer.detach()
        if self._game is not None:
            debug.debug(f"Discarding game {id(self._game):#x}", "session")
        self._game = None
        self._renderer = None
