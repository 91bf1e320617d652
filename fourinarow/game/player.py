"""
player.py - Player value for Four-in-a-Row
"""

from dataclasses import dataclass

from fourinarow.exceptions import InvalidPlayerError


@dataclass(frozen=True)
class Player:
    """
    One of the two players in a game.

    Attributes:
        color: Color identifier, any CSS color name or hex value
        number: 1 for the player who moves first, 2 for the other
    """
    color: str
    number: int

    def __post_init__(self):
        if self.number not in (1, 2):
            raise InvalidPlayerError(f"Player number must be 1 or 2, got {self.number!r}")
        if not isinstance(self.color, str) or not self.color.strip():
            raise InvalidPlayerError("Player color must be a non-empty string")

    def __str__(self) -> str:
        return f"Player {self.color}"
