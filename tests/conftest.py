import os
import sys

import pytest

# Ensure the project root is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from fourinarow.game import Game, Player
from tests.helpers import play


@pytest.fixture
def red():
    return Player("red", 1)


@pytest.fixture
def blue():
    return Player("blue", 2)


@pytest.fixture
def game(red, blue):
    return Game(red, blue)


__all__ = ["play"]
