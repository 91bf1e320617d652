import dataclasses

import pytest

from fourinarow.exceptions import InvalidPlayerError
from fourinarow.game import Player


def test_player_holds_color_and_number():
    player = Player("#ff0000", 2)
    assert player.color == "#ff0000"
    assert player.number == 2
    assert str(player) == "Player #ff0000"


def test_player_is_read_only():
    player = Player("red", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        player.color = "blue"


@pytest.mark.parametrize("number", [0, 3, -1])
def test_player_number_must_be_one_or_two(number):
    with pytest.raises(InvalidPlayerError):
        Player("red", number)


def test_player_color_must_not_be_blank():
    with pytest.raises(InvalidPlayerError):
        Player("  ", 1)
