import numpy as np
import pytest

from fourinarow.exceptions import InvalidColumnError, InvalidPlayerError
from fourinarow.game import Game, Player
from fourinarow.utils import EMPTY, GameStatus
from tests.helpers import almost_tied, play


def test_new_game(game, red):
    assert game.current_player is red
    assert game.status == GameStatus.IN_PROGRESS
    assert not game.is_game_over()
    assert game.message is None
    assert np.all(game.board.grid == EMPTY)
    assert (game.height, game.width) == (6, 7)


def test_players_need_different_numbers(red):
    with pytest.raises(InvalidPlayerError):
        Game(red, Player("blue", 1))


@pytest.mark.parametrize("col", range(7))
def test_pieces_settle_in_lowest_empty_row(game, col):
    rows = [game.handle_column_select(col).row for _ in range(6)]
    assert rows == [5, 4, 3, 2, 1, 0]


def test_placement_records_current_player(game, red, blue):
    result = game.handle_column_select(2)
    assert (result.row, result.col, result.player) == (5, 2, red)
    assert game.board.cell(5, 2) == red.number
    game.handle_column_select(2)
    assert game.board.cell(4, 2) == blue.number
    assert game.moves == [(5, 2), (4, 2)]


def test_turn_toggles_after_each_placement(game, red, blue):
    game.handle_column_select(0)
    assert game.current_player is blue
    game.handle_column_select(1)
    assert game.current_player is red


def test_full_column_is_a_no_op(game):
    play(game, [0] * 6)
    before = game.board.get_state()
    player = game.current_player

    assert game.handle_column_select(0) is None
    assert np.array_equal(game.board.grid, before)
    assert game.current_player is player
    assert game.get_valid_moves() == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("col", [-1, 7, "3", None, True])
def test_out_of_range_column_raises(game, col):
    with pytest.raises(InvalidColumnError):
        game.handle_column_select(col)


def test_horizontal_win_on_fourth_placement(game, red):
    results = play(game, [0, 0, 1, 1, 2, 2])
    assert all(r.status == GameStatus.IN_PROGRESS for r in results)

    result = game.handle_column_select(3)
    assert result.status == GameStatus.WON
    assert game.winner is red
    assert game.winning_cells == [(5, 0), (5, 1), (5, 2), (5, 3)]
    assert game.message == "Player red won!"


def test_vertical_win_on_fourth_placement(game, red):
    play(game, [0, 1, 0, 1, 0, 1])
    assert not game.is_game_over()
    game.handle_column_select(0)
    assert game.status == GameStatus.WON
    assert game.winner is red
    assert game.winning_cells == [(2, 0), (3, 0), (4, 0), (5, 0)]


def test_second_player_can_win(game, blue):
    play(game, [6, 0, 6, 1, 5, 2, 6, 3])
    assert game.winner is blue
    assert game.message == "Player blue won!"


def test_diagonal_win(game, red):
    # red builds (5,0) (4,1) (3,2) (2,3)
    play(game, [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3])
    assert game.winner is red
    assert game.winning_cells == [(2, 3), (3, 2), (4, 1), (5, 0)]


def test_win_only_counts_the_mover():
    # Player 2 already has a line on the board; player 1's move must not win.
    game = Game(Player("red", 1), Player("blue", 2))
    for col in range(4):
        game.board.grid[5, col] = 2
    result = game.handle_column_select(6)
    assert result.status == GameStatus.IN_PROGRESS
    assert game.current_player is game.p2


def test_tie_when_board_fills_without_a_line(game):
    almost_tied(game)
    result = game.handle_column_select(6)
    assert result.status == GameStatus.TIED
    assert game.status == GameStatus.TIED
    assert game.winner is None
    assert game.winning_cells == []
    assert game.message == "Tie!"


def test_win_on_last_cell_is_a_win_not_a_tie(game):
    almost_tied(game)
    # Top row becomes 1 1 1 2 2 2 _, so the last drop completes a row for player 2
    game.board.grid[0, 2] = 1
    game.board.grid[0, 3:6] = 2
    result = game.handle_column_select(6)
    assert result.status == GameStatus.WON
    assert game.winning_cells == [(0, 3), (0, 4), (0, 5), (0, 6)]


@pytest.mark.parametrize("finish", ["win", "tie"])
def test_terminal_game_ignores_selections(game, finish):
    if finish == "win":
        play(game, [0, 0, 1, 1, 2, 2, 3])
    else:
        almost_tied(game)
        game.handle_column_select(6)
    before = game.board.get_state()
    player = game.current_player
    status = game.status

    for col in range(7):
        assert game.handle_column_select(col) is None
    assert np.array_equal(game.board.grid, before)
    assert game.current_player is player
    assert game.status == status
    assert game.get_valid_moves() == []


def test_signals_follow_each_move(game, red, blue):
    events = []
    game.started.connect(lambda g, **kw: events.append(("started", kw["current_player"])), weak=False)
    game.piece_placed.connect(lambda g, **kw: events.append(("placed", kw["row"], kw["col"], kw["offset"])), weak=False)
    game.turn_changed.connect(lambda g, **kw: events.append(("turn", kw["player"])), weak=False)

    game.announce()
    game.handle_column_select(4)

    assert events == [
        ("started", red),
        ("placed", 5, 4, -350),
        ("turn", blue),
    ]


def test_signals_on_win(game, red):
    events = []
    game.cells_highlighted.connect(lambda g, **kw: events.append(("highlight", kw["cells"], kw["color"])), weak=False)
    game.game_over.connect(lambda g, **kw: events.append(("over", kw["status"], kw["message"], kw["winner"])), weak=False)
    game.turn_changed.connect(lambda g, **kw: events.append(("turn",)), weak=False)

    play(game, [0, 0, 1, 1, 2, 2])
    events.clear()
    game.handle_column_select(3)

    assert events == [
        ("highlight", [(5, 0), (5, 1), (5, 2), (5, 3)], "gold"),
        ("over", GameStatus.WON, "Player red won!", red),
    ]


def test_render_highlights_winning_cells(game):
    play(game, [0, 0, 1, 1, 2, 2, 3])
    assert "[X][X][X][X]" in game.render()
