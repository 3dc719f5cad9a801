"""Referee checks for finished games, bounds, and occupancy."""

import pytest

from Battle_TicTacToe_AI.Board import Board, GameAlreadyOver, InvalidPosition, PositionOccupied
from Battle_TicTacToe_AI.engine import referee


def test_valid_move_passes():
    b = Board(size=3)
    assert referee.check_move(5, b) is True


def test_occupied_rejected():
    b = Board(size=3).apply_move(5)
    with pytest.raises(PositionOccupied):
        referee.check_move(5, b)


def test_out_of_range_rejected():
    b = Board(size=4)
    with pytest.raises(InvalidPosition):
        referee.check_move(17, b)


def test_finished_game_rejected():
    b = Board(size=3)
    for move in [1, 4, 2, 5, 3]:
        b = b.apply_move(move)
    assert b.flags.winner == 0
    with pytest.raises(GameAlreadyOver):
        referee.check_move(9, b)
