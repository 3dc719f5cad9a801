"""Terminal rendering of single boards and whole games."""

import io

from Battle_TicTacToe_AI.Board import Board
from Battle_TicTacToe_AI.gui.terminal_view import TerminalView


def render(board, **kwargs):
    out = io.StringIO()
    TerminalView(stream=out, **kwargs).render(board)
    return out.getvalue().splitlines()


def test_empty_board_shows_positions():
    lines = render(Board(size=3), color=False)
    assert len(lines) == 13
    assert lines[0] == "+---+---+---+"
    assert lines[1] == "|   |   |   |"
    assert lines[2] == "| 1 | 2 | 3 |"
    assert lines[10] == "| 7 | 8 | 9 |"


def test_compact_four_by_four():
    b = Board(size=4).apply_move(1).apply_move(16)
    lines = render(b, compact=True, color=False)
    assert len(lines) == 9
    assert lines[0] == "+--+--+--+--+"
    assert lines[1] == "| X| 2| 3| 4|"
    assert lines[7] == "|13|14|15| O|"


def test_winning_marks_are_highlighted():
    b = Board(size=3)
    for move in [1, 4, 2, 5, 3]:
        b = b.apply_move(move)
    lines = render(b, compact=True)
    top = lines[1]
    assert top.count(TerminalView.REVERSE) == 3
    middle = lines[3]
    assert TerminalView.REVERSE not in middle
    assert middle.count(TerminalView.BOLD) == 2


def test_render_game_titles_each_turn():
    b = Board(size=3).apply_move(5).apply_move(1)
    out = io.StringIO()
    TerminalView(stream=out, compact=True, color=False).render_game(b)
    lines = out.getvalue().splitlines()
    assert [line for line in lines if not line.startswith(("+", "|"))] == ["Start", "Turn 1", "Turn 2"]
    assert len(lines) == 3 * (1 + 7)


def test_render_game_separates_boards_when_not_compact():
    b = Board(size=3).apply_move(5)
    out = io.StringIO()
    TerminalView(stream=out, color=False).render_game(b)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Start"
    assert lines[14] == ""
    assert lines[15] == "Turn 1"
