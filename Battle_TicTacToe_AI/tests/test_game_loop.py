"""Tests for TicTacToegame turn handling, players, and end-of-game state."""

from Battle_TicTacToe_AI.Board import Board
from Battle_TicTacToe_AI.EnginePlayer import EnginePlayer
from Battle_TicTacToe_AI.Player import HumanPlayer, ScriptedPlayer
from Battle_TicTacToe_AI.TicTacToegame import TicTacToegame


def test_scripted_game_ends_with_winner():
    x = ScriptedPlayer(0, [5, 3, 9, 1])
    o = ScriptedPlayer(1, [2, 7, 6])
    log = []
    rendered = []

    game = TicTacToegame(board_size=3, player_0=x, player_1=o, logger=log.append, renderer=rendered.append)
    final = game.play()

    assert final.turn == 7
    assert final.flags.winner == 0
    assert game.disqualified is None
    assert log[0] == "Move 1: X 5"
    assert log[-1] == "Winner: X"
    # One render per turn plus the final board.
    assert len(rendered) == 8
    assert rendered[-1] is final


def test_draw_is_logged():
    x = ScriptedPlayer(0, [5, 2, 4, 9, 7])
    o = ScriptedPlayer(1, [1, 8, 6, 3])
    log = []
    final = TicTacToegame(3, x, o, logger=log.append).play()
    assert final.flags.stalemate
    assert log[-1] == "Result: Draw (board full)"


def test_occupied_move_disqualifies():
    x = ScriptedPlayer(0, [5, 1])
    o = ScriptedPlayer(1, [5])
    log = []
    game = TicTacToegame(3, x, o, logger=log.append)
    final = game.play()

    assert game.disqualified == 1
    assert final.turn == 1
    assert log[-1].startswith("Disqualification: O")


def test_running_out_of_script_disqualifies():
    game = TicTacToegame(3, ScriptedPlayer(0, [1]), ScriptedPlayer(1, []), logger=lambda _: None)
    final = game.play()
    assert game.disqualified == 1
    assert final.turn == 1


def test_game_continues_from_seeded_position():
    start = Board.from_cells([[0, 0, None], [1, 1, None], [None, None, None]])
    game = TicTacToegame(3, ScriptedPlayer(0, [3]), ScriptedPlayer(1, []), logger=lambda _: None, start=start)
    final = game.play()
    assert final.flags.winner == 0
    assert final.flags.win_type == "row"
    assert final.parent is start


def test_engine_players_finish_a_game():
    start = Board(size=3)
    for move in [5, 1, 2, 8]:
        start = start.apply_move(move)
    game = TicTacToegame(
        3,
        EnginePlayer(0, seed=1),
        EnginePlayer(1, use_cache=False, seed=2),
        logger=lambda _: None,
        start=start,
    )
    final = game.play()
    assert final.game_over
    assert game.disqualified is None


def test_engine_player_takes_the_win():
    board = Board(size=3)
    for move in [1, 4, 2, 5]:
        board = board.apply_move(move)
    player = EnginePlayer(0, seed=0)
    assert player.next_move(board) == 3
    assert player.records and player.records[-1]["nodes"] > 0
    assert len(player.cache) > 0


def test_human_player_reprompts_until_valid():
    board = Board(size=3).apply_move(5)
    answers = iter(["abc", "10", "5", " 3 "])
    messages = []
    human = HumanPlayer(1, read=lambda prompt: next(answers), write=messages.append)

    assert human.next_move(board) == 3
    assert len(messages) == 3
    assert "taken" in messages[-1]
