"""Game loop and turn management for N-in-a-row."""

from .Board import Board, PIECES
from .engine import referee


class TicTacToegame:
    def __init__(self, board_size, player_0, player_1, logger=print, renderer=None, start=None):
        self.board = start if start is not None else Board(size=board_size)
        self.players = {0: player_0, 1: player_1}
        self.logger = logger
        self.renderer = renderer
        self.disqualified = None

    def play(self):
        """Run a single game and return the final Board."""
        board = self.board
        while not board.game_over:
            if self.renderer:
                self.renderer(board)

            current = board.next_player
            player = self.players[current]
            try:
                move = player.next_move(board)
                referee.check_move(move, board)
                board = board.apply_move(move)
            except ValueError as exc:
                self.logger(f"Disqualification: {PIECES[current]} - {exc}")
                self.disqualified = current
                break
            self.board = board

            self.logger(f"Move {board.turn}: {PIECES[current]} {move}")

            if board.flags.winner is not None:
                self.logger(f"Winner: {PIECES[board.flags.winner]}")
            elif board.flags.stalemate:
                self.logger("Result: Draw (board full)")

        if self.renderer:
            self.renderer(board)
        return board
