"""Move validation for the game loop: finished games, bounds, and occupancy."""

from ..Board import GameAlreadyOver, PositionOccupied


def check_move(move, board):
    """
    Validate a move index against the board without building the next state.
    Raises GameAlreadyOver/InvalidPosition/PositionOccupied on invalid moves.
    """
    if board.game_over:
        raise GameAlreadyOver("Cannot continue finished game")

    if not board.position_available(move):
        raise PositionOccupied(f"Position {move} unavailable")

    return True
