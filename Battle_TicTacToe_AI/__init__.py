"""Battle_TicTacToe_AI package exports."""

from .Board import (
    Board,
    BoardError,
    GameAlreadyOver,
    InvalidCellValue,
    InvalidPosition,
    InvalidSize,
    NotSquare,
    PositionOccupied,
    UnbalancedMoves,
)
from .TicTacToegame import TicTacToegame
from .Player import Player, HumanPlayer, ScriptedPlayer
from .EnginePlayer import EnginePlayer
from .ai.game_tree import MoveStats, get_stats, next_suggested_move

# Subpackages for board geometry, AI search, terminal view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "BoardError",
    "GameAlreadyOver",
    "InvalidCellValue",
    "InvalidPosition",
    "InvalidSize",
    "NotSquare",
    "PositionOccupied",
    "UnbalancedMoves",
    "TicTacToegame",
    "Player",
    "HumanPlayer",
    "ScriptedPlayer",
    "EnginePlayer",
    "MoveStats",
    "get_stats",
    "next_suggested_move",
    "ai",
    "engine",
    "gui",
    "utils",
]
