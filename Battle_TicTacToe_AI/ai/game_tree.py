"""Exhaustive game-tree statistics and move suggestion.

Every legal continuation is played out to a finished board. For each candidate
move the searcher records how many finished games each player wins and how
many plies away each player's shallowest win is; `move_selector` turns those
records into a recommended move.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from . import move_selector
from . import transposition


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveStats:
    """Aggregate outcome of every game that continues through one move."""

    wins_0: int = 0
    wins_1: int = 0
    depth_0: Optional[int] = None
    depth_1: Optional[int] = None
    draws: int = 0

    @classmethod
    def terminal(cls, winner):
        if winner == 0:
            return cls(wins_0=1, depth_0=0)
        if winner == 1:
            return cls(wins_1=1, depth_1=0)
        return cls(draws=1)

    def wins(self, player):
        return self.wins_1 if player == 1 else self.wins_0

    def depth(self, player):
        return self.depth_1 if player == 1 else self.depth_0

    @property
    def leaves(self):
        return self.wins_0 + self.wins_1 + self.draws


def aggregate(children: Iterable[MoveStats]) -> MoveStats:
    """Sum win counts and bubble up the shallowest win depth for each player."""
    wins = [0, 0]
    depths = [None, None]
    draws = 0
    for s in children:
        wins[0] += s.wins_0
        wins[1] += s.wins_1
        draws += s.draws
        for player in (0, 1):
            d = s.depth(player)
            if d is not None and (depths[player] is None or d + 1 < depths[player]):
                depths[player] = d + 1
    return MoveStats(wins_0=wins[0], wins_1=wins[1], depth_0=depths[0], depth_1=depths[1], draws=draws)


class GameTreeSearcher:
    """Runs full-width searches, optionally memoised through a TranspositionTable."""

    def __init__(self, cache=None, records=None):
        self.cache = cache
        self.records = records
        self.node_counter = 0
        self.start_time = None

    def get_stats(self, board, next_move=None):
        """
        Stats for every available move of `board` as {move: MoveStats}, or the
        MoveStats of a single `next_move` when one is given.
        """
        self.node_counter = 0
        self.start_time = time.time()
        root_hash = self.cache.hash_board(board) if self.cache is not None else None

        if next_move is None:
            result = self._position_stats(board, root_hash)
        else:
            result = self._move_stats(board, next_move, root_hash)

        elapsed = max(time.time() - self.start_time, 1e-9)
        LOGGER.debug("Searched %d nodes from turn %d in %.3fs", self.node_counter, board.turn, elapsed)
        if self.records is not None:
            self.records.append({
                "size": board.size,
                "turn": board.turn,
                "nodes": self.node_counter,
                "time": elapsed,
                "nps": self.node_counter / elapsed,
            })
        return result

    def _position_stats(self, board, board_hash) -> Dict[int, MoveStats]:
        return {
            move: self._move_stats(board, move, board_hash)
            for move in board.available_positions()
        }

    def _move_stats(self, board, move, board_hash) -> MoveStats:
        self.node_counter += 1

        key = None
        if self.cache is not None:
            key = (board_hash, move)
            cached = self.cache.lookup(key)
            if cached is not None:
                return cached

        child = board.apply_move(move)
        if child.game_over:
            result = MoveStats.terminal(child.flags.winner)
        else:
            child_hash = None
            if board_hash is not None:
                child_hash = transposition.hash_after_move(board_hash, self.cache.zobrist, move, board.next_player)
            result = aggregate(self._position_stats(child, child_hash).values())

        if key is not None:
            self.cache.store(key, result)
        return result


def get_stats(board, next_move=None, cache=None, records=None):
    """Public function to run a search. Instantiates and uses GameTreeSearcher."""
    searcher = GameTreeSearcher(cache=cache, records=records)
    return searcher.get_stats(board, next_move)


def next_suggested_move(board, rng=None, cache=None, records=None):
    """
    Figure out a good move for the next player and return its position index.
    The board must not be finished.
    """
    rng = rng or random
    span = board.size * board.size

    # The first move is random; the centre is best on odd sizes but boring.
    if board.turn == 0:
        move = rng.randint(1, span)
        LOGGER.debug("Opening move: %d", move)
        return move

    stats = get_stats(board, cache=cache, records=records)
    return move_selector.choose_move(stats, board.next_player, rng=rng, span=span)
