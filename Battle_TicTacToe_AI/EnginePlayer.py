"""Engine-backed player: exhaustive game-tree search with an optional stats cache."""

import random

from .Player import Player
from .ai import game_tree, transposition


class EnginePlayer(Player):
    def __init__(self, player, use_cache=True, seed=None):
        super().__init__(player)
        self.use_cache = use_cache
        self.rng = random.Random(seed)
        self.cache = None
        self.records = []

    def next_move(self, board):
        if self.use_cache and (self.cache is None or self.cache.size != board.size):
            self.cache = transposition.TranspositionTable(board.size, seed=self.rng.getrandbits(32))

        return game_tree.next_suggested_move(
            board,
            rng=self.rng,
            cache=self.cache if self.use_cache else None,
            records=self.records,
        )
