"""Zobrist hashing and transposition table helpers."""

import random


def zobrist_init(size=3, seed=None):
    """One random key per (position, player); index with [position - 1][player]."""
    rng = random.Random(seed)
    return [[rng.getrandbits(64) for _ in range(2)] for _ in range(size * size)]


def hash_board(board, table):
    """Compute Zobrist hash for a Board (None empty, 0 or 1 marks)."""
    h = 0
    size = board.size
    for y in range(size):
        for x in range(size):
            v = board.cells[y][x]
            if v is None:
                continue
            h ^= table[y * size + x][v]
    return h


def hash_after_move(current_hash, table, move, player):
    return current_hash ^ table[move - 1][player]


class TranspositionTable:
    """Stats cache shared across searches on boards of a single size."""

    def __init__(self, size, seed=None):
        self.size = size
        self.zobrist = zobrist_init(size, seed)
        self.entries = {}

    def __len__(self):
        return len(self.entries)

    def hash_board(self, board):
        if board.size != self.size:
            raise ValueError(f"Table built for size {self.size}, got board of size {board.size}")
        return hash_board(board, self.zobrist)

    def lookup(self, key):
        return self.entries.get(key)

    def store(self, key, value):
        self.entries[key] = value

    def clear(self):
        self.entries.clear()
