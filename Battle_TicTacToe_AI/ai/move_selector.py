"""Pick a move from per-move search stats (sure win, weighted win, no loss, fallback)."""

import logging
import random


LOGGER = logging.getLogger(__name__)

WIN_COUNT_WEIGHT = 5


def _shuffled(moves, rng):
    moves = list(moves)
    rng.shuffle(moves)
    return moves


def find_sure_win(stats, player, rng):
    """A move after which `player` can win and the opponent never does."""
    other = 1 - player
    for move in _shuffled(stats, rng):
        s = stats[move]
        if s.depth(player) is not None and s.depth(other) is None:
            return move
    return None


def depth_term(this_depth, other_depth, span):
    if this_depth is not None and other_depth is not None:
        return this_depth - other_depth
    if this_depth is not None:
        return span
    if other_depth is not None:
        return -span
    return 0


def move_weights(stats, player, span):
    """Weights for every move where `player` wins at least one continuation."""
    other = 1 - player
    weights = {}
    for move, s in stats.items():
        if s.wins(player) <= 0:
            continue
        weight = (s.wins(player) - s.wins(other)) * WIN_COUNT_WEIGHT
        weight += depth_term(s.depth(player), s.depth(other), span)
        weights[move] = weight
    return weights


def find_non_losing(stats, player, rng):
    other = 1 - player
    for move in _shuffled(stats, rng):
        if stats[move].depth(other) is None:
            return move
    return None


def choose_move(stats, player, rng=None, span=9):
    """
    In order of preference:

    1. Player wins every time
    2. Better chance of winning or wins earlier than the other player
    3. Other player doesn't win
    4. Probably going to lose; take the lowest open position
    """
    if not stats:
        raise ValueError("No available moves to choose from")
    rng = rng or random

    move = find_sure_win(stats, player, rng)
    if move is not None:
        LOGGER.debug("Sure winner: %d", move)
        return move

    weights = move_weights(stats, player, span)
    if weights:
        LOGGER.debug("Weights: %s", weights)
        best = max(weights.values())
        return rng.choice(sorted(m for m, w in weights.items() if w == best))

    move = find_non_losing(stats, player, rng)
    if move is not None:
        LOGGER.debug("Other player doesn't win: %d", move)
        return move

    move = min(stats)
    LOGGER.debug("Giving up: %d", move)
    return move
