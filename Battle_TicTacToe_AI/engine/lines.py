"""Board geometry: move index conversion, winning lines, and flag computation."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class BoardFlags:
    """Classification of a board, computed once when the board is built."""

    empty: bool = False
    full: bool = False
    stalemate: bool = False
    winner: Optional[int] = None
    win_type: Optional[str] = None  # "row", "col" or "diagonal"
    win_desc: object = None  # row #, col #, "nw_se" or "sw_ne"
    win_positions: Tuple[Tuple[int, int], ...] = ()


def position_to_xy(position, size):
    """
    The position is 1 - size*size, so a 3x3 board:

       1 2 3
       4 5 6
       7 8 9

    Position 1 is (0, 0), upper left; position 4 is (0, 1).
    """
    x = (position - 1) % size
    y = (position - 1) // size
    return x, y


def xy_to_position(x, y, size):
    return y * size + x + 1


def winning_lines(size):
    """Yield (win_type, win_desc, coords) for every line, in scan order."""
    for y in range(size):
        yield "row", y, [(x, y) for x in range(size)]
    for x in range(size):
        yield "col", x, [(x, y) for y in range(size)]
    yield "diagonal", "nw_se", [(i, i) for i in range(size)]
    yield "diagonal", "sw_ne", [(x, size - x - 1) for x in range(size)]


def compute_flags(cells) -> BoardFlags:
    """Classify a square grid of marks (cells[y][x] in None/0/1)."""
    size = len(cells)
    pieces_count = sum(1 for row in cells for v in row if v is not None)
    empty = pieces_count == 0
    full = pieces_count == size * size

    winner = None
    win_type = None
    win_desc = None
    win_positions = []

    # A player needs `size` marks and the opponent at least size - 1.
    if pieces_count >= size * 2 - 1:
        for line_type, line_desc, coords in winning_lines(size):
            first = cells[coords[0][1]][coords[0][0]]
            if first is None or any(cells[y][x] != first for x, y in coords):
                continue
            if winner is None:
                winner = first
                win_type = line_type
                win_desc = line_desc
            for xy in coords:
                if xy not in win_positions:
                    win_positions.append(xy)

    return BoardFlags(
        empty=empty,
        full=full,
        stalemate=full and winner is None,
        winner=winner,
        win_type=win_type,
        win_desc=win_desc,
        win_positions=tuple(win_positions),
    )
