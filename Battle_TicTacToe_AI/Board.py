"""Immutable board state for N-in-a-row on 3x3 to 5x5 boards."""

from .engine.lines import compute_flags, position_to_xy, xy_to_position


MIN_SIZE = 3
MAX_SIZE = 5
PIECES = ("X", "O")


class BoardError(ValueError):
    """Base class for rejected board constructions."""


class InvalidSize(BoardError):
    pass


class NotSquare(BoardError):
    pass


class InvalidCellValue(BoardError):
    pass


class UnbalancedMoves(BoardError):
    pass


class GameAlreadyOver(BoardError):
    pass


class PositionOccupied(BoardError):
    pass


class InvalidPosition(BoardError):
    pass


def _check_size(size):
    if isinstance(size, bool) or not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidSize(f"Invalid size {size!r}; expected {MIN_SIZE} to {MAX_SIZE}")


def _valid_cell(value):
    return value is None or (type(value) is int and value in (0, 1))


class Board:
    """
    One snapshot of a game. There are three ways to build a Board:

        Board(size=3)                       empty 3x3 board
        board.apply_move(5)                 existing board with a move applied
        Board.from_cells([[None] * 3] * 3)  position without history

    Cells are indexed cells[y][x] and hold None (empty), 0 or 1. A Board never
    changes after construction; every move produces a new Board whose parent
    is the previous one.
    """

    __slots__ = ("_size", "_cells", "_current_player", "_last_move", "_turn", "_parent", "_flags")

    def __init__(self, size=3):
        _check_size(size)
        cells = tuple((None,) * size for _ in range(size))
        self._setup(size, cells, current_player=None, last_move=None, turn=0, parent=None)

    @classmethod
    def _build(cls, size, cells, current_player, last_move, turn, parent):
        board = cls.__new__(cls)
        board._setup(size, cells, current_player, last_move, turn, parent)
        return board

    def _setup(self, size, cells, current_player, last_move, turn, parent):
        self._size = size
        self._cells = cells
        self._current_player = current_player
        self._last_move = last_move
        self._turn = turn
        self._parent = parent
        self._flags = compute_flags(cells)

    @classmethod
    def from_cells(cls, grid):
        """Build a mid-game position from a raw grid; history is unknown."""
        size = len(grid)
        _check_size(size)
        for row in grid:
            if not isinstance(row, (list, tuple)) or len(row) != size:
                raise NotSquare("Board is not square")
        values = [v for row in grid for v in row]
        if not all(_valid_cell(v) for v in values):
            raise InvalidCellValue("Board must contain only None, 0, or 1 in all positions")

        count_0 = values.count(0)
        count_1 = values.count(1)
        if not (count_0 == count_1 or count_0 == count_1 + 1):
            raise UnbalancedMoves(f"Moves are not balanced ({count_0} X, {count_1} O)")

        turn = count_0 + count_1
        if turn == 0:
            current_player = None
        else:
            current_player = 0 if turn % 2 == 1 else 1
        cells = tuple(tuple(row) for row in grid)
        return cls._build(size, cells, current_player, last_move=None, turn=turn, parent=None)

    # --- Read accessors ---

    @property
    def size(self):
        return self._size

    @property
    def cells(self):
        return self._cells

    @property
    def current_player(self):
        return self._current_player

    @property
    def last_move(self):
        return self._last_move

    @property
    def turn(self):
        return self._turn

    @property
    def parent(self):
        return self._parent

    @property
    def flags(self):
        return self._flags

    @property
    def game_over(self):
        return self._flags.full or self._flags.winner is not None

    @property
    def next_player(self):
        return 0 if self._current_player is None else 1 - self._current_player

    # --- Moves ---

    def apply_move(self, move):
        """Return a new Board with the next player's mark at move index `move`."""
        if self.game_over:
            raise GameAlreadyOver("Cannot continue finished game")
        x, y = self.position_to_xy(move)
        if self._cells[y][x] is not None:
            raise PositionOccupied(f"Position {move} unavailable")

        player = self.next_player
        row = list(self._cells[y])
        row[x] = player
        cells = self._cells[:y] + (tuple(row),) + self._cells[y + 1:]
        return Board._build(self._size, cells, player, (x, y), self._turn + 1, self)

    def position_available(self, move):
        x, y = self.position_to_xy(move)
        return self._cells[y][x] is None

    def available_positions(self):
        size = self._size
        return [
            xy_to_position(x, y, size)
            for y in range(size)
            for x in range(size)
            if self._cells[y][x] is None
        ]

    def position_to_xy(self, move):
        if isinstance(move, bool) or not isinstance(move, int) or not 1 <= move <= self._size * self._size:
            raise InvalidPosition(f"Position {move!r} outside 1-{self._size * self._size}")
        return position_to_xy(move, self._size)

    def xy_to_position(self, x, y):
        return xy_to_position(x, y, self._size)

    def history(self):
        """Return every board from the start of the recorded game up to this one."""
        boards = []
        board = self
        while board is not None:
            boards.append(board)
            board = board.parent
        boards.reverse()
        return boards

    # --- Value semantics ---

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __hash__(self):
        return hash((self._size, self._cells))

    def __repr__(self):
        return f"Board(size={self._size}, turn={self._turn}, last_move={self._last_move})"
