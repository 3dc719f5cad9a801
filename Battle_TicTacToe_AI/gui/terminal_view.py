"""ANSI terminal renderer for boards and whole games."""

import sys

from ..Board import PIECES


class TerminalView:
    # --- Constants ---
    DIM = "\033[2m"
    BOLD = "\033[1m"
    REVERSE = "\033[7m"
    RESET = "\033[0m"

    def __init__(self, compact=False, stream=None, color=True):
        self.compact = compact
        self.stream = stream if stream is not None else sys.stdout
        self.color = color

    def _write(self, line=""):
        self.stream.write(line + "\n")

    def _style(self, text, *codes):
        if not self.color:
            return text
        return "".join(codes) + text + self.RESET

    def _cell(self, text, inner):
        text = str(text).rjust(inner)
        return text if self.compact else f" {text} "

    def render(self, board):
        """Draw the grid: open cells show their position number, winning marks are highlighted."""
        size = board.size
        inner = 1 if size == 3 else 2
        width = inner if self.compact else inner + 2
        hsep = "+" + ("-" * width + "+") * size
        hblank = "|" + (" " * width + "|") * size
        win_positions = set(board.flags.win_positions)

        for y in range(size):
            self._write(hsep)
            if not self.compact:
                self._write(hblank)
            hline = "|"
            for x in range(size):
                mark = board.cells[y][x]
                if mark is None:
                    hline += self._style(self._cell(board.xy_to_position(x, y), inner), self.DIM)
                elif (x, y) in win_positions:
                    hline += self._style(self._cell(PIECES[mark], inner), self.REVERSE, self.BOLD)
                else:
                    hline += self._style(self._cell(PIECES[mark], inner), self.BOLD)
                hline += "|"
            self._write(hline)
            if not self.compact:
                self._write(hblank)
        self._write(hsep)

    def render_game(self, board):
        """Draw every board from the start of the recorded game."""
        for i, step in enumerate(board.history()):
            if i and not self.compact:
                self._write()
            self._write("Start" if step.turn == 0 else f"Turn {step.turn}")
            self.render(step)
