"""Abstract player interface for human, scripted, or engine controllers."""


class Player:
    def __init__(self, player):
        self.player = player

    def next_move(self, board):
        """Return the position index (1-based) of the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, player, read=input, write=print):
        super().__init__(player)
        self.read = read
        self.write = write

    def next_move(self, board):
        """Text-input player; re-prompts until the position is open."""
        span = board.size * board.size
        prompt = f"Enter move (1-{span}): "
        while True:
            raw = self.read(prompt).strip()
            try:
                move = int(raw)
            except ValueError:
                self.write(f"Invalid input {raw!r}; expected a number")
                continue
            if not 1 <= move <= span:
                self.write(f"Position {move} is off the board")
            elif not board.position_available(move):
                self.write(f"Position {move} is taken")
            else:
                return move


class ScriptedPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, player, moves):
        super().__init__(player)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        move = self._moves[self._idx]
        self._idx += 1
        return move
