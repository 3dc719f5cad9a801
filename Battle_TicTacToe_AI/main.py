"""Entry point for Battle TicTacToe AI matches. Load config, wire players, start TicTacToegame."""

from pathlib import Path

import yaml

from Battle_TicTacToe_AI.Board import Board, BoardError, PIECES
from Battle_TicTacToe_AI.EnginePlayer import EnginePlayer
from Battle_TicTacToe_AI.Player import HumanPlayer
from Battle_TicTacToe_AI.TicTacToegame import TicTacToegame
from Battle_TicTacToe_AI.gui.terminal_view import TerminalView
from Battle_TicTacToe_AI.utils.cli import MODES, build_parser
from Battle_TicTacToe_AI.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Battle_TicTacToe_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def pick(value, settings, key, default):
    return value if value is not None else settings.get(key, default)


def seed_board(board_size, moves):
    board = Board(size=board_size)
    for move in moves or []:
        board = board.apply_move(move)
    return board


def build_players(mode, use_cache, seed):
    def engine(player):
        return EnginePlayer(player, use_cache=use_cache, seed=None if seed is None else seed + player)

    if mode == "ai-vs-ai":
        return engine(0), engine(1)
    if mode == "human-vs-ai":
        return HumanPlayer(0), engine(1)
    if mode == "ai-vs-human":
        return engine(0), HumanPlayer(1)
    if mode == "human-vs-human":
        return HumanPlayer(0), HumanPlayer(1)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.settings)

    board_size = pick(args.board_size, settings, "board_size", 3)
    mode = pick(args.mode, settings, "mode", "human-vs-ai")
    use_cache = pick(args.cache, settings, "use_cache", True)
    compact = pick(args.compact, settings, "compact", False)
    seed = pick(args.seed, settings, "seed", None)
    try:
        configure_logging(pick(args.log_level, settings, "log_level", "WARNING"))
    except ValueError as exc:
        parser.error(str(exc))
    if mode not in MODES:
        parser.error(f"Unsupported mode: {mode}")

    try:
        board = seed_board(board_size, args.moves)
    except BoardError as exc:
        parser.error(str(exc))

    view = TerminalView(compact=compact)

    if args.suggest:
        if board.game_over:
            parser.error("Game is already over; nothing to suggest")
        engine = EnginePlayer(board.next_player, use_cache=use_cache, seed=seed)
        move = engine.next_move(board)
        view.render(board)
        print(f"Suggested move for {PIECES[board.next_player]}: {move}")
        return 0

    player_0, player_1 = build_players(mode, use_cache, seed)
    game = TicTacToegame(
        board_size=board_size,
        player_0=player_0,
        player_1=player_1,
        logger=log_event,
        renderer=view.render,
        start=board,
    )
    final = game.play()

    if args.replay:
        view.render_game(final)

    if game.disqualified is not None:
        print(f"{PIECES[1 - game.disqualified]} wins by disqualification")
    elif final.flags.winner is not None:
        print(f"{PIECES[final.flags.winner]} wins")
    else:
        print("Draw")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
