"""CLI options for selecting players, board size, seeded positions, and config paths."""

import argparse


MODES = ["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"]


def parse_move_list(text):
    """Parse '5,1,2' (commas and/or spaces) into [5, 1, 2]."""
    try:
        return [int(tok) for tok in text.replace(",", " ").split()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid move list {text!r}; expected integers like 5,1,2") from exc


def build_parser():
    parser = argparse.ArgumentParser(description="Battle TicTacToe AI (N-in-a-row, 3x3 to 5x5)")
    parser.add_argument("--board-size", type=int, help="Board size (3, 4 or 5)")
    parser.add_argument("--mode", choices=MODES, help="Play mode (who plays X/O)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--moves", type=parse_move_list, default=None, help="Moves to play before handing over, e.g. 5,1,2")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the engine's random tie-breaking")
    parser.add_argument(
        "--cache",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Memoise subtree stats in a transposition table (same results, faster)",
    )
    parser.add_argument("--compact", action="store_true", default=None, help="Draw compact boards")
    parser.add_argument("--replay", action="store_true", help="Print the whole game when it ends")
    parser.add_argument("--suggest", action="store_true", help="Print the suggested move for the seeded position and exit")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG shows search stats and tier decisions)")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)
