"""
Entry point for terminal tic-tac-toe.

Modes:
    easy   You vs. an AI that plays random moves
    hard   You vs. the minimax AI (default)
    2p     Two people at one keyboard
    sim    Minimax AI vs. a weaker minimax AI

Usage:
    python main.py                 # Play against the minimax AI
    python main.py --mode easy     # Play against the random AI
    python main.py --mode sim -v   # Watch two AIs, with debug logging
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, Tuple

import colorama
import numpy as np

from config import GameConfig
from game import Game
from logic.ai_player import MinimaxPlayer
from logic.players import HumanPlayer, LineReader, Player, RandomPlayer
from ui import TerminalUI

logger = logging.getLogger(__name__)


def build_players(
    mode: str,
    rng: Optional[np.random.Generator] = None,
    read_line: Optional[LineReader] = None
) -> Tuple[Player, Player]:
    """
    Create the two players for a mode.

    Args:
        mode: One of GameConfig.MODES.
        rng: Random generator for random players.
        read_line: Input source for human players.

    Returns:
        (player 1, player 2).
    """
    if mode not in GameConfig.MODES:
        raise ValueError(f"Invalid mode {mode!r}. Choose from: {', '.join(GameConfig.MODES)}")

    players = []
    for kind, depth in GameConfig.MODES[mode]:
        if kind == "human":
            players.append(HumanPlayer(read_line))
        elif kind == "random":
            players.append(RandomPlayer(rng))
        else:
            players.append(MinimaxPlayer(depth))

    return players[0], players[1]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe in the terminal")
    parser.add_argument(
        "-m", "--mode",
        choices=list(GameConfig.MODES),
        default=GameConfig.DEFAULT_MODE,
        help="Game mode (default: %(default)s)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random AI"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Draw without colors"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log moves and search statistics to stderr"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )
    colorama.just_fix_windows_console()

    ui = TerminalUI(color=not args.no_color)
    player1, player2 = build_players(
        args.mode,
        rng=np.random.default_rng(args.seed),
        read_line=ui.read_space
    )
    logger.debug("Starting %s game: %s vs %s", args.mode,
                 type(player1).__name__, type(player2).__name__)

    try:
        Game(player1, player2, ui).play()
    except (KeyboardInterrupt, EOFError):
        ui.show_quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
