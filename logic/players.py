"""
Players for terminal tic-tac-toe.
A player is anything that can pick an open space on a board.
"""

import logging
from typing import Callable, Optional

import numpy as np

from config import GameConfig

from .board import Board
from .move_validator import MoveValidator

logger = logging.getLogger(__name__)

# read_line(board, error_message) -> raw text typed by the user
LineReader = Callable[[Board, Optional[str]], str]


class Player:
    """Base class for the three kinds of player."""

    def choose_space(self, board: Board) -> int:
        """
        Choose a space for the board's active player.

        Args:
            board: Current board. Must not be modified.

        Returns:
            A space (1-9) that is open on the board.
        """
        raise NotImplementedError


def _plain_read_line(board: Board, error_message: Optional[str] = None) -> str:
    if error_message:
        print(error_message)
    return input(f"{GameConfig.PROMPT}: ")


class HumanPlayer(Player):
    """
    A person at the keyboard.

    Keeps asking until the input names an open space. Bad input is never
    an error, the user is just asked again with the reason.
    """

    def __init__(self, read_line: Optional[LineReader] = None):
        """
        Initialize the human player.

        Args:
            read_line: Called with (board, error_message) to get one line
                of input. Defaults to a plain input() prompt.
        """
        self.read_line = read_line or _plain_read_line
        self.validator = MoveValidator()

    def choose_space(self, board: Board) -> int:
        error_message = None
        while True:
            raw = self.read_line(board, error_message)
            result = self.validator.validate_input(board, raw)
            if result.is_valid:
                return result.space
            logger.debug("Rejected input %r: %s", raw, result.error_message)
            error_message = result.error_message


class RandomPlayer(Player):
    """Picks any open space with equal probability."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose_space(self, board: Board) -> int:
        # Raises ValueError on a full board
        return int(self.rng.choice(board.open_spaces()))
