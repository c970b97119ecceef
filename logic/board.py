"""
Board model for terminal tic-tac-toe.
Stores the 3x3 grid and answers every question the game loop and the AI ask about it.

Spaces are numbered 1-9, left to right and top to bottom:

     1 | 2 | 3
     4 | 5 | 6
     7 | 8 | 9
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from .win_checker import (
    EMPTY,
    PLAYER_ONE,
    PLAYER_TWO,
    Outcome,
    TerminalState,
    WinChecker,
)

# Heuristic scores for terminal boards (player 2 is the positive side)
DRAW_SCORE = -500_000
PLAYER_ONE_WIN_SCORE = -1_000_000
PLAYER_TWO_WIN_SCORE = 1_000_000

_WIN_CHECKER = WinChecker()


def row_spaces(row: int) -> Tuple[int, int, int]:
    """Get the three spaces in the given row (0-2)."""
    first = 3 * row + 1
    return (first, first + 1, first + 2)


def coords_to_space(row: int, col: int) -> int:
    """Convert (row, col) matrix coordinates to a space (1-9)."""
    return row_spaces(row)[col]


def space_to_coords(space: int) -> Tuple[int, int]:
    """Convert a space (1-9) to (row, col) matrix coordinates."""
    if space % 3 == 0:
        return (space // 3) - 1, 2
    elif (space + 1) % 3 == 0:
        return ((space + 1) // 3) - 1, 1
    else:
        return ((space + 2) // 3) - 1, 0


def opponent(player: int) -> int:
    """Get the other player's mark."""
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


def outcome_score(outcome: Outcome) -> int:
    """Score an outcome from player two's point of view."""
    if outcome is Outcome.DRAW:
        return DRAW_SCORE
    elif outcome is Outcome.PLAYER_ONE_WINS:
        return PLAYER_ONE_WIN_SCORE
    elif outcome is Outcome.PLAYER_TWO_WINS:
        return PLAYER_TWO_WIN_SCORE
    return 0


@dataclass(eq=False)
class Board:
    """
    A 3x3 tic-tac-toe board.

    The board does not validate moves: callers must only pass spaces
    that are in range and still open.
    """

    # 0 = empty, 1 = player one (X), 2 = player two (O)
    cells: np.ndarray = field(
        default_factory=lambda: np.zeros((3, 3), dtype=np.int8)
    )

    # Mark written by the next set_space call (0 until the game starts)
    active_player: int = EMPTY

    def set_space(self, space: int) -> None:
        """Mark the given space with the active player's number."""
        row, col = space_to_coords(space)
        self.cells[row, col] = self.active_player

    def mark_at(self, space: int) -> int:
        """Get the mark in the given space."""
        row, col = space_to_coords(space)
        return int(self.cells[row, col])

    def open_spaces(self) -> List[int]:
        """Get the free spaces in ascending order."""
        return [int(i) + 1 for i in np.flatnonzero(self.cells == EMPTY)]

    def space_taken(self, space: int) -> bool:
        return self.mark_at(space) != EMPTY

    def is_full(self) -> bool:
        return bool(np.all(self.cells != EMPTY))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def is_terminal(self) -> TerminalState:
        """
        Check whether the game is over.

        Returns:
            TerminalState. For a win, `line` holds the three winning
            spaces; for a draw or an unfinished game it is empty.
        """
        return _WIN_CHECKER.evaluate(self.cells.tolist())

    def heuristic(self) -> int:
        """Score the board from player two's point of view."""
        return outcome_score(self.is_terminal().outcome)

    def get_children(self) -> List[Tuple[int, "Board"]]:
        """
        Get every board reachable with one move by the active player.

        Returns:
            List of (space, child) pairs in ascending space order. Each child
            is an independent copy whose active player is the opponent.
        """
        children = []
        for space in self.open_spaces():
            child = self.copy()
            child.set_space(space)
            child.active_player = opponent(self.active_player)
            children.append((space, child))
        return children

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(cells=self.cells.copy(), active_player=self.active_player)
