"""
Win checker for terminal tic-tac-toe.
Finds three-in-a-row lines and classifies a board as won, drawn or in progress.
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

# Cell values
EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2


class Outcome(Enum):
    """The state of a game. Values follow the 0/1/2 cell encoding."""
    IN_PROGRESS = -1
    DRAW = 0
    PLAYER_ONE_WINS = 1
    PLAYER_TWO_WINS = 2

    @property
    def winner(self) -> Optional[int]:
        """The winning player's mark, or None if nobody has won."""
        if self in (Outcome.PLAYER_ONE_WINS, Outcome.PLAYER_TWO_WINS):
            return self.value
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.IN_PROGRESS


class TerminalState(NamedTuple):
    """Result of checking a board: the outcome and the winning spaces (if any)."""
    outcome: Outcome
    line: Tuple[int, ...] = ()


IN_PROGRESS = TerminalState(Outcome.IN_PROGRESS)
DRAW = TerminalState(Outcome.DRAW)


class WinChecker:
    """
    Checks for win conditions in tic-tac-toe.

    Lines are scanned in a fixed order: row i and column i together for
    i = 0..2 (row first), then the main diagonal, then the anti-diagonal.
    Only the first line found is reported.
    """

    # Winning diagonals as ((row, col) cells, reported spaces)
    MAIN_DIAGONAL = (((0, 0), (1, 1), (2, 2)), (1, 5, 9))
    ANTI_DIAGONAL = (((2, 0), (1, 1), (0, 2)), (7, 5, 3))

    def find_line(
        self,
        rows: Sequence[Sequence[int]]
    ) -> Optional[Tuple[int, Tuple[int, int, int]]]:
        """
        Find the first three-in-a-row on the grid.

        Args:
            rows: The 3x3 grid as nested sequences of cell values.

        Returns:
            (player, spaces) for the winning line, or None.
        """
        for i in range(3):
            row = rows[i]
            if row[0] == row[1] == row[2] != EMPTY:
                first = 3 * i + 1
                return row[0], (first, first + 1, first + 2)

            if rows[0][i] == rows[1][i] == rows[2][i] != EMPTY:
                first = i + 1
                return rows[0][i], (first, first + 3, first + 6)

        for cells, spaces in (self.MAIN_DIAGONAL, self.ANTI_DIAGONAL):
            (r0, c0), (r1, c1), (r2, c2) = cells
            if rows[r0][c0] == rows[r1][c1] == rows[r2][c2] != EMPTY:
                return rows[r0][c0], spaces

        return None

    def evaluate(self, rows: List[List[int]]) -> TerminalState:
        """
        Classify the grid.

        Args:
            rows: The 3x3 grid as nested lists of cell values.

        Returns:
            TerminalState with the outcome and, for a win, the winning spaces.
        """
        found = self.find_line(rows)

        if found is not None:
            player, line = found
            return TerminalState(Outcome(int(player)), line)

        if all(cell != EMPTY for row in rows for cell in row):
            return DRAW

        return IN_PROGRESS
