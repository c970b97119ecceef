"""
AI player for terminal tic-tac-toe.
Uses the Minimax algorithm to choose a move.
"""

import logging
from typing import Tuple

from .board import Board, outcome_score
from .players import Player
from .win_checker import EMPTY, PLAYER_TWO, Outcome

logger = logging.getLogger(__name__)

# (space that led to the board, board)
Node = Tuple[int, Board]


class MinimaxPlayer(Player):
    """
    An AI that plays tic-tac-toe with plain fixed-depth Minimax.

    Scores are the board heuristic, so player two is always the
    maximizing side. There is no pruning: every node down to `depth`
    plies is visited.
    """

    def __init__(self, depth: int):
        """
        Initialize the AI player.

        Args:
            depth: How many plies to search (8 plays at full strength).
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        self.depth = depth

        # How many nodes the last search visited (for debugging)
        self.positions_evaluated = 0

    def choose_space(self, board: Board) -> int:
        self.positions_evaluated = 0

        root = board.copy()
        if root.active_player == EMPTY:
            root.active_player = PLAYER_TWO

        space, score = self.minimax(
            (0, root),
            self.depth,
            is_maximizing=root.active_player == PLAYER_TWO
        )

        logger.debug(
            "Minimax (depth %d) evaluated %d positions. Best move: %d (score: %s)",
            self.depth, self.positions_evaluated, space, score
        )

        return space

    def minimax(self, node: Node, depth: int, is_maximizing: bool) -> Tuple[int, float]:
        """
        Minimax search.

        Args:
            node: (space, board) to evaluate.
            depth: Plies left to search.
            is_maximizing: True if it's player two's ply.

        Returns:
            (space, score). At a leaf the space is the incoming one;
            otherwise it is the space of the best child of this node.
        """
        self.positions_evaluated += 1
        space, board = node

        state = board.is_terminal()
        if depth == 0 or state.outcome.is_over:
            return space, self._leaf_score(state.outcome, depth)

        best_space = 0

        if is_maximizing:
            best_score = float('-inf')
            for child in board.get_children():
                _, score = self.minimax(child, depth - 1, False)
                if score > best_score:
                    best_score = score
                    best_space = child[0]
        else:
            best_score = float('inf')
            for child in board.get_children():
                _, score = self.minimax(child, depth - 1, True)
                if score < best_score:
                    best_score = score
                    best_space = child[0]

        return best_space, best_score

    def _leaf_score(self, outcome: Outcome, depth: int) -> int:
        """Heuristic value, with wins pushed out by the plies left (prefer faster wins)."""
        score = outcome_score(outcome)

        if outcome is Outcome.PLAYER_TWO_WINS:
            return score + depth
        elif outcome is Outcome.PLAYER_ONE_WINS:
            return score - depth
        return score
