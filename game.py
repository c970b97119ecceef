"""
Game loop for terminal tic-tac-toe.

Each round:
1. Player 1 (X) picks a space
2. If the game isn't over, player 2 (O) picks a space
3. Check for a winner or a draw, and stop if there is one
"""

import logging
from typing import Optional

from logic.board import Board
from logic.players import Player
from logic.win_checker import PLAYER_ONE, PLAYER_TWO, TerminalState
from ui import TerminalUI

logger = logging.getLogger(__name__)


class Game:
    """
    One match between two players.

    Without a UI the match runs silently (used for simulations and tests).
    """

    def __init__(self, player1: Player, player2: Player, ui: Optional[TerminalUI] = None):
        """
        Initialize the game.

        Args:
            player1: Plays X and moves first.
            player2: Plays O.
            ui: Where to draw the board, or None for no output.
        """
        self.players = {PLAYER_ONE: player1, PLAYER_TWO: player2}
        self.ui = ui
        self.board = Board()

    def _take_turn(self, player: int) -> None:
        """Let one player pick a space and mark it."""
        self.board.active_player = player
        space = self.players[player].choose_space(self.board)
        self.board.set_space(space)
        logger.debug("Player %d took space %d", player, space)

    def play(self) -> TerminalState:
        """
        Play until someone wins or the board is full.

        Returns:
            The final TerminalState.
        """
        while True:
            if self.ui:
                self.ui.show_board(self.board)

            self._take_turn(PLAYER_ONE)

            # Redraw after the first move in case this is a 2 player game
            if self.ui:
                self.ui.clear_frame()
                self.ui.show_board(self.board)

            if not self.board.is_terminal().outcome.is_over:
                self._take_turn(PLAYER_TWO)

            if self.ui:
                self.ui.clear_frame()

            state = self.board.is_terminal()

            if state.outcome.is_over:
                logger.info("Game over: %s %s", state.outcome.name, list(state.line))
                self._show_result(state)
                return state

    def _show_result(self, state: TerminalState) -> None:
        if not self.ui:
            return

        if state.outcome.winner is not None:
            self.ui.show_win(self.board, state)
        else:
            self.ui.show_draw(self.board)
