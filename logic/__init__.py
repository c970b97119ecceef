"""
Logic module for terminal tic-tac-toe.
Handles the board, rules, and the players (human, random and minimax).
"""

from .win_checker import EMPTY, PLAYER_ONE, PLAYER_TWO, Outcome, TerminalState, WinChecker
from .board import Board, coords_to_space, space_to_coords, opponent
from .move_validator import MoveValidator, ValidationResult
from .players import Player, HumanPlayer, RandomPlayer
from .ai_player import MinimaxPlayer
