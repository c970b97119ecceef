"""
Game configuration for terminal tic-tac-toe.
Modes, search depths, texts and colors.
"""

from colorama import Fore, Style


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the opponents or the look of the board.
    """

    # ==================== AI SETTINGS ====================
    # Plies searched by the minimax AI (8 is full strength from move one)
    HARD_DEPTH = 8
    # Weaker minimax used as the second player in simulation mode
    SIM_WEAK_DEPTH = 4

    # ==================== MODES ====================
    # mode -> (player 1, player 2); each player is (kind, search depth)
    MODES = {
        "easy": (("human", None), ("random", None)),
        "hard": (("human", None), ("minimax", HARD_DEPTH)),
        "2p": (("human", None), ("human", None)),
        "sim": (("minimax", HARD_DEPTH), ("minimax", SIM_WEAK_DEPTH)),
    }
    DEFAULT_MODE = "hard"

    # ==================== TEXT ====================
    TITLE = "Tic-Tac-Toe"
    PROMPT = "Enter space (1-9)"
    MARKS = {1: "X", 2: "O"}
    WIN_MESSAGE = "Player {player} wins!"
    DRAW_MESSAGE = "Draw."
    QUIT_MESSAGE = "Quitters never win."

    # ==================== COLORS ====================
    EMPTY_COLOR = Fore.LIGHTBLACK_EX   # space numbers on empty cells
    WIN_COLOR = Fore.GREEN             # marks on the winning line
    ERROR_COLOR = Fore.RED             # input error messages
    BOLD = Style.BRIGHT
