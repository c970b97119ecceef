"""
Move validator for terminal tic-tac-toe.
Turns a raw line of user input into a space, or explains why it can't.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board

INVALID_INPUT = "Invalid input!"
NOT_A_SPACE = "That's not a space!"
SPACE_TAKEN = "That space is taken!"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    space: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates tic-tac-toe moves typed by a human.

    Rules:
    1. Input must be a whole number
    2. The number must be a space (1-9)
    3. The space must be empty
    """

    def validate_input(self, board: Board, raw: str) -> ValidationResult:
        """
        Validate a line of input.

        Args:
            board: Current board.
            raw: Text entered by the user.

        Returns:
            ValidationResult with the parsed space or an error message.
        """
        try:
            space = int(raw.strip())
        except ValueError:
            return ValidationResult(is_valid=False, error_message=INVALID_INPUT)

        return self.validate_space(board, space)

    def validate_space(self, board: Board, space: int) -> ValidationResult:
        """Validate an already-parsed space number."""
        if not 1 <= space <= 9:
            return ValidationResult(is_valid=False, error_message=NOT_A_SPACE)

        if board.space_taken(space):
            return ValidationResult(is_valid=False, error_message=SPACE_TAKEN)

        return ValidationResult(is_valid=True, space=space)
