"""
Terminal UI for tic-tac-toe.

Shows:
- The board, with space numbers on empty cells
- The winning line in green when the game ends
- The input prompt and input errors
"""

import sys
from typing import Callable, Iterable, Optional, TextIO

from colorama import Cursor, Style
from colorama.ansi import clear_screen

from config import GameConfig
from logic.board import Board, row_spaces
from logic.win_checker import EMPTY, TerminalState

BORDER = "|---|---|---|"


class TerminalUI:
    """
    Draws the game on a text stream.

    With `redraw` on, each frame is drawn over the previous one by moving
    the cursor back up, so the board stays in one place on screen.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        color: bool = True,
        redraw: bool = True,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the UI.

        Args:
            stream: Where to draw (default: stdout).
            color: Use ANSI colors and bold text.
            redraw: Overwrite the previous frame instead of scrolling.
            input_func: Reads one line, given a prompt (default: input).
        """
        self.stream = stream or sys.stdout
        self.color = color
        self.redraw = redraw
        self.input_func = input_func or input

        # Lines drawn since the last clear
        self._lines_written = 0

    def _style(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + Style.RESET_ALL

    def _write(self, text: str = "") -> None:
        print(text, file=self.stream)
        self._lines_written += text.count("\n") + 1

    def _cell(self, board: Board, space: int, highlighted: bool) -> str:
        mark = board.mark_at(space)

        if mark == EMPTY:
            return self._style(str(space), GameConfig.EMPTY_COLOR)

        letter = GameConfig.MARKS[mark]
        if highlighted:
            return self._style(letter, GameConfig.BOLD, GameConfig.WIN_COLOR)
        return self._style(letter, GameConfig.BOLD)

    def render_board(self, board: Board, highlight: Iterable[int] = ()) -> str:
        """
        Render the board as text.

        Args:
            board: Board to draw. It is only read.
            highlight: Spaces to draw in the win color.

        Returns:
            The board as a multi-line string.
        """
        highlight = set(highlight)
        lines = [BORDER]

        for row in range(3):
            cells = [self._cell(board, space, space in highlight) for space in row_spaces(row)]
            lines.append("| " + " | ".join(cells) + " |")
            lines.append(BORDER)

        return "\n".join(lines)

    def show_title(self) -> None:
        self._write(self._style(f"~{GameConfig.TITLE}~", GameConfig.BOLD))
        self._write()

    def show_board(self, board: Board, highlight: Iterable[int] = ()) -> None:
        """Draw the title and the board."""
        self._write()
        self.show_title()
        self._write(self.render_board(board, highlight))

    def clear_frame(self) -> None:
        """Erase everything drawn since the last clear (redraw mode only)."""
        if self.redraw and self._lines_written:
            self.stream.write(Cursor.UP(self._lines_written) + clear_screen(0))
            self.stream.flush()
        self._lines_written = 0

    def show_win(self, board: Board, state: TerminalState) -> None:
        self.show_board(board, highlight=state.line)
        self._write()
        self._write(GameConfig.WIN_MESSAGE.format(player=state.outcome.winner))
        self._write()

    def show_draw(self, board: Board) -> None:
        self.show_board(board)
        self._write()
        self._write(GameConfig.DRAW_MESSAGE)
        self._write()

    def show_quit(self) -> None:
        self._write()
        self._write()
        self._write(GameConfig.QUIT_MESSAGE)
        self._write()

    def read_space(self, board: Board, error_message: Optional[str] = None) -> str:
        """
        Prompt for a space and read one line.

        Args:
            board: Current board (its active player picks the prompt mark).
            error_message: Why the previous input was rejected, if it was.

        Returns:
            The raw line typed by the user.
        """
        prompt = self._style(GameConfig.PROMPT, GameConfig.BOLD)

        if error_message is None:
            self._write()
            self._write(prompt)
        else:
            if self.redraw:
                # Rewrite the prompt line and drop the rejected input
                self.stream.write(Cursor.UP(2))
                self._lines_written -= 2
            error = self._style(error_message, GameConfig.BOLD, GameConfig.ERROR_COLOR)
            self._write(f"{prompt} {error}" + (clear_screen(0) if self.redraw else ""))

        self.stream.flush()
        mark = GameConfig.MARKS.get(board.active_player, "?")
        line = self.input_func(f"{mark}> ")
        self._lines_written += 1
        return line
