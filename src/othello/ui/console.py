"""
Console presentation layer for Othello.

Draws the board, turn status and score from an OthelloGame and forwards
selected cells back into the engine. Holds no game state of its own beyond
the engine instance, which is replaced wholesale on reset.
"""
import sys
import logging
from typing import Callable, Optional, TextIO, Tuple, Union

from ..config import Config, get_default_config
from ..game import Board, OthelloGame

logger = logging.getLogger(__name__)

# Parsed command: a cell selection, or one of "reset" / "quit"
Command = Union[Tuple[int, int], str]


class OthelloUI:
    """Text UI bound to a single OthelloGame."""

    def __init__(self, config: Optional[Config] = None, stream: Optional[TextIO] = None):
        """
        Initialize the UI.

        Args:
            config: Configuration object (default: get_default_config())
            stream: Where frames are written (default: sys.stdout)
        """
        self.config = config or get_default_config()
        self.stream = stream if stream is not None else sys.stdout
        self.game = OthelloGame()

    def reset_game(self) -> str:
        """Discard the current game, start a new one and redraw."""
        self.game = OthelloGame()
        logger.info("Game reset")
        return self.render()

    def render(self) -> str:
        """Draw the full frame and return it."""
        frame = "\n".join([self.render_board(), self.render_status(), self.render_score()])
        self.stream.write(frame + "\n")
        return frame

    def render_board(self) -> str:
        ui = self.config.ui
        board = self.game.get_board()
        player = self.game.get_current_player()

        lines = ["  " + " ".join(str(x) for x in range(Board.SIZE))]
        for y in range(Board.SIZE):
            cells = []
            for x in range(Board.SIZE):
                if board[y, x] == Board.BLACK:
                    cells.append(ui.black_symbol)
                elif board[y, x] == Board.WHITE:
                    cells.append(ui.white_symbol)
                elif ui.show_valid_moves and self.game.is_valid_move(x, y, player):
                    cells.append(ui.hint_symbol)
                else:
                    cells.append(ui.empty_symbol)
            lines.append(f"{y} " + " ".join(cells))
        return "\n".join(lines)

    def render_status(self) -> str:
        if self.game.is_game_over():
            winner = self.game.get_winner()
            if winner == Board.BLACK:
                return "Black wins!"
            elif winner == Board.WHITE:
                return "White wins!"
            return "Draw!"

        if self.game.get_current_player() == Board.BLACK:
            return "Black to move"
        return "White to move"

    def render_score(self) -> str:
        score = self.game.get_score()
        return f"Black: {score.black}  White: {score.white}"

    def handle_cell_click(self, x: int, y: int) -> bool:
        """
        Try to place a stone for the current player at (x, y).

        Returns:
            bool: True if the stone was placed and the board redrawn
        """
        if not (0 <= x < Board.SIZE and 0 <= y < Board.SIZE):
            logger.debug("Rejected off-board cell (%d, %d)", x, y)
            return False

        if not self.game.place_stone(x, y):
            logger.debug("Rejected illegal move (%d, %d)", x, y)
            return False

        self.render()
        return True

    @staticmethod
    def parse_command(text: str) -> Command:
        """
        Parse one line of input.

        Accepts "x y", "x,y", "reset" and "quit".

        Raises:
            ValueError: If the line is not a recognised command
        """
        text = text.strip().lower()
        if text in ("reset", "quit"):
            return text

        parts = text.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Expected 'x y', 'reset' or 'quit', got {text!r}")
        return int(parts[0]), int(parts[1])

    def run(self, input_fn: Callable[[str], str] = input) -> None:
        """Read commands until quit or end of input."""
        self.render()
        while True:
            try:
                line = input_fn("> ")
            except EOFError:
                break

            try:
                command = self.parse_command(line)
            except ValueError as e:
                logger.debug("Bad input: %s", e)
                self.stream.write(f"{e}\n")
                continue

            if command == "quit":
                break
            elif command == "reset":
                self.reset_game()
            elif not self.handle_cell_click(*command):
                self.stream.write("Invalid move\n")
