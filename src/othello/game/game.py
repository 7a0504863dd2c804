"""
Othello game module.
Handles turn flow, captures and end-of-game state.
"""
import logging
from typing import List, NamedTuple, Optional, Tuple
import numpy as np
from .board import Board

logger = logging.getLogger(__name__)


class Score(NamedTuple):
    """Stone counts for both colours."""
    black: int
    white: int


class OthelloGame:
    """
    Main game class for Othello that owns the board and the turn order.
    A game is only ever mutated through place_stone().
    """

    def __init__(self):
        """Initialize a new game with the standard opening layout."""
        self.board = Board()
        self.current_player = Board.BLACK  # Black moves first
        self.stones_placed = 4

    def get_board(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 8x8 grid indexed [y, x]
        """
        return self.board.to_array()

    def get_current_player(self) -> int:
        """
        Get the current player.

        Returns:
            int: Board.BLACK or Board.WHITE
        """
        return self.current_player

    def get_score(self) -> Score:
        """
        Get the current score.

        Returns:
            Score named tuple of (black, white)
        """
        return Score(self.board.count(Board.BLACK), self.board.count(Board.WHITE))

    def get_winner(self) -> int:
        """
        Get the winner of the game.

        Returns:
            int: Board.BLACK or Board.WHITE, Board.EMPTY for a draw or
            while the game is still running
        """
        if not self.is_game_over():
            return Board.EMPTY

        black, white = self.get_score()
        if black > white:
            return Board.BLACK
        elif white > black:
            return Board.WHITE
        return Board.EMPTY

    def is_game_over(self) -> bool:
        """Check if the board is full or neither player can move."""
        if self.stones_placed >= Board.BOARD_SIZE:
            return True
        return not self.has_valid_move(Board.BLACK) and not self.has_valid_move(Board.WHITE)

    def has_valid_move(self, player: int) -> bool:
        """Check if the player has any valid move."""
        for y in range(Board.SIZE):
            for x in range(Board.SIZE):
                if self.is_valid_move(x, y, player):
                    return True
        return False

    def get_valid_moves(self, player: Optional[int] = None) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the given player.

        Args:
            player: The player to get valid moves for. If None, uses current player.

        Returns:
            List of (x, y) tuples in row-major order
        """
        if player is None:
            player = self.current_player

        return [(x, y)
                for y in range(Board.SIZE)
                for x in range(Board.SIZE)
                if self.is_valid_move(x, y, player)]

    def is_valid_move(self, x: int, y: int, player: int) -> bool:
        """
        Check if placing a stone of `player` at (x, y) brackets at least one
        opponent stone. Coordinates must already be on the board.
        """
        if self.board.get(x, y) != Board.EMPTY:
            return False

        for dx, dy in Board.DIRECTIONS:
            if self.board.bracketed(x, y, dx, dy, player):
                return True
        return False

    def place_stone(self, x: int, y: int) -> bool:
        """
        Place a stone for the current player and flip captured stones.

        Args:
            x: Column of the move (0-based)
            y: Row of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        player = self.current_player
        if not self.is_valid_move(x, y, player):
            return False

        # Collect every run before writing so each direction sees the same board
        flips = []
        for dx, dy in Board.DIRECTIONS:
            flips.extend(self.board.bracketed(x, y, dx, dy, player))

        self.board.set(x, y, player)
        self.stones_placed += 1
        for fx, fy in flips:
            self.board.set(fx, fy, player)

        logger.debug("Player %d placed at (%d, %d), flipped %d", player, x, y, len(flips))

        self.current_player = Board.opponent(player)

        # Forced pass
        if not self.has_valid_move(self.current_player):
            logger.debug("Player %d has no valid move, passing", self.current_player)
            self.current_player = Board.opponent(self.current_player)

        if logger.isEnabledFor(logging.DEBUG) and self.is_game_over():
            logger.debug("Game over, score %s", self.get_score())

        return True

    def __str__(self) -> str:
        """String representation of the game state."""
        status = [str(self.board)]
        status.append(f"Current player: {'Black' if self.current_player == Board.BLACK else 'White'}")

        black, white = self.get_score()
        status.append(f"Score - Black: {black}, White: {white}")

        if self.is_game_over():
            winner = self.get_winner()
            if winner == Board.EMPTY:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {'Black' if winner == Board.BLACK else 'White'} wins!")

        return "\n".join(status)
