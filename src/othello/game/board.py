"""
Board module for Othello.
Holds the 8x8 grid and the directional bracket walk used for move validation.
"""
from typing import List, Tuple
import numpy as np

class Board:
    """
    Represents the Othello board as an 8x8 numpy array indexed [y, x].
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Cell constants
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    # Directions as (dx, dy): N, NE, E, SE, S, SW, W, NW
    DIRECTIONS = (
        (0, -1), (1, -1), (1, 0), (1, 1),
        (0, 1), (-1, 1), (-1, 0), (-1, -1)
    )

    def __init__(self, size: int = 8):
        """Initialize a board with the standard four center stones."""
        if size != 8:
            raise ValueError("Only 8x8 board is supported")

        self.size = size
        self._grid = np.zeros((size, size), dtype=np.int8)

        mid = size // 2
        self._grid[mid - 1, mid - 1] = self.WHITE
        self._grid[mid, mid] = self.WHITE
        self._grid[mid - 1, mid] = self.BLACK
        self._grid[mid, mid - 1] = self.BLACK

    @staticmethod
    def opponent(player: int) -> int:
        """Return the other colour."""
        return 3 - player

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.SIZE and 0 <= y < self.SIZE

    def get(self, x: int, y: int) -> int:
        return int(self._grid[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        self._grid[y, x] = value

    def bracketed(self, x: int, y: int, dx: int, dy: int, player: int) -> List[Tuple[int, int]]:
        """
        Get the opponent stones a stone of `player` at (x, y) would capture
        in direction (dx, dy).

        Args:
            x: Column of the placed stone
            y: Row of the placed stone
            dx: Column step
            dy: Row step
            player: Colour of the placed stone

        Returns:
            List of (x, y) cells in the run, empty if the run is not closed
            by one of `player`'s stones
        """
        opponent = self.opponent(player)
        run = []
        nx, ny = x + dx, y + dy

        while self.in_bounds(nx, ny) and self._grid[ny, nx] == opponent:
            run.append((nx, ny))
            nx += dx
            ny += dy

        if run and self.in_bounds(nx, ny) and self._grid[ny, nx] == player:
            return run
        return []

    def count(self, player: int) -> int:
        """Count the cells holding `player`."""
        return int(np.count_nonzero(self._grid == player))

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board._grid = self._grid.copy()
        return new_board

    def to_array(self) -> np.ndarray:
        """
        Get the board state as a numpy array.

        Returns:
            Copy of the 2D grid, indexed [y, x]
        """
        return self._grid.copy()

    def __str__(self) -> str:
        symbols = {self.EMPTY: '.', self.BLACK: 'B', self.WHITE: 'W'}
        rows = []
        for y in range(self.SIZE):
            rows.append(' '.join(symbols[int(v)] for v in self._grid[y]))
        return "\n".join(rows)
