"""
Board module for Othello.
Handles the board state, move validation and capture resolution.
"""
import logging
import sys
from numbers import Integral
from typing import List, Optional, Sequence, TextIO, Tuple

import numpy as np

from .config import Config, get_default_config
from .errors import InvalidMove, OutOfBounds
from .piece import BLACK, WHITE, Piece, validate_color

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

# Compass offsets, clockwise starting from east
DIRECTIONS: Tuple[Position, ...] = (
    (0, 1), (1, 1), (1, 0),
    (1, -1), (0, -1), (-1, -1),
    (-1, 0), (-1, 1),
)

DRAW = "draw"


def _make_grid() -> List[List[Optional[Piece]]]:
    """Build an 8x8 grid with the four starting pieces in the center."""
    grid: List[List[Optional[Piece]]] = [[None] * Board.SIZE for _ in range(Board.SIZE)]

    grid[3][3] = Piece(WHITE)
    grid[3][4] = Piece(BLACK)
    grid[4][3] = Piece(BLACK)
    grid[4][4] = Piece(WHITE)

    return grid


class Board:
    """
    Represents the Othello board as an 8x8 grid of optional pieces.
    The board owns every piece on it; pieces are only ever flipped, never removed.
    """

    SIZE = 8
    DIRS = DIRECTIONS

    # Encoding used by get_board_state
    EMPTY = 0
    BLACK_CELL = 1
    WHITE_CELL = 2

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize a board with the starting pieces.

        Args:
            config: Configuration object (default: get_default_config())
        """
        self.config = config or get_default_config()
        self.grid = _make_grid()

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.config)
        new_board.grid = [
            [Piece(piece.color) if piece else None for piece in row]
            for row in self.grid
        ]
        return new_board

    def get_piece(self, pos: Sequence[int]) -> Optional[Piece]:
        """
        Get the piece at a position.

        Args:
            pos: (row, col) position

        Returns:
            The Piece at `pos`, or None if the cell is empty

        Raises:
            OutOfBounds: if `pos` is not on the board
        """
        if not self.is_valid_pos(pos):
            raise OutOfBounds(pos)

        return self.grid[pos[0]][pos[1]]

    def is_valid_pos(self, pos: Sequence[int]) -> bool:
        """Check if a position is on the board. Non-integer coordinates are never on it."""
        row, col = pos
        if not isinstance(row, Integral) or not isinstance(col, Integral):
            return False
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def is_occupied(self, pos: Sequence[int]) -> bool:
        return self.get_piece(pos) is not None

    def is_mine(self, pos: Sequence[int], color: str) -> bool:
        """Check if the piece at a position belongs to `color`."""
        validate_color(color)
        piece = self.get_piece(pos)
        return piece is not None and piece.color == color

    def has_move(self, color: str) -> bool:
        """Check if `color` has any valid move."""
        return len(self.valid_moves(color)) > 0

    def is_over(self) -> bool:
        """Check if both players are out of moves."""
        return not self.has_move(BLACK) and not self.has_move(WHITE)

    def positions_to_flip(self, pos: Sequence[int], color: str,
                          direction: Sequence[int]) -> List[Position]:
        """
        Walk away from `pos` along `direction`, collecting opposite-color pieces
        until a piece of `color` is reached.

        Args:
            pos: Origin of the scan (not itself inspected)
            color: Color of the player moving
            direction: (row, col) step

        Returns:
            Positions of the pieces that would be captured in this direction.
            Empty if the walk runs off the board, hits an empty cell, or meets
            a piece of `color` straight away.

        Raises:
            OutOfBounds: if `pos` is not on the board
        """
        if not self.is_valid_pos(pos):
            raise OutOfBounds(pos)
        validate_color(color)
        captured: List[Position] = []
        row, col = pos[0] + direction[0], pos[1] + direction[1]

        while self.is_valid_pos((row, col)):
            piece = self.grid[row][col]
            if piece is None:
                return []
            if piece.color == color:
                return captured
            captured.append((row, col))
            row += direction[0]
            col += direction[1]

        return []

    def valid_move(self, pos: Sequence[int], color: str) -> bool:
        """Check if the move is valid (unoccupied position that captures at least one piece)."""
        validate_color(color)
        if self.is_occupied(pos):
            return False

        return any(self.positions_to_flip(pos, color, d) for d in self.DIRS)

    def valid_moves(self, color: str) -> List[Position]:
        """
        Get all valid moves for a color.

        Args:
            color: The player to get valid moves for

        Returns:
            List of (row, col) tuples in row-major order
        """
        validate_color(color)
        return [
            (i, j)
            for i in range(self.SIZE)
            for j in range(self.SIZE)
            if self.valid_move((i, j), color)
        ]

    def place_piece(self, pos: Sequence[int], color: str) -> List[Position]:
        """
        Place a piece of `color` at `pos` and flip every captured piece.

        Args:
            pos: (row, col) of the move
            color: Color of the player moving

        Returns:
            Positions of the flipped pieces

        Raises:
            OutOfBounds: if `pos` is not on the board
            InvalidMove: if the move is not valid; the board is left unchanged
        """
        if not self.valid_move(pos, color):
            raise InvalidMove(pos, color)

        flipped: List[Position] = []
        for direction in self.DIRS:
            flipped.extend(self.positions_to_flip(pos, color, direction))

        for row, col in flipped:
            self.grid[row][col].flip()

        self.grid[pos[0]][pos[1]] = Piece(color)
        logger.debug("%s played %s, flipped %d: %s", color, tuple(pos), len(flipped), flipped)
        return flipped

    def count(self, color: str) -> int:
        """Count the pieces of a color on the board."""
        validate_color(color)
        return sum(1 for row in self.grid for piece in row if piece and piece.color == color)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.count(BLACK), self.count(WHITE)

    def winner(self) -> Optional[str]:
        """
        Determine the winner based on piece counts.

        Returns:
            BLACK, WHITE or DRAW once the game is over, None while it is in progress
        """
        if not self.is_over():
            return None

        black_count, white_count = self.get_score()
        if black_count > white_count:
            return BLACK
        if white_count > black_count:
            return WHITE
        return DRAW

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            8x8 int8 array; EMPTY, BLACK_CELL or WHITE_CELL per cell
        """
        codes = {BLACK: self.BLACK_CELL, WHITE: self.WHITE_CELL}
        state = np.full((self.SIZE, self.SIZE), self.EMPTY, dtype=np.int8)
        for i, row in enumerate(self.grid):
            for j, piece in enumerate(row):
                if piece is not None:
                    state[i, j] = codes[piece.color]
        return state

    def rows(self) -> List[str]:
        """Render each row as ' i |' followed by one character per cell."""
        empty = self.config.board.empty_symbol
        return [
            f" {i} |" + "".join(str(piece) if piece else empty for piece in row)
            for i, row in enumerate(self.grid)
        ]

    def print(self, file: Optional[TextIO] = None) -> None:
        """Print a string representation of the board."""
        out = file or sys.stdout
        for line in self.rows():
            out.write(line + "\n")

    def __str__(self) -> str:
        return "\n".join(self.rows())

