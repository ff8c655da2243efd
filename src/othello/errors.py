"""
Exceptions raised by the Othello rules engine.
"""
from typing import Any, Sequence


class OthelloError(Exception):
    """Base class for all rules engine errors."""


class OutOfBounds(OthelloError, IndexError):
    """Raised when a position falls outside the 8x8 board."""

    def __init__(self, pos: Sequence[int]):
        self.pos = tuple(pos)
        super().__init__(f"Not a valid position: {self.pos}")


class InvalidMove(OthelloError, ValueError):
    """Raised when a move is on an occupied cell or captures nothing."""

    def __init__(self, pos: Sequence[int], color: str):
        self.pos = tuple(pos)
        self.color = color
        super().__init__(f"Invalid move for {color} at {self.pos}")


class InvalidColor(OthelloError, ValueError):
    """Raised for a color other than black or white."""

    def __init__(self, color: Any):
        self.color = color
        super().__init__(f"Invalid color: {color!r} (expected 'black' or 'white')")
