"""
Piece module for Othello.
A piece is a single disc on the board that can be flipped between colors.
"""
from typing import Any

from .errors import InvalidColor

BLACK = "black"
WHITE = "white"
COLORS = (BLACK, WHITE)


def validate_color(color: Any) -> str:
    """Return `color` unchanged, or raise InvalidColor if it is not black or white."""
    if color not in COLORS:
        raise InvalidColor(color)
    return color


def opposite_color(color: str) -> str:
    """Get the color of the other player."""
    return WHITE if validate_color(color) == BLACK else BLACK


class Piece:
    """A single disc placed on the board."""

    def __init__(self, color: str):
        self.color = validate_color(color)

    def flip(self) -> None:
        """Flip the piece to the opposite color."""
        self.color = opposite_color(self.color)

    def to_string(self) -> str:
        return "B" if self.color == BLACK else "W"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Piece({self.color!r})"
