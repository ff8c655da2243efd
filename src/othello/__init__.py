"""
Othello rules engine.
This package contains the board, pieces and move rules for Othello/Reversi.
"""

from .board import Board, DIRECTIONS, DRAW
from .config import Config, get_default_config
from .errors import OthelloError, OutOfBounds, InvalidMove, InvalidColor
from .piece import Piece, BLACK, WHITE, COLORS, opposite_color

__all__ = [
    'Board', 'DIRECTIONS', 'DRAW',
    'Config', 'get_default_config',
    'OthelloError', 'OutOfBounds', 'InvalidMove', 'InvalidColor',
    'Piece', 'BLACK', 'WHITE', 'COLORS', 'opposite_color',
]
