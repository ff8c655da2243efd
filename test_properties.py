"""
Property-based tests for the Othello board.

Uses hypothesis to check the board invariants on randomly played positions.
"""
import numpy as np
import pytest
from hypothesis import given, strategies as st, settings

from othello import Board, BLACK, WHITE, COLORS, InvalidMove, OutOfBounds


@st.composite
def played_board(draw):
    """Generate a board reached by a sequence of random valid moves."""
    board = Board()
    color = BLACK
    max_moves = draw(st.integers(0, 40))
    for _ in range(max_moves):
        if board.is_over():
            break
        moves = board.valid_moves(color)
        if moves:
            board.place_piece(draw(st.sampled_from(moves)), color)
        color = WHITE if color == BLACK else BLACK
    return board


positions = st.tuples(st.integers(0, 7), st.integers(0, 7))
colors = st.sampled_from(COLORS)


@given(st.tuples(st.integers(-20, 20), st.integers(-20, 20)))
def test_is_valid_pos(pos):
    assert Board().is_valid_pos(pos) == (0 <= pos[0] < 8 and 0 <= pos[1] < 8)


@given(st.tuples(st.integers(-20, 20), st.integers(-20, 20)).filter(
    lambda p: not (0 <= p[0] < 8 and 0 <= p[1] < 8)))
def test_out_of_bounds(pos):
    board = Board()
    with pytest.raises(OutOfBounds):
        board.get_piece(pos)
    with pytest.raises(OutOfBounds):
        board.place_piece(pos, BLACK)
    with pytest.raises(OutOfBounds):
        board.positions_to_flip(pos, BLACK, (1, 0))


@given(played_board(), positions, colors)
@settings(max_examples=100, deadline=None)
def test_valid_move_matches_scans(board, pos, color):
    scans = [board.positions_to_flip(pos, color, d) for d in Board.DIRS]
    expected = not board.is_occupied(pos) and any(scans)
    assert board.valid_move(pos, color) == expected


@given(played_board(), positions, colors)
@settings(max_examples=100, deadline=None)
def test_place_piece(board, pos, color):
    """Invalid moves leave the board unchanged; valid ones flip exactly the scanned pieces."""
    before = board.get_board_state()
    if not board.valid_move(pos, color):
        with pytest.raises(InvalidMove):
            board.place_piece(pos, color)
        np.testing.assert_array_equal(board.get_board_state(), before)
        return

    scanned = [p for d in Board.DIRS for p in board.positions_to_flip(pos, color, d)]
    flipped = board.place_piece(pos, color)
    assert sorted(flipped) == sorted(scanned)
    assert board.get_piece(pos).color == color
    for p in scanned:
        assert board.is_mine(p, color)

    changed = {tuple(ix) for ix in np.argwhere(board.get_board_state() != before)}
    assert changed == set(scanned) | {tuple(pos)}


@given(played_board())
@settings(max_examples=50, deadline=None)
def test_move_enumeration(board):
    for color in COLORS:
        moves = board.valid_moves(color)
        assert board.has_move(color) == (len(moves) > 0)
        assert moves == sorted(moves)
    assert board.is_over() == (not board.has_move(BLACK) and not board.has_move(WHITE))
