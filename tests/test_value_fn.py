"""Tests for the window heuristic value function."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect_four.games import Player
from connect_four.games.connect4 import alternate_moves, apply_moves
from connect_four.registry import make_board
from connect_four.search import WindowHeuristicValueFn, evaluate_board

X = Player.FIRST
O = Player.SECOND


@pytest.fixture(params=["grid", "bitboard"])
def board(request):
    return make_board(request.param)


def test_empty_board_scores_zero(board):
    assert evaluate_board(board, X) == 0
    assert evaluate_board(board, O) == 0


def test_open_three(board):
    """Three across the bottom: one window of three plus one window of two."""
    apply_moves(board, [(0, X), (1, X), (2, X)])
    assert evaluate_board(board, X) == 10000 + 100
    # Opponent view: blocking three weighs 100000, blocking two 50.
    assert evaluate_board(board, O) == 100000 + 50


def test_vertical_two(board):
    apply_moves(board, [(0, X), (0, X)])
    assert evaluate_board(board, X) == 100
    assert evaluate_board(board, O) == 50


def test_mixed_windows_are_neutral(board):
    """Bottom row X X O O: only the O O . . window counts."""
    apply_moves(board, [(0, X), (1, X), (2, O), (3, O)])
    assert evaluate_board(board, X) == 50
    assert evaluate_board(board, O) == 100


def test_four_in_a_row_window_is_neutral(board):
    apply_moves(board, [(0, X), (1, X), (2, X), (3, X)])
    # 0-3 is complete (neutral); 1-4 has three, 2-5 two, 3-6 one.
    assert evaluate_board(board, X) == 10000 + 100


def test_role_symmetry():
    """Swapping token ownership and perspective gives the same score."""
    cols = [3, 3, 2, 4, 4, 2, 5, 1, 6, 0, 3]
    original = apply_moves(make_board("grid"), alternate_moves(cols, first=X))
    swapped = apply_moves(make_board("bitboard"), alternate_moves(cols, first=O))

    assert evaluate_board(original, X) == evaluate_board(swapped, O)
    assert evaluate_board(original, O) == evaluate_board(swapped, X)
    assert evaluate_board(original, X) != evaluate_board(original, O)


def test_value_fn_wraps_evaluate_board(board):
    apply_moves(board, alternate_moves([3, 2, 3, 4]))
    value_fn = WindowHeuristicValueFn()
    assert value_fn.evaluate(board, X) == evaluate_board(board, X)
    assert value_fn.evaluate(board, O) == evaluate_board(board, O)


def test_evaluation_does_not_mutate(board):
    apply_moves(board, alternate_moves([3, 2, 3]))
    before = board.copy()
    evaluate_board(board, X)
    assert board == before


if __name__ == "__main__":
    pytest.main([__file__])
