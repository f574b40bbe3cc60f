"""Tests for the negamax search."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect_four.games import Board, Player
from connect_four.games.connect4 import CONNECT4_COLS, CONNECT4_ROWS, apply_moves
from connect_four.registry import make_board
from connect_four.search import (
    BoardValueFn,
    MinimaxConfig,
    MinimaxPolicy,
    WIN_SCORE,
    minimax,
)

X = Player.FIRST
O = Player.SECOND

# Row patterns with runs of at most two; stacking them alternately never
# produces four in any direction.
ROW_A = [X, X, O, O, X, X, O]
ROW_B = [p.switch() for p in ROW_A]


class ConstantValueFn(BoardValueFn):
    """Scores every position the same and counts how often it is asked."""

    def __init__(self) -> None:
        self.calls = 0

    def evaluate(self, board: Board, player: Player) -> int:
        self.calls += 1
        return 0


@pytest.fixture(params=["grid", "bitboard"])
def board(request):
    return make_board(request.param)


def _fill_drawn(board: Board) -> Board:
    """Fill every cell bottom-up with alternating ROW_A / ROW_B rows."""
    for col in range(CONNECT4_COLS):
        for height in range(CONNECT4_ROWS):
            row_pattern = ROW_A if height % 2 == 0 else ROW_B
            board.make_move(col, row_pattern[col])
    return board


def test_depth_must_be_positive(board):
    with pytest.raises(ValueError):
        minimax(board, 0, X)


def test_takes_immediate_win(board):
    """Three across with both ends open: the lowest winning column is chosen."""
    apply_moves(board, [(1, X), (2, X), (3, X)])
    score, col = minimax(board, 1, X)
    assert col == 0
    assert score == WIN_SCORE + 1


def test_takes_immediate_win_deeper(board):
    apply_moves(board, [(1, X), (2, X), (3, X)])
    score, col = minimax(board, 3, X)
    assert col == 0
    assert score == WIN_SCORE + 3


def test_blocks_opponent_three(board):
    apply_moves(board, [(0, O), (1, O), (2, O)])
    score, col = minimax(board, 2, X)
    assert col == 3
    assert score > -WIN_SCORE


def test_prefers_win_over_block(board):
    apply_moves(board, [(0, O), (1, O), (2, O)])
    apply_moves(board, [(6, X)] * 3)
    _, col = minimax(board, 2, X)
    assert col == 6


def test_full_board_has_no_move(board):
    _fill_drawn(board)
    assert board.is_full()
    assert not board.check_winner()

    assert minimax(board, 2, X) == (0, None)
    assert MinimaxPolicy().select_action(board, O) is None


def test_decided_board_is_scored_for_the_winner(board):
    """O already has four stacked: X is not credited with a win."""
    apply_moves(board, [(0, O)] * 4)
    assert board.winner() is O

    assert minimax(board, 2, X) == (-WIN_SCORE, None)
    assert minimax(board, 2, O) == (WIN_SCORE, None)

    policy = MinimaxPolicy(config=MinimaxConfig(depth=2))
    assert policy.select_action(board, X) is None
    assert policy.nodes_explored == 0


def test_scores_are_integers(board):
    assert isinstance(minimax(board, 2, X)[0], int)
    apply_moves(board, [(1, X), (2, X), (3, X)])
    assert isinstance(minimax(board, 2, X)[0], int)
    apply_moves(board, [(0, X)])
    assert isinstance(minimax(board, 2, O)[0], int)


def test_search_does_not_mutate_board(board):
    apply_moves(board, [(3, X), (3, O), (2, X)])
    before = board.copy()
    minimax(board, 2, O)
    assert board == before


def test_determinism(board):
    apply_moves(board, [(3, X), (2, O), (4, X)])
    first = minimax(board, 3, O)
    second = minimax(board, 3, O)
    assert first == second


def test_implementations_give_same_answer():
    moves = [(3, X), (2, O), (4, X), (4, O), (2, X)]
    grid = apply_moves(make_board("grid"), moves)
    bits = apply_moves(make_board("bitboard"), moves)
    assert minimax(grid, 3, O) == minimax(bits, 3, O)


def test_ties_go_to_lowest_column(board):
    value_fn = ConstantValueFn()
    policy = MinimaxPolicy(value_fn=value_fn)
    score, col = policy.minimax(board, 2, X)
    assert (score, col) == (0, 0)


@pytest.mark.parametrize("depth, expected_nodes", [(1, 7), (2, 7 + 49), (3, 7 + 49 + 343)])
def test_full_width_search(board, depth, expected_nodes):
    """Every continuation is visited: no branch is cut off."""
    value_fn = ConstantValueFn()
    policy = MinimaxPolicy(value_fn=value_fn)
    policy.minimax(board, depth, X)
    assert policy.nodes_explored == expected_nodes
    assert value_fn.calls == CONNECT4_COLS ** depth


def test_skips_full_columns(board):
    apply_moves(board, [(0, X), (0, O)] * 3)
    value_fn = ConstantValueFn()
    policy = MinimaxPolicy(value_fn=value_fn)
    _, col = policy.minimax(board, 1, X)
    assert col == 1
    assert value_fn.calls == CONNECT4_COLS - 1


def test_policy_select_action(board):
    apply_moves(board, [(5, O), (5, O), (5, O)])
    policy = MinimaxPolicy(config=MinimaxConfig(depth=2))
    assert policy.select_action(board, X) == 5


if __name__ == "__main__":
    pytest.main([__file__])
