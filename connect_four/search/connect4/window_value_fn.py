"""Window heuristic value function for Connect4 minimax."""

from __future__ import annotations

import numpy as np

from connect_four.games.board import Board
from connect_four.games.player import Player
from connect_four.games.windows import DIRECTIONS, window_views
from ..value_fn import BoardValueFn

THREE_SCORE = 10000
# Blocking an opponent's three outweighs building our own.
BLOCK_THREE_SCORE = 100000
TWO_SCORE = 100
BLOCK_TWO_SCORE = 50


def _score_counts(player_count: np.ndarray, opp_count: np.ndarray) -> int:
    """Sum window contributions given per-window piece counts."""
    only_player = opp_count == 0
    only_opp = player_count == 0
    score = THREE_SCORE * np.count_nonzero(only_player & (player_count == 3))
    score += BLOCK_THREE_SCORE * np.count_nonzero(only_opp & (opp_count == 3))
    score += TWO_SCORE * np.count_nonzero(only_player & (player_count == 2))
    score += BLOCK_TWO_SCORE * np.count_nonzero(only_opp & (opp_count == 2))
    return int(score)


def evaluate_grid(grid: np.ndarray, player: Player) -> int:
    """
    Score a token grid for ``player`` by summing over every 4-cell window.

    Each window is scored on its own from how many cells belong to
    ``player`` and to the opponent; empty cells count for neither side.

    +--------------+----------------+--------------+
    | player count | opponent count | contribution |
    +==============+================+==============+
    | 3            | 0              | +10000       |
    | 0            | 3              | +100000      |
    | 2            | 0              | +100         |
    | 0            | 2              | +50          |
    | other        |                | 0            |
    +--------------+----------------+--------------+

    Args:
        grid: ``(rows, cols)`` array of tokens (0 empty).
        player: Perspective player.

    Returns:
        Non-negative integer score.
    """
    own = grid == player.token
    opp = grid == player.opponent.token
    score = 0
    for dr, dc in DIRECTIONS:
        own_views = window_views(own, dr, dc)
        if not own_views:
            continue
        opp_views = window_views(opp, dr, dc)
        player_count = sum(view.astype(np.int8) for view in own_views)
        opp_count = sum(view.astype(np.int8) for view in opp_views)
        score += _score_counts(player_count, opp_count)
    return score


def evaluate_board(board: Board, player: Player) -> int:
    """Score ``board`` for ``player`` with the window heuristic."""
    return evaluate_grid(board.to_array(), player)


class WindowHeuristicValueFn(BoardValueFn):
    """Evaluates Connect4 positions by counting pieces in 4-cell windows."""

    def evaluate(self, board: Board, player: Player) -> int:
        return evaluate_board(board, player)
