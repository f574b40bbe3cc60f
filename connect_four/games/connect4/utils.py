"""Shared constants and helpers for Connect4 boards."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..board import Board
from ..player import Player

# Board dimensions are fixed; no board implementation takes them at runtime.
CONNECT4_ROWS = 6
CONNECT4_COLS = 7


def apply_moves(board: Board, moves: Iterable[Tuple[int, Player]]) -> Board:
    """
    Play ``(col, player)`` moves onto ``board`` in order.

    Args:
        board: Board to mutate.
        moves: Column/player pairs.

    Returns:
        The same board, for chaining.
    """
    for col, player in moves:
        board.make_move(col, player)
    return board


def alternate_moves(
    cols: Iterable[int], first: Player = Player.FIRST
) -> List[Tuple[int, Player]]:
    """Pair ``cols`` with alternating players starting from ``first``."""
    player = first
    pairs = []
    for col in cols:
        pairs.append((col, player))
        player = player.switch()
    return pairs
