"""Connect4 board implementations."""

from __future__ import annotations

from .bit_board import BitBoard
from .grid_board import GridBoard
from .utils import CONNECT4_COLS, CONNECT4_ROWS, alternate_moves, apply_moves
from ...registry import list_boards, register_board

if "grid" not in list_boards():
    register_board("grid", GridBoard)
if "bitboard" not in list_boards():
    register_board("bitboard", BitBoard)

__all__ = [
    "BitBoard",
    "CONNECT4_COLS",
    "CONNECT4_ROWS",
    "GridBoard",
    "alternate_moves",
    "apply_moves",
]
