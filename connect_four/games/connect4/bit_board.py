"""Connect4 board backed by per-player bitmasks."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from ..board import Board, FullColumnError
from ..player import Player
from .utils import CONNECT4_COLS, CONNECT4_ROWS

# Height includes a sentinel row to prevent bit-shift overflows
HEIGHT = CONNECT4_ROWS + 1


def has_four(mask: int) -> bool:
    """Check whether ``mask`` contains four connected bits."""
    # Horizontal (shift HEIGHT)
    m = mask & (mask >> HEIGHT)
    if m & (m >> (2 * HEIGHT)):
        return True
    # Diagonal \ (shift HEIGHT - 1)
    m = mask & (mask >> (HEIGHT - 1))
    if m & (m >> (2 * (HEIGHT - 1))):
        return True
    # Diagonal / (shift HEIGHT + 1)
    m = mask & (mask >> (HEIGHT + 1))
    if m & (m >> (2 * (HEIGHT + 1))):
        return True
    # Vertical (shift 1)
    m = mask & (mask >> 1)
    if m & (m >> 2):
        return True
    return False


class BitBoard(Board):
    """
    Two integer bitmasks plus a column-height list.

    Bit ``col * HEIGHT + h`` is the cell ``h`` rows above the bottom of
    ``col``. The sentinel bit on top of every column is never set, which keeps
    shifted runs from wrapping into the next column.
    """

    rows = CONNECT4_ROWS
    cols = CONNECT4_COLS

    def __init__(
        self,
        masks: Optional[Sequence[int]] = None,
        heights: Optional[Sequence[int]] = None,
    ) -> None:
        self._masks: List[int] = list(masks) if masks is not None else [0, 0]
        self._heights: List[int] = (
            list(heights) if heights is not None else [0] * self.cols
        )

    @staticmethod
    def _index(player: Player) -> int:
        return 0 if player is Player.FIRST else 1

    def _bit(self, row: int, col: int) -> int:
        return 1 << (col * HEIGHT + (self.rows - 1 - row))

    def get(self, row: int, col: int) -> Optional[Player]:
        self._check_row(row)
        self._check_col(col)
        bit = self._bit(row, col)
        if self._masks[0] & bit:
            return Player.FIRST
        if self._masks[1] & bit:
            return Player.SECOND
        return None

    def is_valid(self, col: int) -> bool:
        self._check_col(col)
        return self._heights[col] < self.rows

    def make_move(self, col: int, player: Player) -> int:
        self._check_col(col)
        height = self._heights[col]
        if height >= self.rows:
            raise FullColumnError(col)
        self._masks[self._index(player)] |= 1 << (col * HEIGHT + height)
        self._heights[col] = height + 1
        return self.rows - 1 - height

    def check_winner(self) -> bool:
        return has_four(self._masks[0]) or has_four(self._masks[1])

    def winner(self) -> Optional[Player]:
        if has_four(self._masks[0]):
            return Player.FIRST
        if has_four(self._masks[1]):
            return Player.SECOND
        return None

    def copy(self) -> "BitBoard":
        return BitBoard(self._masks, self._heights)

    def to_array(self) -> np.ndarray:
        grid = np.zeros((self.rows, self.cols), dtype=np.int8)
        for col in range(self.cols):
            for height in range(self._heights[col]):
                bit = 1 << (col * HEIGHT + height)
                row = self.rows - 1 - height
                grid[row, col] = (
                    Player.FIRST.token if self._masks[0] & bit else Player.SECOND.token
                )
        return grid

    @property
    def move_count(self) -> int:
        return sum(self._heights)
