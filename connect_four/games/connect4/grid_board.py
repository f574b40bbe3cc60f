"""Connect4 board backed by a numpy grid."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..board import Board, FullColumnError
from ..player import Player
from ..windows import winning_token
from .utils import CONNECT4_COLS, CONNECT4_ROWS


class GridBoard(Board):
    """
    Plain ``(rows, cols)`` int8 array: 0 empty, +1 first player, -1 second.

    Copies are a single ``ndarray.copy``; win detection rescans every window
    on each call.
    """

    rows = CONNECT4_ROWS
    cols = CONNECT4_COLS

    def __init__(self, cells: Optional[np.ndarray] = None) -> None:
        if cells is None:
            cells = np.zeros((self.rows, self.cols), dtype=np.int8)
        elif cells.shape != (self.rows, self.cols):
            raise ValueError(
                f"Expected a {self.rows}x{self.cols} grid, got {cells.shape}"
            )
        self._cells = cells

    def get(self, row: int, col: int) -> Optional[Player]:
        self._check_row(row)
        self._check_col(col)
        token = int(self._cells[row, col])
        return Player.from_token(token) if token else None

    def is_valid(self, col: int) -> bool:
        self._check_col(col)
        return bool(self._cells[0, col] == 0)

    def make_move(self, col: int, player: Player) -> int:
        self._check_col(col)
        for row in range(self.rows - 1, -1, -1):
            if self._cells[row, col] == 0:
                self._cells[row, col] = player.token
                return row
        raise FullColumnError(col)

    def check_winner(self) -> bool:
        return winning_token(self._cells) != 0

    def copy(self) -> "GridBoard":
        return GridBoard(self._cells.copy())

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    @property
    def move_count(self) -> int:
        return int(np.count_nonzero(self._cells))
