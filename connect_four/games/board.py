from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Type, TypeVar

import numpy as np

from .player import Player
from .windows import winning_token

B = TypeVar("B", bound="Board")

EMPTY_SYMBOL = "."


class BoardError(ValueError):
    """Base class for rejected board operations."""


class InvalidColumnError(BoardError):
    def __init__(self, col: int) -> None:
        super().__init__(f"Invalid column: {col}")
        self.col = col


class InvalidRowError(BoardError):
    def __init__(self, row: int) -> None:
        super().__init__(f"Invalid row: {row}")
        self.row = row


class FullColumnError(BoardError):
    def __init__(self, col: int) -> None:
        super().__init__(f"Column {col} is full")
        self.col = col


class Board(ABC):
    """
    Общий интерфейс доски Connect Four с гравитацией.

    Row 0 is the top of the board and row ``rows - 1`` the bottom. Cells hold
    ``None`` or the :class:`Player` that occupies them. Implementations only
    change state through :meth:`make_move`; search works on :meth:`copy`.
    """

    rows: int
    cols: int

    @classmethod
    def new(cls: Type[B]) -> B:
        """Empty board."""
        return cls()

    @abstractmethod
    def get(self, row: int, col: int) -> Optional[Player]:
        """Occupant of ``(row, col)``; raises on out-of-range indices."""

    @abstractmethod
    def is_valid(self, col: int) -> bool:
        """True if ``col`` still has an empty cell."""

    @abstractmethod
    def make_move(self, col: int, player: Player) -> int:
        """Drop ``player``'s token into ``col`` and return the landing row."""

    @abstractmethod
    def check_winner(self) -> bool:
        """True if any player has four in a row in any direction."""

    @abstractmethod
    def copy(self: B) -> B:
        """Independent copy; moves on it never touch ``self``."""

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """``(rows, cols)`` int8 array of player tokens, 0 for empty."""

    @property
    @abstractmethod
    def move_count(self) -> int:
        """Number of tokens on the board."""

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.cols:
            raise InvalidColumnError(col)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise InvalidRowError(row)

    def valid_columns(self) -> List[int]:
        return [col for col in range(self.cols) if self.is_valid(col)]

    def is_full(self) -> bool:
        return not self.valid_columns()

    def winner(self) -> Optional[Player]:
        token = winning_token(self.to_array())
        return Player.from_token(token) if token else None

    def render(self) -> str:
        lines = []
        for row in range(self.rows):
            cells = []
            for col in range(self.cols):
                occupant = self.get(row, col)
                cells.append(occupant.symbol if occupant is not None else EMPTY_SYMBOL)
            lines.append("|" + "|".join(cells) + "|")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(moves={self.move_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.to_array(), other.to_array())

    __hash__ = None  # mutable
