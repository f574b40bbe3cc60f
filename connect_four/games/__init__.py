from __future__ import annotations

from .board import (
    Board,
    BoardError,
    FullColumnError,
    InvalidColumnError,
    InvalidRowError,
)
from .player import Player
from .windows import DIRECTIONS, WINDOW_LENGTH, window_views

__all__ = [
    "Board",
    "BoardError",
    "DIRECTIONS",
    "FullColumnError",
    "InvalidColumnError",
    "InvalidRowError",
    "Player",
    "WINDOW_LENGTH",
    "window_views",
]
