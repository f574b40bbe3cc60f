"""Abstract board value function for search algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from connect_four.games.board import Board
from connect_four.games.player import Player


class BoardValueFn(ABC):
    """
    Static evaluator that scores ``board`` from ``player``'s point of view.
    """

    @abstractmethod
    def evaluate(self, board: Board, player: Player) -> int:
        """
        Higher is better for ``player``.
        """
        ...
