from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from connect_four.games.board import Board
from connect_four.games.player import Player


class ActionPolicy(ABC):
    """
    Abstract policy that picks a column for ``player`` on ``board``.

    Knows only about:
      - the :class:`Board` capability set
      - which :class:`Player` is to move
    """

    @abstractmethod
    def select_action(self, board: Board, player: Player) -> Optional[int]:
        """
        Choose a zero-based column for ``player``.

        Args:
            board: current position. Policies must not mutate it.
            player: side to move.

        Returns:
            A valid column, or ``None`` when the board has no legal move.
        """
        raise NotImplementedError
