"""Full-width negamax search over Connect4 boards."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from connect_four.games.board import Board
from connect_four.games.player import Player
from connect_four.policies.action_policy import ActionPolicy
from .connect4.window_value_fn import WindowHeuristicValueFn
from .value_fn import BoardValueFn

logger = logging.getLogger(__name__)

# Larger than any heuristic total (69 windows * 100000).
WIN_SCORE = 10_000_000
DRAW_SCORE = 0


@dataclass
class MinimaxConfig:
    depth: int = 4


class MinimaxPolicy(ActionPolicy):
    """
    Negamax-based minimax policy over :class:`Board` + :class:`BoardValueFn`.

    Every legal continuation is searched down to ``config.depth``; the running
    best is passed down the tree but no branch is ever cut off.
    """

    def __init__(
        self,
        value_fn: Optional[BoardValueFn] = None,
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.value_fn = value_fn or WindowHeuristicValueFn()
        self.config = config or MinimaxConfig()
        self.nodes_explored = 0

    def select_action(self, board: Board, player: Player) -> Optional[int]:
        _, col = self.minimax(board, self.config.depth, player)
        return col

    def minimax(
        self,
        board: Board,
        max_depth: int,
        current_player: Player,
    ) -> Tuple[int, Optional[int]]:
        """
        Pick the best column for ``current_player``.

        Args:
            board: Position to search. Left untouched.
            max_depth: Plies to look ahead, including the move being chosen.
            current_player: Side to move.

        Returns:
            ``(score, column)``. ``column`` is ``None`` when the board is full,
            in which case the score is the draw score, or when the game is
            already decided, in which case the score is ``WIN_SCORE`` for the
            side that connected four and ``-WIN_SCORE`` for the other.
        """
        if max_depth < 1:
            raise ValueError("Minimax depth must be >= 1")

        self.nodes_explored = 0
        winner = board.winner()
        if winner is not None:
            score = WIN_SCORE if winner is current_player else -WIN_SCORE
            logger.debug("minimax on decided board: winner=%s score=%d", winner, score)
            return score, None

        best_score = -math.inf
        best_move: Optional[int] = None

        for col in range(board.cols):
            if not board.is_valid(col):
                continue
            score = self._score_move(board, col, current_player, max_depth, best_score)
            if score > best_score:
                best_score = score
                best_move = col

        if best_move is None:
            best_score = DRAW_SCORE

        logger.debug(
            "minimax depth=%d player=%s -> col=%s score=%s nodes=%d",
            max_depth,
            current_player,
            best_move,
            best_score,
            self.nodes_explored,
        )
        return best_score, best_move

    def _score_move(
        self,
        board: Board,
        col: int,
        player: Player,
        depth: int,
        running_best: float,
    ) -> int:
        child = board.copy()
        child.make_move(col, player)
        if child.check_winner():
            return WIN_SCORE + depth
        return -self._search(child, depth - 1, player.switch(), running_best)

    def _search(
        self,
        board: Board,
        depth: int,
        current_player: Player,
        running_best: float,
    ) -> int:
        """
        Score ``board`` for ``current_player`` with ``depth`` plies left.

        ``running_best`` is the caller's running maximum when this node was
        entered. This node hands its own running maximum to its children in
        the same way; neither is compared against, so nothing is pruned.
        """
        self.nodes_explored += 1
        if depth == 0:
            return self.value_fn.evaluate(board, current_player)

        best_eval = -math.inf
        for col in range(board.cols):
            if not board.is_valid(col):
                continue
            value = self._score_move(board, col, current_player, depth, best_eval)
            best_eval = max(best_eval, value)

        if best_eval == -math.inf:
            return DRAW_SCORE
        return best_eval


def minimax(
    board: Board,
    max_depth: int,
    current_player: Player,
    value_fn: Optional[BoardValueFn] = None,
) -> Tuple[int, Optional[int]]:
    """Functional entry point: ``MinimaxPolicy(value_fn).minimax(...)``."""
    return MinimaxPolicy(value_fn=value_fn).minimax(board, max_depth, current_player)
