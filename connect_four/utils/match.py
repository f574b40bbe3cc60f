"""Utilities for playing games and matches between policies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from connect_four.games.board import Board
from connect_four.games.player import Player
from connect_four.policies.action_policy import ActionPolicy
from connect_four.registry import make_board
import connect_four.games.connect4  # noqa: F401 - registers default boards

logger = logging.getLogger(__name__)

MoveCallback = Callable[[Board, Player, int], None]


@dataclass
class GameResult:
    winner: Optional[Player]
    board: Board
    moves: List[int] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def play_game(
    policies: Dict[Player, ActionPolicy],
    board: Optional[Board] = None,
    first_player: Optional[Player] = None,
    on_move: Optional[MoveCallback] = None,
) -> GameResult:
    """
    Play one game to the end.

    Moves are applied until a player connects four or no column is left.

    Args:
        policies: Policy for each side.
        board: Starting position (default: empty ``grid`` board). Mutated.
        first_player: Side to move first (default: ``Player.default()``).
        on_move: Called as ``on_move(board, player, col)`` after every move.

    Returns:
        GameResult with the winner (``None`` for a draw), the final board and
        the columns played.
    """
    if board is None:
        board = make_board("grid")
    player = first_player or Player.default()
    moves: List[int] = []

    while not board.check_winner():
        if board.is_full():
            logger.info("Game drawn after %d moves", len(moves))
            return GameResult(winner=None, board=board, moves=moves)

        col = policies[player].select_action(board, player)
        if col is None:
            raise ValueError(f"Policy for {player} returned no move on a non-full board")
        board.make_move(col, player)
        moves.append(col)
        if on_move is not None:
            on_move(board, player, col)

        if board.check_winner():
            logger.info("%s wins after %d moves", player, len(moves))
            return GameResult(winner=player, board=board, moves=moves)
        player = player.switch()

    # Starting position already decided.
    return GameResult(winner=board.winner(), board=board, moves=moves)


def play_match(
    policy1: ActionPolicy,
    policy2: ActionPolicy,
    num_games: int = 2,
    board_id: str = "grid",
    alternate_first: bool = True,
) -> Tuple[int, int, int]:
    """
    Play a match between two policies.

    Args:
        policy1: First policy.
        policy2: Second policy.
        num_games: Number of games to play.
        board_id: Registered board implementation to play on.
        alternate_first: If True, policy2 moves first in every odd game.
            If False, policy1 always moves first.

    Returns:
        Tuple of (policy1_wins, draws, policy2_wins).
    """
    policy1_wins = 0
    draws = 0
    policy2_wins = 0

    for game_idx in range(num_games):
        policy1_first = not (alternate_first and game_idx % 2 == 1)
        side1 = Player.FIRST if policy1_first else Player.SECOND
        result = play_game(
            {side1: policy1, side1.switch(): policy2},
            board=make_board(board_id),
        )
        if result.winner is None:
            draws += 1
        elif result.winner is side1:
            policy1_wins += 1
        else:
            policy2_wins += 1

    return policy1_wins, draws, policy2_wins
