"""CLI for playing minimax bots of different depths against each other."""

import logging
from typing import Literal

import tyro

from connect_four.games.board import Board
from connect_four.games.player import Player
from connect_four.search import MinimaxConfig, MinimaxPolicy
from connect_four.utils.match import play_game, play_match
from connect_four.registry import make_board
import connect_four.games.connect4  # noqa: F401 - registers default boards


def play_agent_vs_agent(
    depth1: int = 2,
    depth2: int = 4,
    num_games: int = 2,
    board: Literal["grid", "bitboard"] = "grid",
    render: bool = False,
    log_level: str = "WARNING",
):
    """
    Play minimax vs minimax games.

    Args:
        depth1: Search depth of bot 1.
        depth2: Search depth of bot 2.
        num_games: Number of games; the first move alternates between bots.
        board: Board implementation to play on.
        render: Print every position of a single game (bot 1 moves first)
            instead of playing a match.
        log_level: Logging level for the search and match loggers.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    bot1 = MinimaxPolicy(config=MinimaxConfig(depth=depth1))
    bot2 = MinimaxPolicy(config=MinimaxConfig(depth=depth2))

    if render:
        def on_move(current: Board, player: Player, col: int) -> None:
            print(f"{player} plays column {col}")
            print(current)
            print()

        result = play_game(
            {Player.FIRST: bot1, Player.SECOND: bot2},
            board=make_board(board),
            on_move=on_move,
        )
        print("Draw!" if result.winner is None else f"{result.winner} wins!")
        return

    wins1, draws, wins2 = play_match(bot1, bot2, num_games=num_games, board_id=board)
    print("=" * 50)
    print(f"Depth {depth1} vs depth {depth2} over {num_games} games")
    print("=" * 50)
    print(f"Bot 1 wins: {wins1}")
    print(f"Draws:      {draws}")
    print(f"Bot 2 wins: {wins2}")


if __name__ == "__main__":
    tyro.cli(play_agent_vs_agent)
