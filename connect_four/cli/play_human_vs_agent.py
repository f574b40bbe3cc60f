"""CLI for playing against the minimax bot."""

import logging
from typing import Callable, Literal, Optional

import tyro

from connect_four.config import AppConfig, load_config
from connect_four.games.board import Board, BoardError
from connect_four.games.player import Player
from connect_four.policies.action_policy import ActionPolicy
from connect_four.registry import make_board
from connect_four.search import MinimaxConfig, MinimaxPolicy
from connect_four.utils.match import play_game
import connect_four.games.connect4  # noqa: F401 - registers default boards


def column_header(board: Board, one_based: bool) -> str:
    offset = 1 if one_based else 0
    return " " + " ".join(str(col + offset) for col in range(board.cols))


class HumanPolicy(ActionPolicy):
    """Reads columns from a prompt until a playable one is entered."""

    def __init__(
        self,
        one_based: bool = True,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.one_based = one_based
        self._read = read
        self._write = write

    def select_action(self, board: Board, player: Player) -> Optional[int]:
        if board.is_full():
            return None
        offset = 1 if self.one_based else 0
        prompt = f"{player}, ({offset}-{board.cols - 1 + offset}): "
        while True:
            raw = self._read(prompt)
            try:
                col = int(raw.strip()) - offset
            except ValueError:
                self._write("That's not a number.")
                continue
            try:
                if board.is_valid(col):
                    return col
                self._write(f"Column {col + offset} is full.")
            except BoardError:
                self._write(f"Column must be between {offset} and {board.cols - 1 + offset}.")


def play_human_vs_agent(
    config: Optional[str] = None,
    depth: Optional[int] = None,
    board: Optional[Literal["grid", "bitboard"]] = None,
    human_first: Optional[bool] = None,
    log_level: str = "WARNING",
):
    """
    Play a game against the minimax bot.

    Args:
        config: Path to a YAML config (see configs/play.yaml).
        depth: Search depth override.
        board: Board implementation override.
        human_first: Override which side the human plays.
        log_level: Logging level for the search and match loggers.
    """
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    app_cfg = load_config(config) if config is not None else AppConfig()
    if depth is not None:
        app_cfg.search.depth = depth
    if board is not None:
        app_cfg.board = board
    if human_first is not None:
        app_cfg.match.bot_player = "second" if human_first else "first"

    one_based = app_cfg.match.one_based_columns
    bot_side = app_cfg.match.bot
    bot = MinimaxPolicy(config=MinimaxConfig(depth=app_cfg.search.depth))
    human = HumanPolicy(one_based=one_based)
    game_board = make_board(app_cfg.board)

    print("=" * 50)
    print("Connect Four - Human vs Minimax")
    print("=" * 50)
    print(f"Search depth: {app_cfg.search.depth}")
    print(f"Human plays: {bot_side.switch()}")
    print("=" * 50)
    print()
    print(column_header(game_board, one_based))
    print(game_board)

    def on_move(current: Board, player: Player, col: int) -> None:
        if player is bot_side:
            print(f"Bot's move: {col + 1 if one_based else col}")
        print()
        print(column_header(current, one_based))
        print(current)

    result = play_game(
        {bot_side: bot, bot_side.switch(): human},
        board=game_board,
        on_move=on_move,
    )

    if result.winner is None:
        print("It's a draw!")
    elif result.winner is bot_side:
        print(f"{result.winner} wins. The bot wins!")
    else:
        print(f"{result.winner} wins. You win!")


if __name__ == "__main__":
    tyro.cli(play_human_vs_agent)
