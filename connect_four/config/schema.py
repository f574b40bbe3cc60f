"""Configuration schema for interactive and bot-vs-bot play."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from connect_four.games.player import Player
from connect_four.registry import list_boards
import connect_four.games.connect4  # noqa: F401 - registers default boards

_PLAYER_NAMES = {"first": Player.FIRST, "second": Player.SECOND}


@dataclass
class SearchConfig:
    depth: int = 4


@dataclass
class MatchConfig:
    bot_player: str = "second"
    one_based_columns: bool = True

    @property
    def bot(self) -> Player:
        return _PLAYER_NAMES[self.bot_player]


@dataclass
class AppConfig:
    board: str = "grid"
    search: SearchConfig = field(default_factory=SearchConfig)
    match: MatchConfig = field(default_factory=MatchConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        search_data = data.get("search", {}) or {}
        depth = int(search_data.get("depth", SearchConfig.depth))
        if depth < 1:
            raise ValueError(f"search.depth must be >= 1, got {depth}")
        search = SearchConfig(depth=depth)

        match_data = data.get("match", {}) or {}
        bot_player = str(match_data.get("bot_player", MatchConfig.bot_player)).lower()
        if bot_player not in _PLAYER_NAMES:
            raise ValueError(
                f"match.bot_player must be one of {sorted(_PLAYER_NAMES)}, got {bot_player!r}"
            )
        one_based = match_data.get("one_based_columns", MatchConfig.one_based_columns)
        if not isinstance(one_based, bool):
            raise ValueError(f"match.one_based_columns must be true or false, got {one_based!r}")
        match = MatchConfig(bot_player=bot_player, one_based_columns=one_based)

        board = str(data.get("board", cls.board))
        if board not in list_boards():
            raise ValueError(f"board must be one of {sorted(list_boards())}, got {board!r}")

        return cls(board=board, search=search, match=match)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
