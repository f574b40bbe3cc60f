"""Search algorithms and value functions."""

from .value_fn import BoardValueFn
from .minimax_policy import MinimaxConfig, MinimaxPolicy, WIN_SCORE, minimax
from .connect4 import WindowHeuristicValueFn, evaluate_board

__all__ = [
    "BoardValueFn",
    "MinimaxConfig",
    "MinimaxPolicy",
    "WIN_SCORE",
    "WindowHeuristicValueFn",
    "evaluate_board",
    "minimax",
]
