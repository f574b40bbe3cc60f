"""Connect4-specific value functions."""

from .window_value_fn import WindowHeuristicValueFn, evaluate_board, evaluate_grid

__all__ = [
    "WindowHeuristicValueFn",
    "evaluate_board",
    "evaluate_grid",
]
