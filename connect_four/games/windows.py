"""Four-cell line helpers shared by win detection and evaluation."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

WINDOW_LENGTH = 4

# (row step, col step) with row 0 at the top: right, down, down-right, down-left.
DIRECTIONS: Sequence[Tuple[int, int]] = ((0, 1), (1, 0), (1, 1), (1, -1))


def window_views(
    grid: np.ndarray,
    dr: int,
    dc: int,
    length: int = WINDOW_LENGTH,
) -> List[np.ndarray]:
    """
    Slice ``grid`` into ``length`` aligned views for one direction.

    Element ``[i, j]`` of view ``k`` is the ``k``-th cell of the window whose
    start cell corresponds to ``[i, j]``. Only starts whose whole window stays
    on the board are covered, so every window appears exactly once.

    Args:
        grid: ``(rows, cols)`` token array.
        dr: Row step (0 or 1).
        dc: Column step (-1, 0 or 1).
        length: Window length.

    Returns:
        List of ``length`` equally shaped views (empty when the board is too
        small for the direction).
    """
    rows, cols = grid.shape
    span_r = (length - 1) * dr
    span_c = (length - 1) * dc
    r_lo, r_hi = 0, rows - span_r
    c_lo, c_hi = max(0, -span_c), cols - max(0, span_c)
    if r_hi <= r_lo or c_hi <= c_lo:
        return []
    return [
        grid[r_lo + k * dr : r_hi + k * dr, c_lo + k * dc : c_hi + k * dc]
        for k in range(length)
    ]


def winning_token(grid: np.ndarray) -> int:
    """Token owning a full window, or 0 when no window is complete."""
    for dr, dc in DIRECTIONS:
        views = window_views(grid, dr, dc)
        if not views:
            continue
        first = views[0]
        complete = first != 0
        for view in views[1:]:
            complete &= view == first
        if complete.any():
            return int(first[complete][0])
    return 0


def count_windows(grid: np.ndarray) -> int:
    """Number of windows on a board of this shape (69 for 6 x 7)."""
    total = 0
    for dr, dc in DIRECTIONS:
        views = window_views(grid, dr, dc)
        if views:
            total += views[0].size
    return total
