"""Central registry of board implementations."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable

BoardFactory = Callable[..., Any]

_BOARD_REGISTRY: Dict[str, BoardFactory] = {}


def register_board(board_id: str, entry_point: BoardFactory) -> None:
    """Register a board constructor under ``board_id``."""
    if board_id in _BOARD_REGISTRY:
        raise ValueError(f"Board id '{board_id}' is already registered.")
    _BOARD_REGISTRY[board_id] = entry_point


def make_board(board_id: str, **kwargs: Any) -> Any:
    """Instantiate an empty board of a registered implementation."""
    if board_id not in _BOARD_REGISTRY:
        raise KeyError(f"Board id '{board_id}' is not registered.")
    return _BOARD_REGISTRY[board_id](**kwargs)


def list_boards() -> Iterable[str]:
    """Return iterable of registered board identifiers."""
    return tuple(_BOARD_REGISTRY.keys())


def get_board_entry(board_id: str) -> BoardFactory:
    """Retrieve the raw constructor for a board."""
    if board_id not in _BOARD_REGISTRY:
        raise KeyError(f"Board id '{board_id}' is not registered.")
    return _BOARD_REGISTRY[board_id]
