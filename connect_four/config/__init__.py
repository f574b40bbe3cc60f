"""Config package exports."""

from .schema import AppConfig, MatchConfig, SearchConfig, load_config

__all__ = [
    "AppConfig",
    "MatchConfig",
    "SearchConfig",
    "load_config",
]
