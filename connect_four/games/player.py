"""Player identity for two-player Connect Four."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    """
    One of the two sides of a game.

    ``FIRST`` moves first and is drawn as ``X``; ``SECOND`` is drawn as ``O``.
    The value is the integer token used in array encodings of a board.
    """

    FIRST = 1
    SECOND = -1

    @classmethod
    def default(cls) -> "Player":
        """Side that moves first when nothing else is requested."""
        return cls.FIRST

    @classmethod
    def from_token(cls, token: int) -> "Player":
        try:
            return cls(int(token))
        except ValueError:
            raise ValueError(f"Unknown player token: {token}") from None

    def switch(self) -> "Player":
        """Return the other side. Members are immutable, so rebind: ``p = p.switch()``."""
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    @property
    def opponent(self) -> "Player":
        return self.switch()

    @property
    def token(self) -> int:
        return self.value

    @property
    def symbol(self) -> str:
        return "X" if self is Player.FIRST else "O"

    def __str__(self) -> str:
        return self.symbol
