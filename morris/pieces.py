"""Piece colours shared by players and board occupants."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    WHITE = "W"
    BLACK = "B"

    def __str__(self) -> str:
        return self.name.lower()

    def opposite(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def index(self) -> int:
        """Slot used for this colour in per-player counters."""
        return 0 if self is Color.WHITE else 1

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Color":
        return cls(symbol)


# White always opens the game.
FIRST_PLAYER = Color.WHITE
