"""Player actions: placing, moving and removing pieces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from .pieces import Color


class ActionType(Enum):
    PLACE = auto()
    MOVE = auto()
    REMOVE = auto()


# Number of points each action type refers to.
ARITY = {
    ActionType.PLACE: 1,
    ActionType.MOVE: 2,
    ActionType.REMOVE: 1,
}


@dataclass(frozen=True)
class Action:
    """A request by ``player`` to change the board.

    ``points`` holds the target point for place and remove, and the
    (source, destination) pair for a move.
    """

    player: Color
    action_type: ActionType
    points: Tuple[int, ...]

    def __post_init__(self) -> None:
        expected = ARITY[self.action_type]
        if len(self.points) != expected:
            raise ValueError(
                f"{self.action_type.name.title()} takes {expected} point(s), got {len(self.points)}."
            )

    @classmethod
    def place(cls, player: Color, point: int) -> "Action":
        return cls(player, ActionType.PLACE, (point,))

    @classmethod
    def move(cls, player: Color, source: int, target: int) -> "Action":
        return cls(player, ActionType.MOVE, (source, target))

    @classmethod
    def remove(cls, player: Color, point: int) -> "Action":
        return cls(player, ActionType.REMOVE, (point,))

    @property
    def target(self) -> int:
        """Point that ends up occupied (place, move) or vacated (remove)."""
        return self.points[-1]

    @property
    def source(self) -> int:
        if self.action_type is not ActionType.MOVE:
            raise AttributeError("Only moves have a source point.")
        return self.points[0]

    def __str__(self) -> str:
        from .notation import format_action

        return format_action(self)
