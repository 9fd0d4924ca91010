"""Game state management for Nine Men's Morris."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .actions import Action, ActionType
from .board import POINT_COUNT, are_adjacent, is_valid_point
from .history import Snapshot
from .mechanics import can_remove, count_pieces, forms_mill, removable_points
from .pieces import FIRST_PLAYER, Color
from .rules_schema import DEFAULT_RULES, RuleSet

logger = logging.getLogger(__name__)


class InvalidAction(RuntimeError):
    """Raised when an action is rejected. The state is left untouched."""


class PointOutOfRange(InvalidAction):
    """Raised when an action refers to a point that is not on the board."""


class OutOfTurn(InvalidAction):
    """Raised when the wrong player acts or the action does not fit the phase."""


class IllegalAction(InvalidAction):
    """Raised when the board position does not allow the action."""


class Phase(Enum):
    PLACEMENT = auto()
    MOVEMENT = auto()
    FLYING = auto()
    REMOVAL = auto()


@dataclass
class GameState:
    rules: RuleSet = DEFAULT_RULES
    board: List[Optional[Color]] = field(init=False)
    to_move: Color = field(init=False)
    unplaced: List[int] = field(init=False)
    removed: List[int] = field(init=False)
    pending_removal: Optional[Color] = field(init=False, default=None)

    def __post_init__(self) -> None:
        self.board = [None] * POINT_COUNT
        self.to_move = FIRST_PLAYER
        self.unplaced = [self.rules.pieces_per_player] * 2
        self.removed = [0, 0]
        self.pending_removal = None

    # Queries -----------------------------------------------------------

    def pieces_on_board(self, color: Color) -> int:
        return count_pieces(self.board, color)

    def unplaced_pieces(self, color: Color) -> int:
        return self.unplaced[color.index]

    def removed_pieces(self, color: Color) -> int:
        """Number of ``color`` pieces captured so far."""
        return self.removed[color.index]

    def is_flying(self, color: Color) -> bool:
        flying = self.rules.flying_pieces
        return (
            flying > 0
            and self.unplaced[color.index] == 0
            and self.pieces_on_board(color) == flying
        )

    def phase(self, player: Color) -> Phase:
        if self.pending_removal is player:
            return Phase.REMOVAL
        if self.unplaced[player.index] > 0:
            return Phase.PLACEMENT
        if self.is_flying(player):
            return Phase.FLYING
        return Phase.MOVEMENT

    # Actions -----------------------------------------------------------

    def apply(self, action: Action) -> None:
        """Validate ``action`` and apply it.

        Raises:
            OutOfTurn: wrong player, or the action does not fit the phase.
            PointOutOfRange: a point outside 0..23.
            IllegalAction: the position does not allow the action.
        """
        player = action.player
        if self.pending_removal is not None:
            if player is not self.pending_removal:
                raise OutOfTurn(f"{self.pending_removal} must remove a piece first.")
            if action.action_type is not ActionType.REMOVE:
                raise OutOfTurn("Must remove a piece.")
        else:
            if player is not self.to_move:
                raise OutOfTurn(f"Not {player}'s turn.")
            if action.action_type is ActionType.REMOVE:
                raise OutOfTurn("Remove not allowed now.")

        for point in action.points:
            if not is_valid_point(point):
                raise PointOutOfRange(f"Point {point} is not on the board.")

        if action.action_type is ActionType.PLACE:
            self._place(player, action.target)
        elif action.action_type is ActionType.MOVE:
            self._move(player, action.source, action.target)
        else:
            self._remove(player, action.target)

    def _place(self, player: Color, point: int) -> None:
        if self.unplaced[player.index] == 0:
            raise OutOfTurn("No pieces left to place.")
        if self.board[point] is not None:
            raise IllegalAction(f"Point {point} is already occupied.")

        self.unplaced[player.index] -= 1
        self.board[point] = player
        self._resolve_mill(player, point)

    def _move(self, player: Color, source: int, target: int) -> None:
        if self.unplaced[player.index] > 0:
            raise OutOfTurn("Must place all pieces before moving.")
        if self.board[source] is not player:
            raise IllegalAction(f"No {player} piece at point {source}.")
        if self.board[target] is not None:
            raise IllegalAction(f"Point {target} is not empty.")
        if not self.is_flying(player) and not are_adjacent(source, target):
            raise IllegalAction(f"Points {source} and {target} are not adjacent.")

        self.board[source] = None
        self.board[target] = player
        self._resolve_mill(player, target)

    def _remove(self, player: Color, point: int) -> None:
        owner = player.opposite()
        if self.board[point] is not owner:
            raise IllegalAction(f"Point {point} does not hold a {owner} piece.")
        if not can_remove(self.board, point, owner):
            raise IllegalAction(f"Piece at point {point} is protected by a mill.")

        self.board[point] = None
        self.removed[owner.index] += 1
        self.pending_removal = None
        self.to_move = owner

    def _resolve_mill(self, player: Color, point: int) -> None:
        opponent = player.opposite()
        if forms_mill(self.board, point, player):
            if removable_points(self.board, opponent):
                logger.debug("%s closed a mill at %d and must remove a piece", player, point)
                self.pending_removal = player
                return
            logger.debug("%s closed a mill at %d with nothing to remove", player, point)
        self.to_move = opponent

    # Snapshots ---------------------------------------------------------

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=tuple(self.board),
            to_move=self.to_move,
            unplaced=_pair(self.unplaced),
            removed=_pair(self.removed),
            pending_removal=self.pending_removal,
        )

    def restore(self, snapshot: Snapshot) -> None:
        self.board = list(snapshot.board)
        self.to_move = snapshot.to_move
        self.unplaced = list(snapshot.unplaced)
        self.removed = list(snapshot.removed)
        self.pending_removal = snapshot.pending_removal


def _pair(values: List[int]) -> Tuple[int, int]:
    return values[0], values[1]
