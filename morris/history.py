"""Undo history made of full game-state snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .pieces import Color


class NothingToUndo(RuntimeError):
    """Raised when undo is requested with an empty history."""


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Optional[Color], ...]
    to_move: Color
    unplaced: Tuple[int, int]
    removed: Tuple[int, int]
    pending_removal: Optional[Color]


@dataclass
class History:
    """Stack of snapshots, one per accepted action."""

    _snapshots: List[Snapshot] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._snapshots)

    def push(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def pop(self) -> Snapshot:
        if not self._snapshots:
            raise NothingToUndo("No action to undo.")
        return self._snapshots.pop()

    def peek(self) -> Optional[Snapshot]:
        return self._snapshots[-1] if self._snapshots else None

    def clear(self) -> None:
        self._snapshots.clear()
