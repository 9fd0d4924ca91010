"""Convenience service layer for text drivers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .board import render_board
from .game import Game
from .history import NothingToUndo
from .notation import NotationError
from .pieces import Color
from .rules_schema import DEFAULT_RULES, RuleSet
from .state import InvalidAction

logger = logging.getLogger(__name__)


@dataclass
class ColorView:
    phase: str
    unplaced: int
    on_board: int
    removed: int


@dataclass
class BoardView:
    points: List[Optional[str]]
    to_move: str
    pending_removal: Optional[str]
    winner: Optional[str]
    colors: Dict[str, ColorView]
    history_depth: int
    last_action: Optional[str]

    @property
    def is_finished(self) -> bool:
        return self.winner is not None


class GameService:
    """Facade around Game for CLI consumers."""

    def __init__(self, rules: Optional[RuleSet] = None) -> None:
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.game = Game.new(self.rules)
        self._actions: List[str] = []

    # Session lifecycle -------------------------------------------------

    def reset(self) -> BoardView:
        self.game = Game.new(self.rules)
        self._actions.clear()
        logger.info("new game started")
        return self.view()

    # Actions -----------------------------------------------------------

    def submit(self, text: str) -> BoardView:
        action = self.game.apply(text)
        self._actions.append(str(action))
        return self.view()

    def undo(self) -> BoardView:
        self.game.undo()
        self._actions.pop()
        return self.view()

    def handle(self, line: str) -> str:
        """Run one line of driver input and return the text to show.

        Accepts action notation or one of the commands ``undo``, ``board``,
        ``reset`` and ``help``. Rejected input is reported, not raised.
        """
        command = line.strip().lower()
        if command == "help":
            return HELP_TEXT
        if command == "board":
            return self._status()
        if command == "reset":
            self.reset()
            return self._status()
        try:
            if command == "undo":
                self.undo()
            else:
                self.submit(line)
        except (InvalidAction, NotationError, NothingToUndo) as exc:
            logger.debug("rejected %r: %s", line, exc)
            return f"Error: {exc}"
        return self._status()

    # Views -------------------------------------------------------------

    def view(self) -> BoardView:
        state = self.game.state
        result = self.game.winner()
        pending = state.pending_removal
        return BoardView(
            points=[piece.symbol if piece is not None else None for piece in state.board],
            to_move=state.to_move.symbol,
            pending_removal=pending.symbol if pending is not None else None,
            winner=result.symbol if result is not None else None,
            colors={
                color.symbol: ColorView(
                    phase=state.phase(color).name.lower(),
                    unplaced=state.unplaced_pieces(color),
                    on_board=state.pieces_on_board(color),
                    removed=state.removed_pieces(color),
                )
                for color in Color
            },
            history_depth=len(self.game.history),
            last_action=self._actions[-1] if self._actions else None,
        )

    def render(self) -> str:
        return render_board(self.game.points())

    def describe(self) -> str:
        """Return a one-line status summary."""
        view = self.view()
        if view.winner is not None:
            return f"{_name(view.winner)} wins."
        if view.pending_removal is not None:
            return f"{_name(view.pending_removal)} closed a mill and must remove a piece."
        mover = view.colors[view.to_move]
        return f"{_name(view.to_move)} to {_VERBS[mover.phase]}."

    def _status(self) -> str:
        return f"{self.render()}\n{self.describe()}"


HELP_TEXT = """Actions:
  W P <point>         place a piece
  W M <from> <to>     move a piece
  W R <point>         remove an opponent piece after closing a mill
  (use B instead of W for Black)
Commands: undo, board, reset, help, quit"""

_VERBS = {
    "placement": "place",
    "movement": "move",
    "flying": "fly",
    "removal": "remove",
}


def _name(symbol: str) -> str:
    return Color.from_symbol(symbol).name.title()
