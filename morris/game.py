"""High-level game orchestration for Nine Men's Morris."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .actions import Action
from .history import History
from .notation import parse_action
from .outcome import winner as evaluate_winner
from .pieces import Color
from .rules_schema import DEFAULT_RULES, RuleSet
from .state import GameState, Phase

logger = logging.getLogger(__name__)


@dataclass
class Game:
    """One game session: the live state plus its undo history."""

    rules: RuleSet = DEFAULT_RULES
    state: GameState = field(init=False)
    history: History = field(init=False)

    def __post_init__(self) -> None:
        self.state = GameState(rules=self.rules)
        self.history = History()

    @classmethod
    def new(cls, rules: Optional[RuleSet] = None) -> "Game":
        return cls(rules=rules if rules is not None else DEFAULT_RULES)

    def apply(self, action: Union[Action, str]) -> Action:
        """Apply ``action`` (an Action or its text notation) and return it.

        Rejected actions raise and leave both the state and the history as
        they were.
        """
        if isinstance(action, str):
            action = parse_action(action)
        before = self.state.snapshot()
        self.state.apply(action)
        self.history.push(before)
        logger.debug("applied %s", action)

        result = self.winner()
        if result is not None:
            logger.info("%s wins after %s", result, action)
        return action

    def undo(self) -> None:
        snapshot = self.history.pop()
        self.state.restore(snapshot)
        logger.debug("undo, %d snapshot(s) left", len(self.history))

    def points(self) -> Tuple[Optional[Color], ...]:
        return tuple(self.state.board)

    def winner(self) -> Optional[Color]:
        return evaluate_winner(self.state)

    def phase(self, player: Color) -> Phase:
        return self.state.phase(player)

    @property
    def to_move(self) -> Color:
        return self.state.to_move

    @property
    def pending_removal(self) -> Optional[Color]:
        return self.state.pending_removal

    @property
    def can_undo(self) -> bool:
        return len(self.history) > 0
