"""Win evaluation for Nine Men's Morris."""

from __future__ import annotations

from typing import Optional

from .mechanics import has_legal_action
from .pieces import Color
from .state import GameState


def can_act(state: GameState, player: Color) -> bool:
    """Return True if ``player`` has at least one legal action in ``state``."""
    if state.pending_removal is player:
        # A capture is only owed when something is removable.
        return True
    return has_legal_action(
        state.board,
        player,
        unplaced=state.unplaced_pieces(player),
        flying=state.is_flying(player),
    )


def winner(state: GameState) -> Optional[Color]:
    """Return the winning colour, or None while the game is still open.

    A side that has lost ``capture_limit`` pieces loses outright; this is
    checked for both colours first. Otherwise the player to move loses when
    they have no legal action.
    """
    limit = state.rules.capture_limit
    for color in (Color.BLACK, Color.WHITE):
        if state.removed_pieces(color) >= limit:
            return color.opposite()

    if not can_act(state, state.to_move):
        return state.to_move.opposite()
    return None
