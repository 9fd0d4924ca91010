"""Text notation for actions.

Grammar (whitespace separated)::

    <P> P <point>         place, e.g. "W P 0"
    <P> M <from> <to>     move, e.g. "B M 0 1"
    <P> R <point>         remove, e.g. "W R 5"

where ``<P>`` is ``W`` or ``B``. Points are parsed as integers only; whether
they lie on the board is decided by the rules engine.
"""

from __future__ import annotations

from typing import Dict, List

from .actions import ARITY, Action, ActionType
from .pieces import Color


class NotationError(ValueError):
    """Raised when an action string cannot be parsed."""


ACTION_TOKENS: Dict[str, ActionType] = {
    "P": ActionType.PLACE,
    "M": ActionType.MOVE,
    "R": ActionType.REMOVE,
}
TOKEN_FOR_ACTION: Dict[ActionType, str] = {kind: token for token, kind in ACTION_TOKENS.items()}

_POINT_LABELS = {
    ActionType.PLACE: ("point",),
    ActionType.MOVE: ("from point", "to point"),
    ActionType.REMOVE: ("point",),
}


def parse_action(text: str) -> Action:
    parts = text.split()
    if len(parts) < 3:
        raise NotationError(f"Invalid action format: {text!r}")

    try:
        player = Color.from_symbol(parts[0])
    except ValueError as exc:
        raise NotationError(f"Invalid player: {parts[0]!r}") from exc

    action_type = ACTION_TOKENS.get(parts[1])
    if action_type is None:
        raise NotationError(f"Invalid action type: {parts[1]!r}")

    arguments = parts[2:]
    if len(arguments) != ARITY[action_type]:
        raise NotationError(
            f"{action_type.name.title()} expects {ARITY[action_type]} point(s), got {len(arguments)}."
        )

    points: List[int] = []
    for label, raw in zip(_POINT_LABELS[action_type], arguments):
        try:
            points.append(int(raw))
        except ValueError as exc:
            raise NotationError(f"Invalid {label}: {raw!r}") from exc

    return Action(player, action_type, tuple(points))


def format_action(action: Action) -> str:
    fields = [action.player.symbol, TOKEN_FOR_ACTION[action.action_type]]
    fields.extend(str(point) for point in action.points)
    return " ".join(fields)
