import pytest

from morris.game import Game
from morris.pieces import Color
from morris.rules_schema import DEFAULT_RULES


@pytest.fixture
def position():
    """Build a game from an explicit board instead of replaying actions.

    Removed counters default to whatever keeps every piece accounted for.
    """

    def build(
        white=(),
        black=(),
        *,
        to_move=Color.WHITE,
        unplaced=(0, 0),
        removed=None,
        pending=None,
        rules=DEFAULT_RULES,
    ):
        game = Game.new(rules)
        state = game.state
        for point in white:
            state.board[point] = Color.WHITE
        for point in black:
            state.board[point] = Color.BLACK
        state.unplaced = list(unplaced)
        if removed is None:
            removed = [
                rules.pieces_per_player - state.unplaced[color.index] - state.pieces_on_board(color)
                for color in (Color.WHITE, Color.BLACK)
            ]
        state.removed = list(removed)
        state.to_move = to_move
        state.pending_removal = pending
        return game

    return build
