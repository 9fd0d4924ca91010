import pytest

from morris.game import Game
from morris.pieces import Color
from morris.state import IllegalAction, OutOfTurn, Phase, PointOutOfRange


def test_new_game_is_empty():
    game = Game.new()

    assert game.points() == (None,) * 24
    assert game.to_move is Color.WHITE
    assert game.state.unplaced == [9, 9]
    assert game.state.removed == [0, 0]
    assert game.pending_removal is None
    assert not game.can_undo
    assert game.winner() is None
    assert game.phase(Color.WHITE) is Phase.PLACEMENT


def test_turns_alternate_during_placement():
    game = Game()
    game.apply("W P 0")
    assert game.points()[0] is Color.WHITE
    assert game.to_move is Color.BLACK
    assert game.state.unplaced_pieces(Color.WHITE) == 8

    game.apply("B P 1")
    assert game.points()[1] is Color.BLACK
    assert game.to_move is Color.WHITE


def test_acting_out_of_turn_rejected():
    game = Game()
    with pytest.raises(OutOfTurn):
        game.apply("B P 0")

    game.apply("W P 0")
    with pytest.raises(OutOfTurn):
        game.apply("W P 1")


def test_cannot_place_on_occupied_point():
    game = Game()
    game.apply("W P 0")
    with pytest.raises(IllegalAction):
        game.apply("B P 0")


@pytest.mark.parametrize("text", ["W P 24", "W P -1", "W P 100"])
def test_out_of_range_placement_rejected(text):
    game = Game()
    with pytest.raises(PointOutOfRange):
        game.apply(text)


def test_cannot_move_or_remove_while_placing():
    game = Game()
    game.apply("W P 0")
    with pytest.raises(OutOfTurn):
        game.apply("B M 0 1")
    with pytest.raises(OutOfTurn):
        game.apply("B R 0")


def test_wrong_player_is_reported_before_bad_point():
    game = Game()
    with pytest.raises(OutOfTurn):
        game.apply("B P 99")


def test_closing_a_mill_demands_a_removal():
    game = Game()
    for text in ("W P 2", "B P 1", "W P 3", "B P 9"):
        game.apply(text)

    game.apply("W P 4")
    assert game.pending_removal is Color.WHITE
    assert game.to_move is Color.WHITE
    assert game.phase(Color.WHITE) is Phase.REMOVAL

    for text in ("B P 10", "W P 10", "B R 2", "W M 4 5"):
        with pytest.raises(OutOfTurn):
            game.apply(text)
    with pytest.raises(IllegalAction):
        game.apply("W R 3")
    with pytest.raises(IllegalAction):
        game.apply("W R 0")

    game.apply("W R 1")
    assert game.points()[1] is None
    assert game.state.removed_pieces(Color.BLACK) == 1
    assert game.pending_removal is None
    assert game.to_move is Color.BLACK


def test_all_pieces_placed_switches_to_movement():
    game = Game()
    white = [0, 2, 9, 11, 13, 16, 20, 6, 23]
    black = [1, 3, 5, 7, 8, 10, 12, 14, 22]
    for w, b in zip(white, black):
        game.apply(f"W P {w}")
        game.apply(f"B P {b}")

    assert game.state.unplaced == [0, 0]
    assert game.pending_removal is None
    assert game.phase(Color.WHITE) is Phase.MOVEMENT
    with pytest.raises(OutOfTurn):
        game.apply("W P 4")
