from morris.service import HELP_TEXT, GameService


def test_initial_view():
    service = GameService()
    view = service.view()

    assert view.points == [None] * 24
    assert view.to_move == "W"
    assert view.pending_removal is None
    assert view.winner is None
    assert view.history_depth == 0
    assert view.last_action is None
    assert view.colors["W"].phase == "placement"
    assert view.colors["B"].unplaced == 9
    assert service.describe() == "White to place."


def test_submit_updates_view():
    service = GameService()
    view = service.submit("W  P 4")

    assert view.points[4] == "W"
    assert view.to_move == "B"
    assert view.last_action == "W P 4"
    assert view.colors["W"].on_board == 1
    assert view.colors["W"].unplaced == 8
    assert view.history_depth == 1


def test_handle_reports_errors_without_raising():
    service = GameService()

    assert service.handle("undo") == "Error: No action to undo."
    assert service.handle("B P 0").startswith("Error: ")
    assert service.handle("W P x").startswith("Error: Invalid point")
    assert service.handle("W P 25").startswith("Error: ")
    assert service.view().history_depth == 0


def test_handle_commands():
    service = GameService()
    assert service.handle("help") == HELP_TEXT

    output = service.handle("W P 0")
    assert output.splitlines()[0].startswith("W")
    assert output.endswith("Black to place.")

    service.handle("undo")
    assert service.view().points[0] is None
    assert service.view().last_action is None

    service.handle("W P 0")
    assert service.handle("reset").endswith("White to place.")
    assert service.view().history_depth == 0


def test_describe_pending_removal_and_winner():
    service = GameService()
    for text in ("W P 2", "B P 1", "W P 3", "B P 9", "W P 4"):
        service.submit(text)
    assert service.describe() == "White closed a mill and must remove a piece."
    assert service.view().colors["W"].phase == "removal"

    state = service.game.state
    state.pending_removal = None
    state.removed = [0, 7]
    assert service.describe() == "White wins."
    assert service.view().is_finished
