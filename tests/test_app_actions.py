"""Tests for app action handlers.

The app is built with __new__ and its collaborators mocked, so handlers can
be exercised without starting Textual.
"""

import random
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from featureboard.app import FeatureBoardApp
from featureboard.models import UNASSIGNED_COLUMN
from featureboard.services import COLUMN_NOT_EMPTY_MESSAGE, BoardStore, normalize
from featureboard.ui.messages import FeatureDropped
from featureboard.ui.widgets import ColumnPickerModal, DeleteColumnModal

PAYLOAD = {
    "statuses": [
        {"id": "c1", "name": "To Do", "color": "#6B7280"},
        {"id": "c2", "name": "Done", "color": "#10B981"},
        {"id": "c3", "name": "Later", "color": "#8B5CF6"},
    ],
    "features": [{"id": "i1", "name": "Login", "statusId": "c1"}],
}


@pytest.fixture
def app() -> FeatureBoardApp:
    app = FeatureBoardApp.__new__(FeatureBoardApp)
    app.notify = MagicMock()
    app.push_screen = MagicMock()
    app.post_message = MagicMock()
    app.board_screen = MagicMock()
    app.store = BoardStore(normalize(PAYLOAD), rng=random.Random(0))
    app.board_loading = False
    return app


class TestFeatureDropped:
    """Tests for applying drops."""

    def test_drop_reassigns_and_refreshes(self, app: FeatureBoardApp):
        app.on_feature_dropped(FeatureDropped("i1", "c2"))

        assert app.store.get_feature("i1").column_id == "c2"
        app.board_screen.show_board.assert_called_once()
        assert app.board_screen.show_board.call_args.kwargs["focus_feature_id"] == "i1"
        app.notify.assert_called_once_with("Moved to Done", timeout=2)

    def test_drop_on_unknown_column_is_silent(self, app: FeatureBoardApp):
        app.on_feature_dropped(FeatureDropped("i1", "nope"))

        assert app.store.get_feature("i1").column_id == "c1"
        app.board_screen.show_board.assert_not_called()
        app.notify.assert_not_called()

    def test_drop_on_same_column_does_nothing(self, app: FeatureBoardApp):
        app.on_feature_dropped(FeatureDropped("i1", "c1"))
        app.board_screen.show_board.assert_not_called()

    def test_drop_of_unknown_feature_notifies_error(self, app: FeatureBoardApp):
        app.on_feature_dropped(FeatureDropped("ghost", "c2"))
        assert app.notify.call_args.kwargs["severity"] == "error"


class TestPickColumn:
    def test_opens_picker_for_current_feature(self, app: FeatureBoardApp):
        app.board_screen.get_current_feature.return_value = app.store.get_feature("i1")

        app.action_pick_column()

        modal = app.push_screen.call_args.args[0]
        assert isinstance(modal, ColumnPickerModal)

    def test_picked_column_posts_drop(self, app: FeatureBoardApp):
        app._handle_column_picked("i1", "c3")

        message = app.post_message.call_args.args[0]
        assert isinstance(message, FeatureDropped)
        assert (message.feature_id, message.column_id) == ("i1", "c3")

    def test_cancelled_picker_posts_nothing(self, app: FeatureBoardApp):
        app._handle_column_picked("i1", None)
        app.post_message.assert_not_called()

    def test_no_feature_no_picker(self, app: FeatureBoardApp):
        app.board_screen.get_current_feature.return_value = None
        app.action_pick_column()
        app.push_screen.assert_not_called()


class TestAddColumn:
    def test_named_column_is_added_and_focused(self, app: FeatureBoardApp):
        app._handle_column_name("  Review ")

        assert app.store.column_count == 4
        new_column = app.store.columns[-1]
        assert new_column.name == "Review"
        kwargs = app.board_screen.show_board.call_args.kwargs
        assert kwargs["focus_column_id"] == new_column.id
        app.notify.assert_called_once_with("Column 'Review' added", timeout=2)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_or_cancelled_adds_nothing(self, app: FeatureBoardApp, name):
        app._handle_column_name(name)
        assert app.store.column_count == 3
        app.board_screen.show_board.assert_not_called()


class TestDeleteColumn:
    def test_occupied_column_refused_without_confirmation(self, app: FeatureBoardApp):
        type(app.board_screen).current_column = PropertyMock(
            return_value=app.store.get_column("c1")
        )

        app.action_delete_column()

        app.push_screen.assert_not_called()
        app.notify.assert_called_once_with(COLUMN_NOT_EMPTY_MESSAGE, severity="warning", timeout=4)
        assert app.store.get_column("c1") is not None

    def test_empty_column_asks_for_confirmation(self, app: FeatureBoardApp):
        type(app.board_screen).current_column = PropertyMock(
            return_value=app.store.get_column("c3")
        )

        app.action_delete_column()

        modal = app.push_screen.call_args.args[0]
        assert isinstance(modal, DeleteColumnModal)
        assert modal.column.id == "c3"
        assert "Later" in modal.title_markup

    def test_confirmed_delete_removes_column(self, app: FeatureBoardApp):
        app._handle_delete_confirm("c3", True)

        assert app.store.get_column("c3") is None
        app.board_screen.show_board.assert_called_once()
        app.notify.assert_called_once_with("Column deleted", timeout=2)

    def test_declined_delete_keeps_column(self, app: FeatureBoardApp):
        app._handle_delete_confirm("c3", False)
        assert app.store.get_column("c3") is not None

    def test_column_filled_after_confirmation_is_refused(self, app: FeatureBoardApp):
        app.store.reassign("i1", "c3")

        app._handle_delete_confirm("c3", True)

        assert app.store.get_column("c3") is not None
        app.notify.assert_called_once_with(COLUMN_NOT_EMPTY_MESSAGE, severity="warning", timeout=4)

    def test_unknown_column_reports_error(self, app: FeatureBoardApp):
        app._handle_delete_confirm("nope", True)
        assert app.notify.call_args.kwargs["severity"] == "error"

    def test_unassigned_lane_cannot_be_deleted(self, app: FeatureBoardApp):
        type(app.board_screen).current_column = PropertyMock(return_value=UNASSIGNED_COLUMN)
        app.action_delete_column()
        app.push_screen.assert_not_called()
        assert app.notify.call_args.kwargs["severity"] == "warning"


class TestLoadingState:
    @pytest.mark.parametrize(
        "action", ["add_column", "delete_column", "move_feature_left", "pick_column"]
    )
    def test_board_actions_disabled_while_loading(self, app: FeatureBoardApp, action):
        app.board_loading = True
        assert app.check_action(action, ()) is False

    def test_board_actions_enabled_after_load(self, app: FeatureBoardApp):
        assert app.check_action("add_column", ()) is True

    def test_navigation_always_enabled(self, app: FeatureBoardApp):
        app.board_loading = True
        assert app.check_action("quit", ()) is True
        assert app.check_action("nav_left", ()) is True

    def test_reload_shows_skeleton_and_starts_worker(self, app: FeatureBoardApp):
        with (
            patch.object(FeatureBoardApp, "refresh_bindings"),
            patch.object(FeatureBoardApp, "run_worker") as run_worker,
        ):
            app.reload_board()

        assert app.board_loading is True
        app.board_screen.show_loading.assert_called_once()
        run_worker.assert_called_once()
        # The coroutine was never scheduled; close it to avoid a warning
        run_worker.call_args.args[0].close()
