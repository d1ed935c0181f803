"""featureboard TUI Application."""

from __future__ import annotations

import logging
import random
from functools import partial

from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen

from .config import Settings
from .services import (
    COLUMN_NOT_EMPTY_MESSAGE,
    BoardStore,
    ColumnNotEmptyError,
    ColumnNotFoundError,
    FeatureNotFoundError,
    load_board_async,
)
from .sources import PayloadSource, source_from_settings
from .ui.messages import FeatureDropped
from .ui.screens.board import BoardScreen
from .ui.widgets import (
    ColumnNameModal,
    ColumnPickerModal,
    DeleteColumnModal,
    FeaturePreviewModal,
    HelpScreen,
)

logger = logging.getLogger(__name__)

# Actions that need a loaded board; hidden while the payload is in flight
BOARD_ACTIONS = {
    "move_feature_left",
    "move_feature_right",
    "pick_column",
    "preview_feature",
    "add_column",
    "delete_column",
}


class FeatureBoardApp(App):
    """featureboard - Terminal Kanban for features."""

    TITLE = "featureboard"
    SUB_TITLE = "Project Dashboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("r", "refresh", "Reload", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Feature", show=False),
        Binding("k", "nav_up", "↑ Feature", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Feature", show=False),
        Binding("up", "nav_up", "↑ Feature", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Jump navigation
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        Binding("home", "nav_first", "First", show=False),
        Binding("end", "nav_last", "Last", show=False),
        # Feature actions
        Binding("enter", "preview_feature", "Details", show=False),
        Binding("H", "move_feature_left", "Move ←", show=False),
        Binding("L", "move_feature_right", "Move →", show=False),
        Binding("shift+left", "move_feature_left", "Move ←", show=False),
        Binding("shift+right", "move_feature_right", "Move →", show=False),
        Binding("m", "pick_column", "Move to…", show=True),
        # Column actions
        Binding("c", "add_column", "Add Column", show=True),
        Binding("x", "delete_column", "Delete Column", show=True),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        source: PayloadSource | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.source = source or source_from_settings(self.settings)
        self._rng = random.Random(self.settings.seed) if self.settings.seed is not None else None
        self.store = BoardStore.empty(rng=self._rng)
        self.board_loading = True
        self.board_screen = BoardScreen()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(self.board_screen)

    def on_unmount(self) -> None:
        close = getattr(self.source, "close", None)
        if close is not None:
            close()

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Board actions are unavailable until the payload has been ingested."""
        if action in BOARD_ACTIONS and self.board_loading:
            return False
        return True

    # Loading

    def reload_board(self) -> None:
        """Fetch the payload again and replace the board."""
        self.board_loading = True
        self.refresh_bindings()
        self.board_screen.show_loading()
        self.run_worker(self._load_board(), exclusive=True, group="load")

    async def _load_board(self) -> None:
        store = await load_board_async(
            self.source, self.settings.fetch_timeout, rng=self._rng
        )
        self.store = store
        self.board_loading = False
        self.refresh_bindings()
        self.board_screen.show_board(store.snapshot())

        if store.column_count == 0 and store.feature_count == 0:
            self.notify(
                f"No board data from {self.source.describe()}", severity="warning", timeout=4
            )

    def _show_board(
        self, focus_feature_id: str | None = None, focus_column_id: str | None = None
    ) -> None:
        self.board_screen.show_board(
            self.store.snapshot(),
            focus_feature_id=focus_feature_id,
            focus_column_id=focus_column_id,
        )

    def action_refresh(self) -> None:
        """Reload the board from its source."""
        self.reload_board()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_left(self) -> None:
        """Navigate to previous column."""
        self.board_screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        """Navigate to next column."""
        self.board_screen.navigate_column(1)

    def action_nav_up(self) -> None:
        """Navigate to previous feature."""
        self.board_screen.navigate_feature(-1)

    def action_nav_down(self) -> None:
        """Navigate to next feature."""
        self.board_screen.navigate_feature(1)

    def action_nav_first(self) -> None:
        """Navigate to first feature in column."""
        self.board_screen.navigate_to_feature(0)

    def action_nav_last(self) -> None:
        """Navigate to last feature in column."""
        self.board_screen.navigate_to_feature(-1)

    # Feature actions
    def action_preview_feature(self) -> None:
        """Show feature details."""
        feature = self.board_screen.get_current_feature()
        if feature is None:
            return
        self.push_screen(FeaturePreviewModal(feature))

    def action_move_feature_left(self) -> None:
        """Drop current feature on the previous column."""
        self.board_screen.drop_on_neighbor(-1)

    def action_move_feature_right(self) -> None:
        """Drop current feature on the next column."""
        self.board_screen.drop_on_neighbor(1)

    def action_pick_column(self) -> None:
        """Choose a column to drop the current feature on."""
        feature = self.board_screen.get_current_feature()
        if feature is None:
            return
        if not self.store.columns:
            self.notify("No columns to move to", severity="warning", timeout=2)
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ColumnPickerModal(feature.display_name, self.store.columns, feature.column_id),
            callback=partial(self._handle_column_picked, feature.id),
        )

    def _handle_column_picked(self, feature_id: str, column_id: str | None) -> None:
        if column_id:
            self.post_message(FeatureDropped(feature_id, column_id))

    def on_feature_dropped(self, message: FeatureDropped) -> None:
        """Apply a drop: reassign the feature to the target column."""
        before = self.store.get_feature(message.feature_id)
        try:
            moved = self.store.reassign(message.feature_id, message.column_id)
        except FeatureNotFoundError as e:
            logger.error("Drop of unknown feature ignored: %s", e)
            self.notify(str(e), severity="error", timeout=3)
            return

        if moved is None or before is None or moved.column_id == before.column_id:
            return

        self._show_board(focus_feature_id=moved.id)
        self.notify(f"Moved to {moved.column.name}", timeout=2)

    # Column actions
    def action_add_column(self) -> None:
        """Ask for a name and add a column."""
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ColumnNameModal(),
            callback=self._handle_column_name,
        )

    def _handle_column_name(self, name: str | None) -> None:
        if name is None:
            return

        column_id = self.store.add_column(name)
        if column_id is None:
            # Blank name: nothing to add
            return

        self._show_board(focus_column_id=column_id)
        self.notify(f"Column '{name.strip()}' added", timeout=2)

    def action_delete_column(self) -> None:
        """Delete the current column (with confirmation)."""
        column = self.board_screen.current_column
        if column is None:
            return
        if column.is_unassigned:
            self.notify("The Unassigned lane cannot be deleted", severity="warning", timeout=3)
            return
        if self.store.items_in(column.id):
            # Occupied columns are refused without asking
            self.notify(COLUMN_NOT_EMPTY_MESSAGE, severity="warning", timeout=4)
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            DeleteColumnModal(column),
            callback=partial(self._handle_delete_confirm, column.id),
        )

    def _handle_delete_confirm(self, column_id: str, confirmed: bool | None) -> None:
        """Handle delete confirmation result."""
        if not confirmed:
            return

        try:
            self.store.remove_column(column_id)
        except ColumnNotEmptyError as e:
            self.notify(str(e), severity="warning", timeout=4)
            return
        except ColumnNotFoundError as e:
            logger.warning("Delete of unknown column ignored: %s", e)
            self.notify(str(e), severity="error", timeout=3)
            return

        self._show_board()
        self.notify("Column deleted", timeout=2)

    def action_escape(self) -> None:
        """Dismiss the top modal, if any."""
        screen = self.screen
        if isinstance(screen, ModalScreen):
            screen.dismiss()


def run(settings: Settings | None = None) -> None:
    """Run the featureboard application."""
    app = FeatureBoardApp(settings)
    app.run()
