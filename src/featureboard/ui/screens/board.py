"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import BoardSnapshot, Column, Feature
from ..messages import FeatureDropped
from ..widgets.column import KanbanColumn
from ..widgets.loading import LoadingSkeleton


class EmptyBoardMessage(Static):
    """Displayed when the board has no columns at all."""

    pass


class BoardScreen(Screen):
    """Main kanban board screen with navigation.

    The screen only renders snapshots handed to it by the app; every change
    to the board goes through the app's store.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_feature = 0
        self._snapshot: BoardSnapshot | None = None
        self._columns: list[KanbanColumn] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="summary", classes="summary-bar")
        with Container(id="board-container"), Horizontal(id="columns"):
            yield LoadingSkeleton()
        yield Footer()

    def on_mount(self) -> None:
        """Start fetching the board once the screen is up."""
        self.app.reload_board()  # pyrefly: ignore[missing-attribute]

    @property
    def snapshot(self) -> BoardSnapshot | None:
        return self._snapshot

    @property
    def column_count(self) -> int:
        """Number of rendered columns (including the unassigned lane)."""
        return len(self._columns)

    def show_loading(self) -> None:
        """Replace the board with the loading skeleton."""
        self._snapshot = None
        self._columns = []
        self._update_summary()
        self.call_after_refresh(self._mount_loading)

    async def _mount_loading(self) -> None:
        container = self.query_one("#columns", Horizontal)
        await container.remove_children()
        await container.mount(LoadingSkeleton())

    def show_board(
        self,
        snapshot: BoardSnapshot,
        focus_feature_id: str | None = None,
        focus_column_id: str | None = None,
    ) -> None:
        """
        Render a board snapshot.

        Args:
            snapshot: Board state to draw
            focus_feature_id: If provided, focus this feature after rendering
            focus_column_id: If provided (and no feature), focus this column.
                             If neither is given the previous position is kept.
        """
        self._snapshot = snapshot
        self._update_summary()
        self.call_after_refresh(self._rebuild_columns, focus_feature_id, focus_column_id)

    async def _rebuild_columns(
        self, focus_feature_id: str | None, focus_column_id: str | None
    ) -> None:
        """Swap the column widgets for ones built from the current snapshot."""
        if self._snapshot is None:
            return

        container = self.query_one("#columns", Horizontal)
        await container.remove_children()

        self._columns = [
            KanbanColumn(lane.column, lane.features) for lane in self._snapshot.visible_lanes()
        ]
        if self._columns:
            await container.mount_all(self._columns)
        else:
            await container.mount(EmptyBoardMessage("No columns yet. Press c to add one."))

        # Cards are composed by now; defer once more so they can take focus
        self.call_after_refresh(self._apply_focus, focus_feature_id, focus_column_id)

    def _apply_focus(self, focus_feature_id: str | None, focus_column_id: str | None) -> None:
        if focus_feature_id:
            position = self._find_feature_position(focus_feature_id)
            if position:
                self._current_column, self._current_feature = position
                self._update_focus()
                return

        if focus_column_id:
            for col_idx, column in enumerate(self._columns):
                if column.column_id == focus_column_id:
                    self._current_column = col_idx
                    self._current_feature = 0
                    self._update_focus()
                    return

        # Fallback: keep the previous position, clamped to what exists now
        self._current_column = max(0, min(self._current_column, self.column_count - 1))
        column = self._get_column(self._current_column)
        if column and column.feature_count > 0:
            self._current_feature = min(self._current_feature, column.feature_count - 1)
        else:
            self._current_feature = 0
        self._update_focus()

    def _find_feature_position(self, feature_id: str) -> tuple[int, int] | None:
        """(column_index, feature_index) of a feature, or None if not shown."""
        for col_idx, column in enumerate(self._columns):
            feature_idx = column.index_of(feature_id)
            if feature_idx >= 0:
                return (col_idx, feature_idx)
        return None

    def _update_summary(self) -> None:
        summary = self.query_one("#summary", Static)
        if self._snapshot is None:
            summary.update("[dim]Loading board…[/]")
            return
        summary.update(
            f"[b]{self._snapshot.feature_count}[/] [dim]Tasks[/]   "
            f"[green]●[/] [b]{self._snapshot.column_count}[/] [dim]Columns[/]"
        )

    # Navigation

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        if not self._columns:
            return
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))

        if new_column != self._current_column:
            self._current_column = new_column
            column = self._get_column(new_column)
            if column and column.feature_count > 0:
                self._current_feature = min(self._current_feature, column.feature_count - 1)
            else:
                self._current_feature = 0
            self._update_focus()

    def navigate_feature(self, delta: int) -> None:
        """Navigate between features in the current column."""
        column = self._get_column(self._current_column)
        if column is None or column.feature_count == 0:
            return

        new_feature = max(0, min(self._current_feature + delta, column.feature_count - 1))
        if new_feature != self._current_feature:
            self._current_feature = new_feature
            self._update_focus()

    def navigate_to_feature(self, index: int) -> None:
        """Navigate to a specific feature index (-1 for last)."""
        column = self._get_column(self._current_column)
        if column is None or column.feature_count == 0:
            return

        if index < 0:
            index = column.feature_count - 1
        self._current_feature = min(index, column.feature_count - 1)
        self._update_focus()

    def _get_column(self, index: int) -> KanbanColumn | None:
        if 0 <= index < len(self._columns):
            return self._columns[index]
        return None

    def _update_focus(self) -> None:
        """Focus the current card, or the column itself when it is empty."""
        column = self._get_column(self._current_column)
        if column is None:
            return
        if not column.focus_feature(self._current_feature):
            column.focus()

    def get_current_feature(self) -> Feature | None:
        """Get the currently focused feature."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_feature(self._current_feature)
        return None

    @property
    def current_column(self) -> Column | None:
        """The column under the cursor."""
        column = self._get_column(self._current_column)
        return column.column if column else None

    # Dropping

    def drop_on_neighbor(self, delta: int) -> bool:
        """Drop the current feature on the previous (-1) or next (+1) column.

        Returns:
            True if a drop was posted, False at the board edge or with no feature.
        """
        feature = self.get_current_feature()
        if feature is None or self._snapshot is None:
            return False

        columns = self._snapshot.columns
        if not columns:
            return False

        ids = [col.id for col in columns]
        if feature.column_id in ids:
            target_idx = ids.index(feature.column_id) + delta
        else:
            # Unassigned features enter the board from the left edge
            target_idx = 0 if delta > 0 else -1

        if target_idx < 0 or target_idx >= len(columns):
            return False

        self.post_message(FeatureDropped(feature.id, columns[target_idx].id))
        return True
