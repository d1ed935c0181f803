"""Column picker modal: choose where to drop a feature."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from ...models import Column
from ..colors import accent_style


class ColumnPickerModal(ModalScreen[str | None]):
    """Modal listing the board's columns; dismisses with the chosen column id."""

    DEFAULT_CSS = """
    ColumnPickerModal {
        align: center middle;
    }

    ColumnPickerModal > Vertical {
        width: 40;
        height: auto;
        max-height: 80%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    ColumnPickerModal Label {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    ColumnPickerModal OptionList {
        height: auto;
        max-height: 12;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, feature_name: str, columns: tuple[Column, ...], current_id: str) -> None:
        """Initialize the picker.

        Args:
            feature_name: Name of the feature being moved, shown as the title
            columns: Columns in board order
            current_id: Column the feature is in now; listed but disabled
        """
        super().__init__()
        self._feature_name = feature_name
        self._columns = columns
        self._current_id = current_id

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(f"Move '{escape(self._feature_name)}' to")
            option_list = OptionList(id="column-list")
            # Options are keyed by column id so duplicate names stay distinct
            for col in self._columns:
                label = f"[{accent_style(col.color)}]●[/] {escape(col.name)}"
                option_list.add_option(
                    Option(label, id=col.id, disabled=col.id == self._current_id)
                )
            yield option_list

    def on_mount(self) -> None:
        """Focus the option list on mount."""
        self.query_one(OptionList).focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Handle option selection via click or enter."""
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        """Cancel selection."""
        self.dismiss(None)
