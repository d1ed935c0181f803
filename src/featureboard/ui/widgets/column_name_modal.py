"""Modal for naming a new column."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class ColumnNameModal(ModalScreen[str | None]):
    """Asks for the name of a new column.

    Dismisses with the entered text (the board decides whether it is
    usable) or None when cancelled.
    """

    DEFAULT_CSS = """
    ColumnNameModal {
        align: center middle;
    }

    ColumnNameModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    ColumnNameModal Label {
        width: 100%;
        text-style: bold;
        margin-bottom: 1;
    }

    ColumnNameModal Input {
        margin-bottom: 1;
    }

    ColumnNameModal .buttons {
        width: 100%;
        height: auto;
    }

    ColumnNameModal #add {
        width: 1fr;
    }

    ColumnNameModal Button {
        margin: 0 1 0 0;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Add New Column")
            yield Input(placeholder="Enter column name...", id="column-name")
            with Horizontal(classes="buttons"):
                yield Button("Add Column", id="add", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#column-name", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter adds the column."""
        event.stop()
        self.dismiss(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add":
            self.dismiss(self.query_one("#column-name", Input).value)
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
