"""Confirmation dialog for deleting a column."""

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from ...models import Column
from ..colors import accent_style


class DeleteColumnModal(ModalScreen[bool]):
    """Asks before removing an empty column.

    Dismisses with True to delete. Cancel holds the initial focus, so a
    stray Enter keeps the column.
    """

    DEFAULT_CSS = """
    DeleteColumnModal {
        align: center middle;
    }

    DeleteColumnModal > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $error;
    }

    DeleteColumnModal .delete-title {
        width: 100%;
        text-style: bold;
    }

    DeleteColumnModal .delete-body {
        width: 100%;
        color: $text-muted;
        margin: 1 0;
    }

    DeleteColumnModal .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    DeleteColumnModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("y", "confirm", "Delete"),
        Binding("n", "cancel", "Keep"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, column: Column) -> None:
        super().__init__()
        self.column = column

    @property
    def title_markup(self) -> str:
        dot = f"[{accent_style(self.column.color)}]●[/]"
        return f"Delete column {dot} {escape(self.column.name)}?"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.title_markup, classes="delete-title")
            yield Static(
                "The column is empty. Removing it cannot be undone.", classes="delete-body"
            )
            with Center(classes="buttons"):
                yield Button("Delete", id="delete", variant="error")
                yield Button("Cancel", id="cancel", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#cancel", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "delete")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
