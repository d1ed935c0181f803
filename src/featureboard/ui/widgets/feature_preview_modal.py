"""Feature preview modal."""

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from ...models import Feature
from ..colors import accent_style


def feature_details(feature: Feature) -> Table:
    """Two-column table of everything known about a feature."""
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold", no_wrap=True)
    table.add_column()

    def row(label: str, value: str | None) -> None:
        table.add_row(label, Text(value or "—"))

    row("ID", feature.id)
    table.add_row(
        "Column", Text(feature.column.name, style=accent_style(feature.column.color))
    )
    row("Start", feature.start_at.strftime("%Y-%m-%d") if feature.start_at else None)
    row("End", feature.end_at.strftime("%Y-%m-%d") if feature.end_at else None)
    days = feature.duration_days
    row("Duration", f"{days} days" if days is not None else None)
    row("Owner", feature.owner_name)
    row("Initiative", feature.initiative_name)
    row("Release", feature.release_name)
    return table


class FeaturePreviewModal(ModalScreen[None]):
    """Read-only details for one feature. Any key closes it."""

    DEFAULT_CSS = """
    FeaturePreviewModal {
        align: center middle;
    }

    FeaturePreviewModal > VerticalScroll {
        width: 70;
        height: auto;
        max-height: 80%;
        border: solid $primary;
        background: $surface;
    }

    FeaturePreviewModal #title-bar {
        height: 1;
        width: 100%;
        background: $primary-darken-2;
        color: $text;
        text-align: center;
    }

    FeaturePreviewModal #content {
        width: 100%;
        height: auto;
        padding: 1 2;
    }

    FeaturePreviewModal #footer-bar {
        height: 1;
        width: 100%;
        color: $text-muted;
        text-align: center;
    }
    """

    def __init__(self, feature: Feature) -> None:
        super().__init__()
        self._feature = feature

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(Text(self._feature.display_name), id="title-bar")
            yield Static(feature_details(self._feature), id="content")
            yield Static("[any key] Close", id="footer-bar")

    def on_key(self, event) -> None:
        """Any key dismisses the modal."""
        event.stop()
        self.dismiss(None)
