"""Placeholder board shown while the payload is being fetched."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import LoadingIndicator, Static

SKELETON_COLUMNS = 3
SKELETON_CARDS = 3


class LoadingSkeleton(Horizontal):
    """Grey column and card outlines with a spinner."""

    DEFAULT_CSS = """
    LoadingSkeleton {
        height: 1fr;
    }

    LoadingSkeleton .skeleton-column {
        width: 1fr;
        margin: 0 1;
        border: round $surface-lighten-2;
    }

    LoadingSkeleton .skeleton-header {
        height: 1;
        width: 12;
        background: $surface-lighten-2;
        margin: 0 0 1 0;
    }

    LoadingSkeleton .skeleton-card {
        height: 4;
        background: $surface-lighten-1;
        margin: 0 0 1 0;
    }

    LoadingSkeleton LoadingIndicator {
        height: 1;
    }
    """

    def compose(self) -> ComposeResult:
        for _ in range(SKELETON_COLUMNS):
            with Vertical(classes="skeleton-column"):
                yield Static("", classes="skeleton-header")
                for _ in range(SKELETON_CARDS):
                    yield Static("", classes="skeleton-card")
                yield LoadingIndicator()
