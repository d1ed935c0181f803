"""Feature card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static

from ...models import Feature
from ..colors import accent_style


class FeatureCard(Widget, can_focus=True):
    """A feature card displayed in a column."""

    def __init__(self, feature: Feature, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._feature = feature

    @property
    def feature(self) -> Feature:
        """Get the feature for this card."""
        return self._feature

    def compose(self) -> ComposeResult:
        """Create card layout."""
        color = accent_style(self._feature.column.color)

        # Initiative and owner on the top line
        with Horizontal(classes="feature-meta"):
            yield Static(f"[{color}]▍[/]{self._format_initiative()}", classes="feature-initiative")
            if self._feature.owner_initials:
                initials = escape(self._feature.owner_initials)
                yield Static(f"[b]{initials}[/]", classes="feature-owner")

        yield Static(
            escape(self._truncate(self._feature.display_name, 40)), classes="feature-title"
        )
        yield Static(self._format_dates(), classes="feature-dates")

        release = self._format_release()
        if release:
            yield Static(release, classes="feature-release")

    def _format_initiative(self) -> str:
        initiative = self._feature.initiative_name
        if not initiative:
            return ""
        return f"[dim]{escape(self._truncate(initiative.upper(), 30))}[/]"

    def _format_dates(self) -> str:
        """Start date and duration, e.g. 'Jan 15 · 12 days'."""
        text = f"[dim]{self._feature.short_start}[/]"
        days = self._feature.duration_days
        if days is not None:
            text += f" [dim]·[/] {days} days"
        return text

    def _format_release(self) -> str:
        release = self._feature.release_name
        if not release:
            return ""
        return f"[{accent_style(self._feature.column.color)}]●[/] {escape(release)}"

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
