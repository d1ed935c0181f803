"""Kanban column widget."""

from rich.markup import escape
from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Column, Feature
from ..colors import accent_style
from .feature_card import FeatureCard


class FeatureListScroll(VerticalScroll):
    """Scroll container for feature lists.

    Raises SkipAction for navigation keys so they bubble up to the App
    for card navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no features."""

    pass


class KanbanColumn(Widget, can_focus=True):
    """A single column in the kanban board."""

    def __init__(
        self,
        column: Column,
        features: tuple[Feature, ...] = (),
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._column = column
        self._features = features
        self._cards: list[FeatureCard] = []

    @property
    def column(self) -> Column:
        return self._column

    @property
    def column_id(self) -> str:
        return self._column.id

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header")
        with FeatureListScroll(classes="column-content"):
            if not self._features:
                yield EmptyColumnMessage("No items")
            for feature in self._features:
                card = FeatureCard(feature)
                self._cards.append(card)
                yield card

    def on_mount(self) -> None:
        """Draw the accent along the top edge."""
        self.styles.border_top = ("heavy", accent_style(self._column.color))
        if self._column.is_unassigned:
            self.add_class("-unassigned")

    @property
    def _header_text(self) -> str:
        """Header text with accent dot and styled feature count."""
        dot = f"[{accent_style(self._column.color)}]●[/]"
        return f"{dot} {escape(self._column.name)} [dim]({len(self._features)})[/]"

    @property
    def features(self) -> tuple[Feature, ...]:
        """Get the features in this column."""
        return self._features

    @property
    def feature_count(self) -> int:
        return len(self._features)

    def index_of(self, feature_id: str) -> int:
        """Position of a feature in this column, or -1."""
        for i, feature in enumerate(self._features):
            if feature.id == feature_id:
                return i
        return -1

    def focus_feature(self, index: int) -> bool:
        """
        Focus the card at the given index.

        Returns:
            True if a card was focused, False otherwise
        """
        if index < 0 or index >= len(self._cards):
            return False

        card = self._cards[index]
        card.focus()
        card.scroll_visible()
        return True

    def get_feature(self, index: int) -> Feature | None:
        """Get feature at index."""
        if 0 <= index < len(self._features):
            return self._features[index]
        return None
