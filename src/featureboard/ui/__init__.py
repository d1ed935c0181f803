"""UI components."""

from .messages import FeatureDropped
from .screens.board import BoardScreen
from .widgets.column import KanbanColumn
from .widgets.feature_card import FeatureCard

__all__ = [
    "BoardScreen",
    "FeatureCard",
    "FeatureDropped",
    "KanbanColumn",
]
