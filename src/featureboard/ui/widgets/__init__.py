"""Widget components."""

from ..screens.help import HelpScreen
from .column import EmptyColumnMessage, KanbanColumn
from .column_name_modal import ColumnNameModal
from .column_picker import ColumnPickerModal
from .delete_column_modal import DeleteColumnModal
from .feature_card import FeatureCard
from .feature_preview_modal import FeaturePreviewModal
from .loading import LoadingSkeleton

__all__ = [
    "ColumnNameModal",
    "ColumnPickerModal",
    "DeleteColumnModal",
    "EmptyColumnMessage",
    "FeatureCard",
    "FeaturePreviewModal",
    "HelpScreen",
    "KanbanColumn",
    "LoadingSkeleton",
]
