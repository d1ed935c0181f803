"""Messages posted by board widgets."""

from textual.message import Message


class FeatureDropped(Message):
    """A feature was dropped onto a column.

    Carries the column id, never its display name, so renamed or
    same-named columns resolve correctly.
    """

    def __init__(self, feature_id: str, column_id: str) -> None:
        super().__init__()
        self.feature_id = feature_id
        self.column_id = column_id
