"""Board state models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .column import UNASSIGNED_COLUMN, Column
from .feature import Feature


class BoardOrder(BaseModel):
    """Arrival order of feature ids within each column."""

    columns: dict[str, list[str]] = Field(default_factory=dict)

    def ensure_column(self, column_id: str) -> None:
        """Ensure a column exists in the order."""
        if column_id not in self.columns:
            self.columns[column_id] = []

    def drop_column(self, column_id: str) -> None:
        """Forget a column. Callers must have emptied it first."""
        self.columns.pop(column_id, None)

    def get_position(self, feature_id: str, column_id: str) -> int:
        """Get position of feature in its column, or -1 if not found."""
        column = self.columns.get(column_id, [])
        try:
            return column.index(feature_id)
        except ValueError:
            return -1

    def add_feature(self, feature_id: str, column_id: str) -> None:
        """Append feature to the end of a column."""
        self.ensure_column(column_id)

        # Remove from any existing column first
        self.remove_feature(feature_id)
        self.columns[column_id].append(feature_id)

    def remove_feature(self, feature_id: str) -> None:
        """Remove feature from all columns."""
        for column in self.columns.values():
            if feature_id in column:
                column.remove(feature_id)

    def ids_in(self, column_id: str) -> list[str]:
        return list(self.columns.get(column_id, []))


class Lane(BaseModel):
    """One column together with the features currently in it."""

    model_config = ConfigDict(frozen=True)

    column: Column
    features: tuple[Feature, ...] = ()

    @property
    def count(self) -> int:
        return len(self.features)


class BoardSnapshot(BaseModel):
    """Immutable view of the whole board handed to the rendering layer."""

    model_config = ConfigDict(frozen=True)

    lanes: tuple[Lane, ...] = ()
    unassigned: tuple[Feature, ...] = ()

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(lane.column for lane in self.lanes)

    @property
    def column_count(self) -> int:
        return len(self.lanes)

    @property
    def feature_count(self) -> int:
        return sum(lane.count for lane in self.lanes) + len(self.unassigned)

    @property
    def is_empty(self) -> bool:
        return not self.lanes and not self.unassigned

    def get_lane(self, column_id: str) -> Lane | None:
        """Get the lane for a column id, including the unassigned lane."""
        for lane in self.visible_lanes():
            if lane.column.id == column_id:
                return lane
        return None

    def visible_lanes(self) -> list[Lane]:
        """Lanes in display order; the unassigned lane only when it holds features."""
        lanes = list(self.lanes)
        if self.unassigned:
            lanes.append(Lane(column=UNASSIGNED_COLUMN, features=self.unassigned))
        return lanes
