"""Feature domain model."""

import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..utils.datetime import short_date
from .column import Column


def coerce_id(value: Any) -> Any:
    """Accept numeric identifiers by turning them into strings."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


def label_of(value: Any) -> str | None:
    """Display label of an opaque payload value.

    Records give their `name`, plain strings are their own label and anything
    else has no label. The value itself is never validated.
    """
    if isinstance(value, Mapping):
        value = value.get("name")
    if value is None or isinstance(value, (Mapping, list, bool)):
        return None
    label = str(value).strip()
    return label or None


class Feature(BaseModel):
    """A unit of work shown as a card in exactly one column.

    `column` is a copy of the column the feature belongs to and always has
    `column.id == column_id`. Use `moved_to` to change both at once.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    start_at: datetime | None = None  # None when the payload date was unparseable
    end_at: datetime | None = None
    column_id: str
    column: Column

    # Carried through untouched; read them via the *_name properties
    owner: Any = None
    initiative: Any = None
    release: Any = None

    def moved_to(self, column: Column) -> "Feature":
        """Return a copy of this feature assigned to `column`."""
        return self.model_copy(update={"column_id": column.id, "column": column})

    @property
    def display_name(self) -> str:
        return self.name or self.id

    @property
    def duration_days(self) -> int | None:
        """Whole days between start and end, rounded up."""
        if self.start_at is None or self.end_at is None:
            return None
        seconds = (self.end_at - self.start_at).total_seconds()
        return math.ceil(seconds / 86400)

    @property
    def short_start(self) -> str:
        return short_date(self.start_at)

    @property
    def owner_name(self) -> str | None:
        return label_of(self.owner)

    @property
    def initiative_name(self) -> str | None:
        return label_of(self.initiative)

    @property
    def release_name(self) -> str | None:
        return label_of(self.release)

    @property
    def owner_initials(self) -> str:
        return (self.owner_name or "")[:2]
