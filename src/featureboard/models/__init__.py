"""Data models."""

from .board import BoardOrder, BoardSnapshot, Lane
from .column import (
    ACCENT_PALETTE,
    UNASSIGNED_COLUMN,
    UNASSIGNED_COLUMN_ID,
    AccentTriple,
    Column,
)
from .feature import Feature, label_of
from .payload import BoardPayload, RawFeature, RawStatus

__all__ = [
    "ACCENT_PALETTE",
    "UNASSIGNED_COLUMN",
    "UNASSIGNED_COLUMN_ID",
    "AccentTriple",
    "BoardOrder",
    "BoardPayload",
    "BoardSnapshot",
    "Column",
    "Feature",
    "Lane",
    "RawFeature",
    "RawStatus",
    "label_of",
]
