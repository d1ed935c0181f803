"""Service layer for board state."""

from .board_loader import fetch_payload, load_board, load_board_async
from .board_store import (
    COLUMN_NOT_EMPTY_MESSAGE,
    BoardError,
    BoardStore,
    ColumnNotEmptyError,
    ColumnNotFoundError,
    FeatureNotFoundError,
)
from .ingest import IngestionError, NormalizedBoard, normalize, parse_payload

__all__ = [
    "COLUMN_NOT_EMPTY_MESSAGE",
    "BoardError",
    "BoardStore",
    "ColumnNotEmptyError",
    "ColumnNotFoundError",
    "FeatureNotFoundError",
    "IngestionError",
    "NormalizedBoard",
    "fetch_payload",
    "load_board",
    "load_board_async",
    "normalize",
    "parse_payload",
]
