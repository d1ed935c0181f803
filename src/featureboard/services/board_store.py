"""In-memory board state: columns, features and the mutations between them."""

from __future__ import annotations

import logging
import random
import threading
import time
from collections.abc import Callable

from ..models import (
    ACCENT_PALETTE,
    UNASSIGNED_COLUMN_ID,
    AccentTriple,
    BoardOrder,
    BoardSnapshot,
    Column,
    Feature,
    Lane,
)
from .ingest import NormalizedBoard

logger = logging.getLogger(__name__)

COLUMN_NOT_EMPTY_MESSAGE = (
    "Cannot delete column with existing items. Please move or delete items first."
)


class BoardError(Exception):
    """Base exception for board mutations."""

    pass


class FeatureNotFoundError(BoardError):
    """No feature with the given id."""

    def __init__(self, feature_id: str) -> None:
        super().__init__(f"Feature not found: {feature_id}")
        self.feature_id = feature_id


class ColumnNotFoundError(BoardError):
    """No column with the given id."""

    def __init__(self, column_id: str) -> None:
        super().__init__(f"Column not found: {column_id}")
        self.column_id = column_id


class ColumnNotEmptyError(BoardError):
    """The column still holds features and cannot be removed."""

    def __init__(self, column_id: str, feature_count: int) -> None:
        super().__init__(COLUMN_NOT_EMPTY_MESSAGE)
        self.column_id = column_id
        self.feature_count = feature_count


class BoardStore:
    """Owns the canonical board state.

    Columns keep their left-to-right order, features keep their global arrival
    order, and a `BoardOrder` tracks the order of feature ids inside each
    column. Mutations are serialized through a single lock; readers get
    tuples or frozen snapshots and never see a half-applied change.

    Args:
        board: Initial columns and features, usually from `normalize`.
        rng: Source of randomness for accent selection.
        clock: Returns seconds since the epoch; used to mint column ids.
    """

    def __init__(
        self,
        board: NormalizedBoard | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        board = board or NormalizedBoard.empty()
        self._rng = rng or random.Random()
        self._clock = clock or time.time
        self._lock = threading.Lock()

        self._columns: list[Column] = list(board.columns)
        self._features: dict[str, Feature] = {}
        self._order = BoardOrder()
        self._issued_ids: set[str] = {col.id for col in self._columns}
        self._last_minted = 0

        for col in self._columns:
            self._order.ensure_column(col.id)
        for feature in board.features:
            self._features[feature.id] = feature
            self._order.add_feature(feature.id, feature.column_id)

    @classmethod
    def empty(cls, rng: random.Random | None = None) -> BoardStore:
        """Create a store with no columns and no features."""
        return cls(NormalizedBoard.empty(), rng=rng)

    # Reads

    @property
    def columns(self) -> tuple[Column, ...]:
        """Columns in board order."""
        return tuple(self._columns)

    @property
    def features(self) -> tuple[Feature, ...]:
        """All features in global arrival order."""
        return tuple(self._features.values())

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def feature_count(self) -> int:
        return len(self._features)

    @property
    def unassigned(self) -> tuple[Feature, ...]:
        """Features ingested while the board had no columns."""
        return self.items_in(UNASSIGNED_COLUMN_ID)

    def get_column(self, column_id: str) -> Column | None:
        for col in self._columns:
            if col.id == column_id:
                return col
        return None

    def get_feature(self, feature_id: str) -> Feature | None:
        return self._features.get(feature_id)

    def items_in(self, column_id: str) -> tuple[Feature, ...]:
        """Features currently in a column, in arrival order."""
        return tuple(self._features[fid] for fid in self._order.ids_in(column_id))

    def snapshot(self) -> BoardSnapshot:
        """Immutable view of the board for rendering."""
        with self._lock:
            lanes = tuple(
                Lane(column=col, features=self.items_in(col.id)) for col in self._columns
            )
            return BoardSnapshot(lanes=lanes, unassigned=self.unassigned)

    # Mutations

    def reassign(self, feature_id: str, target_column_id: str) -> Feature | None:
        """Move a feature to another column.

        The feature's `column_id` and `column` snapshot are replaced together
        and it is appended to the end of the target column. A target that is
        not a known column leaves the board untouched.

        Returns:
            The feature after the move, or None if the target column is unknown.

        Raises:
            FeatureNotFoundError: If no feature has `feature_id`.
        """
        with self._lock:
            feature = self._features.get(feature_id)
            if feature is None:
                raise FeatureNotFoundError(feature_id)

            target = self.get_column(target_column_id)
            if target is None:
                logger.debug(
                    "reassign: unknown column %r, %s left in %r",
                    target_column_id,
                    feature_id,
                    feature.column_id,
                )
                return None

            if feature.column_id == target.id:
                return feature

            moved = feature.moved_to(target)
            self._features[feature_id] = moved
            self._order.add_feature(feature_id, target.id)

        logger.info("Feature moved: %s (%s -> %s)", feature_id, feature.column_id, target.id)
        return moved

    def add_column(self, name: str) -> str | None:
        """Append a new column with a random accent.

        Returns:
            The new column id, or None if `name` is blank.
        """
        name = name.strip()
        if not name:
            logger.debug("add_column: blank name ignored")
            return None

        with self._lock:
            column_id = self._mint_column_id()
            accent = self._pick_accent()
            column = Column.with_accent(column_id, name, accent)
            self._columns.append(column)
            self._order.ensure_column(column_id)

        logger.info("Column added: %s (%s, %s)", column_id, name, accent.bg)
        return column_id

    def remove_column(self, column_id: str) -> None:
        """Remove an empty column from the board.

        Raises:
            ColumnNotFoundError: If no column has `column_id`.
            ColumnNotEmptyError: If any feature is still in the column.
        """
        with self._lock:
            column = self.get_column(column_id)
            if column is None:
                raise ColumnNotFoundError(column_id)

            occupants = self._order.ids_in(column_id)
            if occupants:
                logger.info(
                    "Refusing to remove column %s: %d feature(s) in it",
                    column_id,
                    len(occupants),
                )
                raise ColumnNotEmptyError(column_id, len(occupants))

            self._columns.remove(column)
            self._order.drop_column(column_id)

        logger.info("Column removed: %s (%s)", column_id, column.name)

    # Internals

    def _mint_column_id(self) -> str:
        """Millisecond timestamp id, bumped until it is unique."""
        candidate = max(int(self._clock() * 1000), self._last_minted + 1)
        while str(candidate) in self._issued_ids or self.get_column(str(candidate)):
            candidate += 1
        self._last_minted = candidate
        column_id = str(candidate)
        self._issued_ids.add(column_id)
        return column_id

    def _pick_accent(self) -> AccentTriple:
        return self._rng.choice(ACCENT_PALETTE)
