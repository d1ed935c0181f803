"""Normalization of raw board payloads into columns and features."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..models import (
    UNASSIGNED_COLUMN,
    UNASSIGNED_COLUMN_ID,
    BoardPayload,
    Column,
    Feature,
    RawFeature,
    RawStatus,
)
from ..utils import parse_instant

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """The payload could not be turned into a board."""

    pass


@dataclass
class NormalizedBoard:
    """Columns in board order plus features in arrival order."""

    columns: list[Column] = field(default_factory=list)
    features: list[Feature] = field(default_factory=list)

    @classmethod
    def empty(cls) -> NormalizedBoard:
        return cls()


def parse_payload(raw: Any) -> BoardPayload:
    """Validate a decoded payload.

    Raises:
        IngestionError: If the payload is absent or does not have the board shape.
    """
    if raw is None:
        raise IngestionError("No payload")
    if isinstance(raw, BoardPayload):
        return raw
    if not isinstance(raw, Mapping):
        raise IngestionError(f"Payload must be an object, got {type(raw).__name__}")
    try:
        return BoardPayload.model_validate(raw)
    except ValidationError as e:
        raise IngestionError(f"Malformed payload: {e.error_count()} validation error(s)") from e


def normalize(raw: Any) -> NormalizedBoard:
    """Turn a raw payload into an initial board.

    Never raises: an absent or malformed payload yields an empty board so
    there is always something to render.
    """
    try:
        payload = parse_payload(raw)
    except IngestionError as e:
        logger.warning("Ingestion failed, starting with an empty board: %s", e)
        return NormalizedBoard.empty()

    columns = _columns_from(payload.statuses)
    features = _features_from(payload.features, columns)

    logger.info("Ingested %d columns and %d features", len(columns), len(features))
    return NormalizedBoard(columns=columns, features=features)


def _columns_from(statuses: list[RawStatus]) -> list[Column]:
    """Build columns in payload order, keeping the first of any duplicate ids.

    A status claiming the Unassigned lane's id is dropped; its features fall
    back like any other dangling reference.
    """
    columns: list[Column] = []
    seen: set[str] = set()
    for status in statuses:
        if status.id == UNASSIGNED_COLUMN_ID:
            logger.warning("Reserved column id dropped: %s", status.id)
            continue
        if status.id in seen:
            logger.warning("Duplicate column id dropped: %s", status.id)
            continue
        seen.add(status.id)
        columns.append(Column(id=status.id, name=status.name, color=status.color))
    return columns


def _features_from(raw_features: list[RawFeature], columns: list[Column]) -> list[Feature]:
    """Build features, resolving each status reference to a column snapshot."""
    by_id = {col.id: col for col in columns}
    features: list[Feature] = []
    seen: set[str] = set()

    for raw in raw_features:
        if raw.id in seen:
            logger.warning("Duplicate feature id dropped: %s", raw.id)
            continue
        seen.add(raw.id)

        column = resolve_column(raw.status_id, by_id, columns)
        if column.id != raw.status_id:
            logger.warning(
                "Feature %s references unknown column %r, assigned to %r",
                raw.id,
                raw.status_id,
                column.id,
            )

        features.append(
            Feature(
                id=raw.id,
                name=raw.name,
                start_at=parse_instant(raw.start_at),
                end_at=parse_instant(raw.end_at),
                column_id=column.id,
                column=column,
                owner=raw.owner,
                initiative=raw.initiative,
                release=raw.release,
            )
        )
    return features


def resolve_column(
    column_id: str | None,
    by_id: Mapping[str, Column],
    columns: list[Column],
) -> Column:
    """Find the column for a reference, falling back to the first column.

    With no columns at all the unassigned pseudo-column is returned.
    """
    if column_id is not None and column_id in by_id:
        return by_id[column_id]
    if columns:
        return columns[0]
    return UNASSIGNED_COLUMN
