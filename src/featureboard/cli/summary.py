"""Summary command: print the board as text and exit."""

import logging
import random

from ..config import Settings
from ..models import BoardSnapshot, Feature
from ..services import load_board
from ..sources import source_from_settings
from .output import error, header, info, muted, success, swatch

logger = logging.getLogger(__name__)


def format_feature(feature: Feature) -> str:
    """One-line description of a feature card."""
    parts = [feature.display_name]
    if feature.owner_initials:
        parts.append(f"@{feature.owner_initials}")
    parts.append(feature.short_start)
    if feature.duration_days is not None:
        parts.append(f"{feature.duration_days} days")
    if feature.release_name:
        parts.append(feature.release_name)
    return "  ".join(parts)


def print_summary(snapshot: BoardSnapshot) -> None:
    """Print totals and each lane with its features."""
    header(f"{snapshot.feature_count} Tasks  {snapshot.column_count} Columns")
    if snapshot.is_empty:
        muted("(empty board)")
        return

    for lane in snapshot.visible_lanes():
        print()
        print(f"{swatch(lane.column.color)} {lane.column.name} ({lane.count})")
        if not lane.features:
            muted("No items", indent=2)
        for feature in lane.features:
            info(format_feature(feature), indent=2)


def run_summary(settings: Settings) -> int:
    """Load the board from the configured source and print it.

    Returns:
        Exit code (0 on success, 1 if the board could not be loaded).
    """
    source = source_from_settings(settings)
    rng = random.Random(settings.seed) if settings.seed is not None else None
    try:
        store = load_board(source, rng=rng)
    finally:
        close = getattr(source, "close", None)
        if close is not None:
            close()

    snapshot = store.snapshot()
    if snapshot.is_empty:
        error(f"No board data from {source.describe()}")
        print_summary(snapshot)
        return 1

    success(f"Loaded board from {source.describe()}")
    print_summary(snapshot)
    return 0
