"""Loading the initial board from a payload source."""

from __future__ import annotations

import asyncio
import logging
import random

from ..sources import PayloadSource, PayloadSourceError
from .board_store import BoardStore
from .ingest import normalize

logger = logging.getLogger(__name__)


def fetch_payload(source: PayloadSource) -> object | None:
    """Fetch the raw payload, returning None if the source fails."""
    try:
        return source.fetch()
    except PayloadSourceError as e:
        logger.warning("Could not fetch board from %s: %s", source.describe(), e)
        return None


def load_board(source: PayloadSource, rng: random.Random | None = None) -> BoardStore:
    """Fetch and normalize a payload into a new store.

    Source failures degrade to an empty board.
    """
    raw = fetch_payload(source)
    return BoardStore(normalize(raw), rng=rng)


async def load_board_async(
    source: PayloadSource,
    timeout: float,
    rng: random.Random | None = None,
) -> BoardStore:
    """Fetch in a worker thread with an upper bound on the wait.

    If the fetch has not finished after `timeout` seconds the board starts
    empty, same as any other ingestion failure.
    """
    try:
        raw = await asyncio.wait_for(asyncio.to_thread(fetch_payload, source), timeout)
    except TimeoutError:
        logger.warning(
            "Fetching board from %s exceeded %.1fs, starting empty", source.describe(), timeout
        )
        raw = None
    return BoardStore(normalize(raw), rng=rng)
