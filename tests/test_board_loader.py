"""Tests for loading the initial board."""

import asyncio
import time
from unittest.mock import MagicMock

from featureboard.services import load_board, load_board_async
from featureboard.sources import PayloadSourceError

PAYLOAD = {
    "features": [{"id": "i1", "name": "Login", "statusId": "c1"}],
    "statuses": [{"id": "c1", "name": "To Do", "color": "#6B7280"}],
}


def fake_source(result=None, error: Exception | None = None) -> MagicMock:
    source = MagicMock()
    source.describe.return_value = "fake://board"
    if error is not None:
        source.fetch.side_effect = error
    else:
        source.fetch.return_value = result
    return source


class TestLoadBoard:
    def test_loads_payload(self):
        store = load_board(fake_source(PAYLOAD))
        assert store.column_count == 1
        assert [f.id for f in store.items_in("c1")] == ["i1"]

    def test_source_failure_is_empty_board(self):
        store = load_board(fake_source(error=PayloadSourceError("offline")))
        assert store.column_count == 0
        assert store.feature_count == 0

    def test_malformed_payload_is_empty_board(self):
        store = load_board(fake_source({"statuses": "nope"}))
        assert store.snapshot().is_empty


class TestLoadBoardAsync:
    def test_loads_payload(self):
        store = asyncio.run(load_board_async(fake_source(PAYLOAD), timeout=5.0))
        assert store.feature_count == 1

    def test_timeout_is_empty_board(self):
        def slow_fetch():
            time.sleep(0.5)
            return PAYLOAD

        source = fake_source()
        source.fetch.side_effect = slow_fetch
        store = asyncio.run(load_board_async(source, timeout=0.05))
        assert store.snapshot().is_empty

    def test_source_failure_is_empty_board(self):
        source = fake_source(error=PayloadSourceError("offline"))
        store = asyncio.run(load_board_async(source, timeout=5.0))
        assert store.snapshot().is_empty
