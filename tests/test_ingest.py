"""Tests for payload normalization."""

import logging
from datetime import UTC, datetime

import pytest

from featureboard.models import UNASSIGNED_COLUMN_ID, BoardPayload
from featureboard.services import BoardStore, IngestionError, normalize, parse_payload

STATUSES = [
    {"id": "c1", "name": "To Do", "color": "#6B7280"},
    {"id": "c2", "name": "In Progress", "color": "#F59E0B"},
    {"id": "c3", "name": "Done", "color": "#10B981"},
]


def raw_feature(feature_id: str, status_id: str | None, **extra) -> dict:
    data = {
        "id": feature_id,
        "name": f"Feature {feature_id}",
        "startAt": "2024-01-15T00:00:00.000Z",
        "endAt": "2024-01-25T00:00:00.000Z",
        "statusId": status_id,
        "owner": {"id": "u1", "name": "Alice", "image": "https://example.com/a.png"},
        "initiative": {"id": "n1", "name": "Onboarding"},
        "release": {"id": "r1", "name": "v1.0"},
    }
    data.update(extra)
    return data


class TestParsePayload:
    """Tests for parse_payload."""

    def test_none_raises(self):
        with pytest.raises(IngestionError):
            parse_payload(None)

    def test_non_mapping_raises(self):
        with pytest.raises(IngestionError, match="must be an object"):
            parse_payload([1, 2, 3])

    def test_invalid_shape_raises(self):
        with pytest.raises(IngestionError, match="Malformed payload"):
            parse_payload({"features": "not a list"})

    def test_passes_payload_through(self):
        payload = BoardPayload()
        assert parse_payload(payload) is payload


class TestNormalizeColumns:
    """Columns pass through unchanged."""

    def test_order_preserved(self):
        board = normalize({"features": [], "statuses": STATUSES})
        assert [c.id for c in board.columns] == ["c1", "c2", "c3"]
        assert [c.name for c in board.columns] == ["To Do", "In Progress", "Done"]
        assert board.columns[1].color == "#F59E0B"

    def test_duplicate_column_ids_keep_first(self, caplog):
        statuses = [*STATUSES, {"id": "c1", "name": "Again", "color": "#000000"}]
        with caplog.at_level(logging.WARNING):
            board = normalize({"features": [], "statuses": statuses})
        assert [c.id for c in board.columns] == ["c1", "c2", "c3"]
        assert board.columns[0].name == "To Do"
        assert "Duplicate column id" in caplog.text

    def test_reserved_column_id_dropped(self, caplog):
        """A status using the Unassigned lane's id never becomes a real column."""
        statuses = [{"id": UNASSIGNED_COLUMN_ID, "name": "Backlog"}, *STATUSES]
        features = [raw_feature("i1", UNASSIGNED_COLUMN_ID)]
        with caplog.at_level(logging.WARNING):
            board = normalize({"features": features, "statuses": statuses})

        assert [c.id for c in board.columns] == ["c1", "c2", "c3"]
        assert board.features[0].column_id == "c1"
        assert "Reserved column id" in caplog.text

        snapshot = BoardStore(board).snapshot()
        assert snapshot.feature_count == 1
        assert [lane.column.name for lane in snapshot.visible_lanes()] == [
            "To Do",
            "In Progress",
            "Done",
        ]

    def test_reserved_column_id_only_status(self):
        statuses = [{"id": UNASSIGNED_COLUMN_ID, "name": "Backlog"}]
        board = normalize(
            {"features": [raw_feature("i1", UNASSIGNED_COLUMN_ID)], "statuses": statuses}
        )
        assert board.columns == []
        snapshot = BoardStore(board).snapshot()
        assert snapshot.feature_count == 1
        assert [lane.column.id for lane in snapshot.visible_lanes()] == [UNASSIGNED_COLUMN_ID]


class TestNormalizeFeatures:
    """Feature resolution and date parsing."""

    def test_resolves_column_snapshot(self):
        board = normalize({"features": [raw_feature("i1", "c2")], "statuses": STATUSES})
        feature = board.features[0]
        assert feature.column_id == "c2"
        assert feature.column.id == "c2"
        assert feature.column.name == "In Progress"

    def test_parses_dates(self):
        board = normalize({"features": [raw_feature("i1", "c1")], "statuses": STATUSES})
        feature = board.features[0]
        assert feature.start_at == datetime(2024, 1, 15, tzinfo=UTC)
        assert feature.end_at == datetime(2024, 1, 25, tzinfo=UTC)
        assert feature.duration_days == 10

    def test_malformed_date_is_invalid_not_fatal(self):
        board = normalize(
            {"features": [raw_feature("i1", "c1", startAt="not a date")], "statuses": STATUSES}
        )
        assert len(board.features) == 1
        assert board.features[0].start_at is None
        assert board.features[0].end_at is not None

    def test_dangling_reference_falls_back_to_first_column(self, caplog):
        with caplog.at_level(logging.WARNING):
            board = normalize({"features": [raw_feature("i1", "zzz")], "statuses": STATUSES})
        feature = board.features[0]
        assert feature.column_id == "c1"
        assert feature.column.id == "c1"
        assert "unknown column" in caplog.text

    def test_missing_reference_falls_back_to_first_column(self):
        board = normalize({"features": [raw_feature("i1", None)], "statuses": STATUSES})
        assert board.features[0].column_id == "c1"

    def test_no_columns_uses_unassigned(self):
        board = normalize({"features": [raw_feature("i1", "c1")], "statuses": []})
        assert board.columns == []
        feature = board.features[0]
        assert feature.column_id == UNASSIGNED_COLUMN_ID
        assert feature.column.id == UNASSIGNED_COLUMN_ID

    def test_opaque_fields_carried(self):
        board = normalize({"features": [raw_feature("i1", "c1")], "statuses": STATUSES})
        feature = board.features[0]
        assert feature.owner["image"] == "https://example.com/a.png"
        assert feature.owner_name == "Alice"
        assert feature.initiative_name == "Onboarding"
        assert feature.release_name == "v1.0"

    @pytest.mark.parametrize(
        "owner", ["alice", {"id": "u1", "name": 42}, 17, ["a", "b"], {"name": None}]
    )
    def test_odd_owner_shapes_keep_the_board(self, owner):
        """Descriptive fields are never validated, so they cannot sink a payload."""
        features = [raw_feature("i1", "c1", owner=owner), raw_feature("i2", "c1")]
        board = normalize({"features": features, "statuses": STATUSES})
        assert len(board.columns) == 3
        assert [f.id for f in board.features] == ["i1", "i2"]
        assert board.features[0].owner == owner

    def test_payload_order_preserved(self):
        features = [raw_feature("i3", "c1"), raw_feature("i1", "c1"), raw_feature("i2", "c2")]
        board = normalize({"features": features, "statuses": STATUSES})
        assert [f.id for f in board.features] == ["i3", "i1", "i2"]

    def test_duplicate_feature_ids_keep_first(self):
        features = [raw_feature("i1", "c1"), raw_feature("i1", "c3")]
        board = normalize({"features": features, "statuses": STATUSES})
        assert len(board.features) == 1
        assert board.features[0].column_id == "c1"


class TestNormalizeFailures:
    """Absent or malformed payloads yield an empty board."""

    def test_empty_lists(self):
        board = normalize({"features": [], "statuses": []})
        assert board.columns == []
        assert board.features == []

    @pytest.mark.parametrize("raw", [None, "garbage", 42, {"features": [{"name": "no id"}]}])
    def test_bad_payload_is_empty_board(self, raw, caplog):
        with caplog.at_level(logging.WARNING):
            board = normalize(raw)
        assert board.columns == []
        assert board.features == []
        assert "Ingestion failed" in caplog.text
