"""Tests for datetime utilities."""

from datetime import UTC, date, datetime, timedelta, timezone

from featureboard.utils import from_iso, parse_instant, short_date


class TestFromIso:
    def test_z_suffix(self):
        assert from_iso("2024-01-15T10:30:00.000Z") == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_date_only_is_midnight_utc(self):
        assert from_iso("2024-01-15") == datetime(2024, 1, 15, tzinfo=UTC)

    def test_offset_kept(self):
        parsed = from_iso("2024-01-15T10:30:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive_assumed_utc(self):
        assert from_iso("2024-01-15T10:30:00").tzinfo == UTC


class TestParseInstant:
    def test_invalid_text_is_none(self):
        assert parse_instant("yesterday-ish") is None
        assert parse_instant("2024-13-45") is None

    def test_trailing_garbage_is_none(self):
        assert parse_instant("2024-01-15 nonsense") is None
        assert parse_instant("2024-01-15Tlater") is None

    def test_date_object_is_midnight_utc(self):
        assert parse_instant(date(2024, 1, 15)) == datetime(2024, 1, 15, tzinfo=UTC)

    def test_non_text_is_none(self):
        assert parse_instant(None) is None
        assert parse_instant(12345) is None
        assert parse_instant("   ") is None

    def test_datetime_passthrough(self):
        aware = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        assert parse_instant(aware) is aware
        assert parse_instant(datetime(2024, 1, 1)).tzinfo == UTC


class TestShortDate:
    def test_format(self):
        assert short_date(datetime(2024, 1, 15, tzinfo=UTC)) == "Jan 15"
        assert short_date(datetime(2024, 12, 3, tzinfo=UTC)) == "Dec 3"

    def test_none(self):
        assert short_date(None) == "?"
