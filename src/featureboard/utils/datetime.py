"""Utilities for datetime handling."""

from datetime import UTC, date, datetime


def now_utc() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def from_iso(value: str) -> datetime:
    """Parse ISO format string to an aware datetime.

    Accepts a 'Z' suffix, explicit offsets and bare dates. Naive values are
    assumed to be UTC.

    Raises:
        ValueError: If the text is not an ISO 8601 date or date-time
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def parse_instant(value: object) -> datetime | None:
    """Parse date-like payload text, returning None for unparseable input.

    None stands in for an invalid instant: a feature with a malformed date is
    still ingested, it just has no usable date.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        # YAML loads unquoted dates as date objects
        return datetime.combine(value, datetime.min.time(), tzinfo=UTC)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return from_iso(value)
    except ValueError:
        return None


def short_date(value: datetime | None) -> str:
    """Format as a short month/day label, e.g. 'Jan 15'."""
    if value is None:
        return "?"
    return f"{value.strftime('%b')} {value.day}"
