"""Utility helpers."""

from .datetime import from_iso, now_utc, parse_instant, short_date

__all__ = [
    "from_iso",
    "now_utc",
    "parse_instant",
    "short_date",
]
