"""Payload sources for initial board data."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .file import FilePayloadSource
from .http import DEFAULT_SOURCE_URL, HttpPayloadSource
from .protocol import PayloadSource, PayloadSourceError

if TYPE_CHECKING:
    from ..config import Settings

__all__ = [
    "DEFAULT_SOURCE_URL",
    "FilePayloadSource",
    "HttpPayloadSource",
    "PayloadSource",
    "PayloadSourceError",
    "source_from_settings",
]


def source_from_settings(settings: Settings) -> PayloadSource:
    """Pick the local file source when configured, the HTTP source otherwise."""
    if settings.data_file is not None:
        return FilePayloadSource(settings.data_file)
    return HttpPayloadSource(settings.source_url, timeout=settings.fetch_timeout)
