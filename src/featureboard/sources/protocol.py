"""Payload source protocol for board data backends."""

from typing import Any, Protocol


class PayloadSourceError(Exception):
    """Base exception for payload retrieval errors."""

    pass


class PayloadSource(Protocol):
    """Interface for anything that can deliver a raw board payload.

    Implementations return the decoded payload (normally a dict with
    `features` and `statuses` keys) and leave validation to the normalizer.
    """

    def fetch(self) -> Any:
        """Retrieve the raw payload.

        Returns:
            The decoded payload.

        Raises:
            PayloadSourceError: If the payload could not be retrieved or decoded.
        """
        ...

    def describe(self) -> str:
        """Short human-readable description of where data comes from."""
        ...
