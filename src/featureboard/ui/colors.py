"""Turning payload colors into safe Rich markup styles."""

from functools import lru_cache

from rich.color import Color, ColorParseError

FALLBACK_COLOR = "white"


@lru_cache(maxsize=128)
def accent_style(color: str | None) -> str:
    """Return `color` if Rich can parse it, otherwise a neutral fallback.

    Column colors come from the payload, so anything can show up here.
    """
    if not color:
        return FALLBACK_COLOR
    try:
        Color.parse(color)
    except ColorParseError:
        return FALLBACK_COLOR
    return color
