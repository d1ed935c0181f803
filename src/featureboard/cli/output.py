"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
DOT = "\u25cf"  # ●


def _supports_color() -> bool:
    """Check if stdout is a TTY."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def _truecolor(hex_color: str) -> str | None:
    """ANSI 24-bit foreground escape for '#RRGGBB', None if not parseable."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        return None
    try:
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None
    return f"\033[38;2;{r};{g};{b}m"


def swatch(hex_color: str) -> str:
    """A colored dot for a column accent."""
    escape = _truecolor(hex_color)
    if escape is None:
        return DOT
    return _colorize(DOT, escape)


def success(message: str) -> None:
    """Print success message with green checkmark."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def info(message: str, indent: int = 0) -> None:
    """Print info message with yellow bullet."""
    print(f"{' ' * indent}{_colorize(BULLET, YELLOW)} {message}")


def muted(message: str, indent: int = 0) -> None:
    print(f"{' ' * indent}{_colorize(message, DIM)}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def error(message: str) -> None:
    """Print error message with red cross."""
    print(f"{_colorize(CROSS, RED)} {message}")
