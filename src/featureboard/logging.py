"""Logging configuration for featureboard."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: int = 0, log_file: Path | None = None, tui: bool = False) -> None:
    """Configure logging based on verbosity level and optional file output.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
        tui: Route console output to the Textual devtools console instead of
            stderr, which would draw over the board
    """
    if verbose == 0 and log_file is None:
        return

    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("featureboard")
    logger.setLevel(level)
    # Calling twice (e.g. in tests) must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if verbose > 0:
        console_handler: logging.Handler = (
            TextualHandler() if tui else logging.StreamHandler(sys.stderr)
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info(
        "featureboard starting | %s | level=%s", timestamp, logging.getLevelName(level)
    )
    logger.info("=" * 60)
