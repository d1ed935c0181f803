"""CLI entry point for featureboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="featureboard",
        description="Terminal kanban board for features grouped by status",
    )
    parser.add_argument(
        "--source-url",
        default=None,
        help="Endpoint returning the board payload as JSON",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Read the board payload from a local JSON or YAML file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the payload before starting with an empty board",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for new column colors (for reproducible runs)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the board as text and exit instead of starting the TUI",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings, letting CLI args override environment values."""
    settings_kwargs: dict = {}
    if args.source_url:
        settings_kwargs["source_url"] = args.source_url
    if args.data_file:
        settings_kwargs["data_file"] = args.data_file
    if args.timeout is not None:
        settings_kwargs["fetch_timeout"] = args.timeout
    if args.seed is not None:
        settings_kwargs["seed"] = args.seed
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    setup_logging(settings.verbose, settings.log_file, tui=not args.summary)

    if args.summary:
        from .cli.summary import run_summary

        raise SystemExit(run_summary(settings))

    # Import here so --summary does not pay for Textual startup
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
