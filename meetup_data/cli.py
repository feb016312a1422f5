"""Command-line entry point for fetch-meetup-data.

Run from the slide deck's root directory::

    fetch-meetup-data
    python -m meetup_data.cli --root path/to/deck --log-level DEBUG

Use ``--help`` for full argument documentation.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from meetup_data.artifacts.storage import LocalStorage
from meetup_data.config import get_settings
from meetup_data.errors import MeetupDataError
from meetup_data.pipeline import run

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fetch-meetup-data",
        description=(
            "Fetch meetup, speaker and sponsor data, apply manual overrides from\n"
            "meetup-data.override.json and generate meetup-data.json plus\n"
            "speaker slides for the deck."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--root",
        default=".",
        metavar="DIR",
        help="Slide deck root directory; all project files are relative to it (default: .).",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Project configuration file, relative to --root (default: slides.config.ts).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: MEETUP_DATA_LOG_LEVEL or INFO).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    settings = get_settings()
    updates: dict[str, str] = {}
    if args.config:
        updates["config_file"] = args.config
    if args.log_level:
        updates["log_level"] = args.log_level
    if updates:
        settings = settings.model_copy(update=updates)

    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")
    logger.info("Fetching meetup data...")

    try:
        run(settings, LocalStorage(Path(args.root)))
    except (MeetupDataError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
