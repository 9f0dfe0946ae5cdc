"""Command-line entry for refcal_lite.

Reads one iCalendar feed from a file (or ``-`` for stdin), runs the feed
pipeline and prints the selected assignments as camelCase JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from . import _init_logging
from .core.config_manager import VALID_LOG_LEVELS, Config, ConfigManager
from .domain import FeedPipeline, ParseConfidence, select_assignments, summarize_results
from .exceptions import FeedInputError, RefcalError
from .lite_logging import configure_lite_logging

logger = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for refcal_lite CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="refcal_lite",
        description="RefCal Lite - referee assignments from an iCalendar feed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m refcal_lite assignments.ics                     # Medium and high confidence, by start time
  python -m refcal_lite assignments.ics --min-confidence low
  curl -s "$FEED_URL" | python -m refcal_lite - --summary   # Per-confidence counts only
        """,
    )

    parser.add_argument(
        "feed",
        metavar="FEED",
        help="Path to an .ics file, or '-' to read from stdin",
    )
    parser.add_argument(
        "--min-confidence",
        choices=[level.value for level in ParseConfidence],
        help="Lowest confidence to output (default: medium, or from REFCAL_MIN_CONFIDENCE env var)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print confidence counts instead of assignments",
    )
    parser.add_argument(
        "--log-level",
        choices=list(VALID_LOG_LEVELS),
        type=str.upper,
        help="Logging level (default: INFO, or from REFCAL_LOG_LEVEL env var)",
    )

    return parser


def read_feed(source: str) -> str:
    """Read feed text from a path, or from stdin when ``source`` is ``-``.

    Raises:
        FeedInputError: If the file is missing, unreadable or not UTF-8
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FeedInputError(f"Cannot read feed {source}: {exc}") from exc


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    overrides = {
        "log_level": args.log_level or config.log_level,
        "debug": config.debug,
        "min_confidence": args.min_confidence or config.min_confidence,
        "sort_by_start": config.sort_by_start,
    }
    return Config.from_dict(overrides)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the refcal_lite CLI.

    Returns:
        Process exit code: 0 on success, 1 when the feed cannot be read or
        the configuration is invalid
    """
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        config = _apply_overrides(ConfigManager().load_config(), args)
    except RefcalError as exc:
        print(f"refcal_lite: {exc}", file=sys.stderr)
        return 1

    configure_lite_logging(debug_mode=config.debug)
    _init_logging("DEBUG" if config.debug else config.log_level)

    try:
        content = read_feed(args.feed)
    except FeedInputError as exc:
        logger.error("%s", exc)
        print(f"refcal_lite: {exc}", file=sys.stderr)
        return 1

    results = FeedPipeline().run(content)

    if args.summary:
        payload = summarize_results(results).model_dump(by_alias=True, mode="json")
    else:
        assignments = select_assignments(
            results,
            min_confidence=config.min_confidence,
            sort_by_start=config.sort_by_start,
        )
        payload = [a.model_dump(by_alias=True, mode="json") for a in assignments]
        logger.info("Selected %d of %d assignments", len(assignments), len(results))

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
