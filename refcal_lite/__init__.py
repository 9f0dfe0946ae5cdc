"""refcal_lite - referee assignments from sports-federation iCalendar feeds.

Two stages:

- ``refcal_lite.calendar`` decodes RFC 5545 text into CalendarEvent records
- ``refcal_lite.domain`` extracts a CalendarAssignment, a ParsedFields report
  and a confidence rating from each event

``parse_calendar_feed`` runs both and never raises on feed content.
"""

__version__ = "0.1.0"

from typing import Optional

from .calendar import CalendarEvent, GeoCoordinates, parse_ical_feed
from .domain import (
    CalendarAssignment,
    FeedPipeline,
    Gender,
    ParseConfidence,
    ParsedFields,
    ParseResult,
    RefereeRole,
    calculate_confidence,
    extract_assignment,
    parse_calendar_feed,
    select_assignments,
    summarize_results,
)

__all__ = [
    "CalendarAssignment",
    "CalendarEvent",
    "FeedPipeline",
    "Gender",
    "GeoCoordinates",
    "ParseConfidence",
    "ParseResult",
    "ParsedFields",
    "RefereeRole",
    "calculate_confidence",
    "extract_assignment",
    "parse_calendar_feed",
    "parse_ical_feed",
    "select_assignments",
    "summarize_results",
]


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to console.

    Honors the REFCAL_DEBUG environment variable (truthy values: "1", "true",
    "yes", "on"), which forces DEBUG verbosity.
    """
    import logging
    import os
    import sys

    debug_env = os.environ.get("REFCAL_DEBUG", "")
    if debug_env.strip().lower() in ("1", "true", "yes", "on"):
        level_name = "DEBUG"

    root = logging.getLogger()
    # Only configure basic handler if no handlers are present to avoid duplicate output.
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        try:
            from colorlog import ColoredFormatter

            # HH:MM:SS  LEVEL   logger.name: message (only the level is colorized)
            fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
            log_colors = {
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            }
            formatter = ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors)
        except ImportError:
            fmt = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
            formatter = logging.Formatter(fmt, datefmt="%H:%M:%S")

        handler.setFormatter(formatter)
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )
