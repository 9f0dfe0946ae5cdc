"""iCalendar feed parser - RefCal Lite version.

Stage one of the feed pipeline: raw feed text in, CalendarEvent list out.
The parser keeps no state between calls and never raises on bad input.
"""

import logging
from typing import Any

from .lite_content_lines import split_event_blocks, unfold_lines
from .lite_event_parser import LiteEventBlockParser
from .lite_models import CalendarEvent

logger = logging.getLogger(__name__)


class LiteICSParser:
    """Decoder from RFC 5545 text to CalendarEvent records."""

    def __init__(self) -> None:
        """Initialize ICS parser."""
        self._event_parser = LiteEventBlockParser()

    def parse_ics_content(self, ics_content: Any) -> list[CalendarEvent]:
        """Parse a whole feed.

        Args:
            ics_content: Feed text. ``None``, non-strings and empty strings
                yield an empty list.

        Returns:
            Events in the order their VEVENT blocks appear in the feed
        """
        if not isinstance(ics_content, str):
            if ics_content is not None:
                logger.debug("Ignoring non-string feed content of type %s", type(ics_content).__name__)
            return []

        blocks = split_event_blocks(unfold_lines(ics_content))

        events: list[CalendarEvent] = []
        for block in blocks:
            event = self._event_parser.parse_event_block(block)
            if event is not None:
                events.append(event)

        logger.debug("Parsed %d events from %d VEVENT blocks", len(events), len(blocks))
        return events


def parse_ical_feed(ics_content: Any) -> list[CalendarEvent]:
    """Parse feed text into CalendarEvent records.

    Example:
        >>> events = parse_ical_feed(feed_text)
        >>> events[0].uid
        'referee-convocation-for-game-392936'
    """
    return LiteICSParser().parse_ics_content(ics_content)
