"""iCalendar decoding stage: feed text to CalendarEvent records."""

from .lite_models import CalendarEvent, GeoCoordinates
from .lite_parser import LiteICSParser, parse_ical_feed

__all__ = [
    "CalendarEvent",
    "GeoCoordinates",
    "LiteICSParser",
    "parse_ical_feed",
]
