"""Event block parsing for iCalendar feeds - RefCal Lite.

This module turns the decoded properties of one VEVENT block into a
CalendarEvent. Blocks that lack UID, SUMMARY or DTSTART produce no event.
"""

import logging
import math
from typing import Optional

from icalendar.prop import vGeo
from pydantic import ValidationError

from .lite_content_lines import ContentLine, decode_block, unescape_text
from .lite_datetime_utils import normalize_ical_date
from .lite_models import CalendarEvent, GeoCoordinates

logger = logging.getLogger(__name__)


class LiteEventBlockParser:
    """Parser for VEVENT property blocks into CalendarEvent objects."""

    def parse_event_block(self, block: list[str]) -> Optional[CalendarEvent]:
        """Parse a single VEVENT block.

        Args:
            block: Logical property lines between BEGIN:VEVENT and END:VEVENT

        Returns:
            CalendarEvent, or None when a required property is missing or blank
        """
        properties = decode_block(block)

        uid = self._text(properties.get("UID"))
        summary = self._text(properties.get("SUMMARY"))
        dtstart_prop = properties.get("DTSTART")

        if not uid or not summary or dtstart_prop is None:
            logger.debug(
                "Skipping VEVENT missing required fields (uid=%s, summary=%s, dtstart=%s)",
                bool(uid),
                bool(summary),
                dtstart_prop is not None,
            )
            return None

        dtstart = normalize_ical_date(dtstart_prop.value)
        dtend_prop = properties.get("DTEND")
        dtend = normalize_ical_date(dtend_prop.value) if dtend_prop is not None else dtstart
        if not dtend:
            dtend = dtstart

        location = self._text(properties.get("LOCATION")) or None

        try:
            return CalendarEvent(
                uid=uid,
                summary=summary,
                description=self._text(properties.get("DESCRIPTION")),
                dtstart=dtstart,
                dtend=dtend,
                location=location,
                geo=self._parse_geo(properties.get("GEO")),
                tzid=dtstart_prop.params.get("TZID") or None,
                apple_location_title=self._apple_location_title(
                    properties.get("X-APPLE-STRUCTURED-LOCATION")
                ),
            )
        except ValidationError as e:
            logger.debug("Skipping VEVENT %s: %s", uid, e)
            return None

    def _text(self, prop: Optional[ContentLine]) -> str:
        """Unescaped TEXT value of a property, empty string if absent."""
        if prop is None:
            return ""
        return unescape_text(prop.value)

    def _parse_geo(self, prop: Optional[ContentLine]) -> Optional[GeoCoordinates]:
        """Parse ``latitude;longitude``; anything malformed or non-finite is None."""
        if prop is None:
            return None

        try:
            latitude, longitude = vGeo.from_ical(prop.value.strip())
        except ValueError:
            logger.debug("Ignoring malformed GEO value %r", prop.value)
            return None

        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            logger.debug("Ignoring non-finite GEO value %r", prop.value)
            return None

        return GeoCoordinates(latitude=latitude, longitude=longitude)

    def _apple_location_title(self, prop: Optional[ContentLine]) -> Optional[str]:
        if prop is None:
            return None
        title = unescape_text(prop.params.get("X-TITLE", "")).strip()
        return title or None
