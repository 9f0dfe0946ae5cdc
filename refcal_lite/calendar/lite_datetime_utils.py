"""DateTime normalization for iCalendar properties - RefCal Lite.

DTSTART/DTEND values are turned into ISO-8601 strings without any timezone
arithmetic. A ``TZID`` parameter is carried along by the caller but never
applied here.
"""

import logging
import re

from icalendar.prop import vDate, vDatetime

logger = logging.getLogger(__name__)

_DATE_ONLY_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")
_DATE_TIME_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})(Z?)$")


def normalize_ical_date(value: str) -> str:
    """Convert an iCal date or date-time value to ISO-8601.

    Accepted forms:
        - ``YYYYMMDD`` -> ``YYYY-MM-DD``
        - ``YYYYMMDDTHHMMSS`` -> ``YYYY-MM-DDTHH:MM:SS``
        - ``YYYYMMDDTHHMMSSZ`` -> ``YYYY-MM-DDTHH:MM:SSZ``

    The digits are checked with icalendar's own value parsers so impossible
    dates (month 13, hour 25) are not dressed up as ISO strings. Anything that
    fails is returned stripped but otherwise untouched.

    Args:
        value: Raw property value

    Returns:
        Normalized ISO-8601 string
    """
    raw = value.strip()

    try:
        match = _DATE_ONLY_RE.match(raw)
        if match:
            vDate.from_ical(raw)
            return "-".join(match.groups())

        match = _DATE_TIME_RE.match(raw)
        if match:
            vDatetime.from_ical(raw)
            year, month, day, hour, minute, second, utc = match.groups()
            return f"{year}-{month}-{day}T{hour}:{minute}:{second}{utc}"
    except ValueError:
        logger.debug("Invalid calendar date %r, passing through unchanged", raw)

    return raw
