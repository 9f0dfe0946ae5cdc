"""Extended field parsing from event descriptions - RefCal Lite.

Descriptions carry labelled lines whose label word depends on the feed
locale (``Match:``/``Spiel:``/``Partie:``, ``Ligue:``/``Liga:``...). Every
field here is optional: a missing label yields None or no key, never a
warning. When a label repeats, the first occurrence is used.
"""

import logging
from typing import NamedTuple, Optional

from .assignment_patterns import (
    GAME_NUMBER_RE,
    HALL_RE,
    LEAGUE_LINE_MIN_PARTS,
    LEAGUE_LINE_RE,
    REFEREE_LINE_RE,
    REFEREE_SLOTS,
)

logger = logging.getLogger(__name__)


class HallInfo(NamedTuple):
    """Hall reference found in a description."""

    hall_id: str
    name: Optional[str]


class LiteDescriptionParser:
    """Parser for the labelled lines inside a DESCRIPTION."""

    def parse_game_number(self, description: str) -> Optional[int]:
        """Game number from ``Match: #382360`` and its locale variants."""
        match = GAME_NUMBER_RE.search(description)
        if not match:
            return None
        return int(match.group(1))

    def parse_league_category(self, description: str) -> Optional[str]:
        """Second field of a ``Ligue: #6652 | 3L | ♂`` line.

        Lines with fewer than three ``|``-separated parts are ignored.
        """
        match = LEAGUE_LINE_RE.search(description)
        if not match:
            return None

        parts = [part.strip() for part in match.group(1).split("|")]
        if len(parts) < LEAGUE_LINE_MIN_PARTS:
            logger.debug("League line has %d parts, expected %d", len(parts), LEAGUE_LINE_MIN_PARTS)
            return None

        return parts[1] or None

    def parse_hall(self, description: str) -> Optional[HallInfo]:
        """Hall ID and optional name from ``Salle: #3661 | Turnhalle ...``."""
        match = HALL_RE.search(description)
        if not match:
            return None

        name = (match.group(2) or "").strip() or None
        return HallInfo(hall_id=match.group(1), name=name)

    def parse_referees(self, description: str) -> dict[str, str]:
        """Convoked officials from ``ARB 1: Name | email | phone`` lines.

        Returns:
            Mapping with only the slots that were found
        """
        referees: dict[str, str] = {}

        for match in REFEREE_LINE_RE.finditer(description):
            slot = REFEREE_SLOTS.get((match.group(1), match.group(2)))
            name = match.group(3).strip()
            if slot is None or not name or slot in referees:
                continue
            referees[slot] = name

        return referees
