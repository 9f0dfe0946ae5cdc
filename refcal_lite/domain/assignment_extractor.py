"""Assignment extraction from decoded calendar events - RefCal Lite.

Recovers role, teams, league, venue and the description-embedded extras
from one CalendarEvent using the pattern tables in ``assignment_patterns``.
Nothing here depends on the feed language for the critical fields; every
failed sub-extraction is reported through ParsedFields and a warning.

Warning texts are part of the public behaviour (callers and tests match on
them), so they live in module constants.
"""

import logging
import re
from typing import NamedTuple, Optional
from urllib.parse import quote

from ..calendar.lite_models import CalendarEvent, GeoCoordinates
from .assignment_models import (
    CalendarAssignment,
    Gender,
    ParsedFields,
    ParseResult,
    RefereeRole,
)
from .assignment_patterns import (
    ADDRESS_MAPS_URL,
    COORDINATES_MAPS_URL,
    GAME_ID_FALLBACK_RE,
    GAME_ID_RE,
    GENDER_PATTERNS,
    MAPS_URL_RE,
    ROLE_DELIMITER,
    ROLE_PATTERNS,
    TEAM_SEPARATOR,
    TRAILING_GROUP_RE,
)
from .confidence import calculate_confidence
from .description_parser import LiteDescriptionParser

logger = logging.getLogger(__name__)

WARNING_GAME_ID_FALLBACK = "Game ID extracted using fallback pattern"
WARNING_GAME_ID_MISSING = "Could not extract game ID from UID"
WARNING_UNKNOWN_ROLE = 'Unknown role format: "{raw}"'
WARNING_TEAMS_MISSING = "Could not extract teams from summary"
WARNING_LEAGUE_MISSING = "Could not extract league from summary"

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"

_WHITESPACE_RE = re.compile(r"\s+")


class SummaryParts(NamedTuple):
    """SUMMARY split into its role segment and match part."""

    role_segment: str
    match_part: Optional[str]
    league: Optional[str]


class VenueInfo(NamedTuple):
    hall_name: Optional[str]
    address: Optional[str]


def collapse_whitespace(text: str) -> str:
    """Trim and collapse internal whitespace runs to one space."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def encode_uri_component(text: str) -> str:
    """Percent-encode like JavaScript's encodeURIComponent."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def format_coordinate(value: float) -> str:
    """Shortest text for a coordinate; whole degrees print without '.0'."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


class LiteAssignmentExtractor:
    """Extractor turning one CalendarEvent into a ParseResult.

    Instances hold no per-event state; warnings are collected in a list local
    to each ``extract`` call.
    """

    def __init__(self, description_parser: Optional[LiteDescriptionParser] = None) -> None:
        """Initialize the extractor.

        Args:
            description_parser: Parser for labelled description lines
        """
        self.description_parser = description_parser or LiteDescriptionParser()

    def extract(self, event: CalendarEvent) -> ParseResult:
        """Extract an assignment and its provenance from an event.

        Args:
            event: Decoded calendar event

        Returns:
            ParseResult with assignment, parsed fields, confidence and warnings
        """
        warnings: list[str] = []

        game_id = self._extract_game_id(event.uid, warnings)

        summary = self._split_summary(event.summary)
        role, role_raw = self._extract_role(summary.role_segment, warnings)
        home_team, away_team = self._extract_teams(summary.match_part, warnings)
        if summary.league is None:
            warnings.append(WARNING_LEAGUE_MISSING)
        league = summary.league or ""

        venue = self._extract_venue(event.location)
        coordinates = event.geo

        description = event.description
        hall = self.description_parser.parse_hall(description)
        hall_name = venue.hall_name
        if hall_name is None and hall is not None:
            hall_name = hall.name
        if hall_name is None:
            hall_name = event.apple_location_title

        parsed_fields = ParsedFields(
            game_id=bool(game_id),
            role=role != RefereeRole.UNKNOWN,
            teams=bool(home_team and away_team),
            league=summary.league is not None,
            venue=venue.hall_name is not None,
            address=venue.address is not None,
            coordinates=coordinates is not None,
        )

        assignment = CalendarAssignment(
            game_id=game_id,
            game_number=self.description_parser.parse_game_number(description),
            role=role,
            role_raw=role_raw,
            start_time=event.dtstart,
            end_time=event.dtend,
            home_team=home_team,
            away_team=away_team,
            league=league,
            league_category=self.description_parser.parse_league_category(description),
            address=venue.address,
            coordinates=coordinates,
            hall_name=hall_name,
            hall_id=hall.hall_id if hall is not None else None,
            gender=self._detect_gender(league, description),
            maps_url=self._build_maps_url(description, coordinates, venue.address),
            referees=self.description_parser.parse_referees(description),
        )

        confidence = calculate_confidence(parsed_fields)
        if warnings:
            logger.debug("Event %s parsed with %s confidence: %s", event.uid, confidence.value, warnings)

        return ParseResult(
            assignment=assignment,
            parsed_fields=parsed_fields,
            confidence=confidence,
            warnings=tuple(warnings),
        )

    def _extract_game_id(self, uid: str, warnings: list[str]) -> str:
        """Game ID from ``...-for-game-<digits>``, else the last ``#<digits>``."""
        match = GAME_ID_RE.search(uid)
        if match:
            return match.group(1)

        fallback = GAME_ID_FALLBACK_RE.findall(uid)
        if fallback:
            warnings.append(WARNING_GAME_ID_FALLBACK)
            return fallback[-1]

        warnings.append(WARNING_GAME_ID_MISSING)
        return ""

    def _split_summary(self, summary: str) -> SummaryParts:
        """Split ``<role> | <home> - <away> (<league>)``.

        The league is the parenthesized group at the very end of the summary;
        parentheses inside team names are left alone.
        """
        role_segment, delimiter, remainder = summary.partition(ROLE_DELIMITER)

        league_match = TRAILING_GROUP_RE.search(summary)
        league = league_match.group(1).strip() if league_match else None
        if league == "":
            league = None

        if not delimiter:
            return SummaryParts(role_segment=role_segment, match_part=None, league=league)

        match_part = remainder
        if league_match:
            trailing = TRAILING_GROUP_RE.search(remainder)
            if trailing:
                match_part = remainder[: trailing.start()]

        return SummaryParts(role_segment=role_segment, match_part=match_part, league=league)

    def _extract_role(self, segment: str, warnings: list[str]) -> tuple[RefereeRole, str]:
        role_raw = collapse_whitespace(segment)

        for pattern, role in ROLE_PATTERNS:
            if pattern.match(role_raw):
                return role, role_raw

        warnings.append(WARNING_UNKNOWN_ROLE.format(raw=role_raw))
        return RefereeRole.UNKNOWN, role_raw

    def _extract_teams(self, match_part: Optional[str], warnings: list[str]) -> tuple[str, str]:
        if match_part is not None:
            home, separator, away = match_part.partition(TEAM_SEPARATOR)
            home, away = home.strip(), away.strip()
            if separator and home and away:
                return home, away

        warnings.append(WARNING_TEAMS_MISSING)
        return "", ""

    def _extract_venue(self, location: Optional[str]) -> VenueInfo:
        """Hall name before the first comma, address after it.

        Without a comma both carry the whole location.
        """
        if location is None or not location.strip():
            return VenueInfo(hall_name=None, address=None)

        location = location.strip()
        hall_name, comma, rest = location.partition(",")
        hall_name, rest = hall_name.strip(), rest.strip()

        if not comma or not hall_name or not rest:
            return VenueInfo(hall_name=location, address=location)

        return VenueInfo(hall_name=hall_name, address=rest)

    def _detect_gender(self, league: str, description: str) -> Gender:
        for text in (league, description):
            if not text:
                continue
            for pattern, gender in GENDER_PATTERNS:
                if pattern.search(text):
                    return gender
        return Gender.UNKNOWN

    def _build_maps_url(
        self,
        description: str,
        coordinates: Optional[GeoCoordinates],
        address: Optional[str],
    ) -> Optional[str]:
        """Explicit URL in the description, then coordinates, then address."""
        match = MAPS_URL_RE.search(description)
        if match:
            return match.group(0)

        if coordinates is not None:
            return COORDINATES_MAPS_URL.format(
                latitude=format_coordinate(coordinates.latitude),
                longitude=format_coordinate(coordinates.longitude),
            )

        if address:
            return ADDRESS_MAPS_URL.format(query=encode_uri_component(address))

        return None


def extract_assignment(event: CalendarEvent) -> ParseResult:
    """Extract a ParseResult from one event with a default extractor."""
    return LiteAssignmentExtractor().extract(event)
