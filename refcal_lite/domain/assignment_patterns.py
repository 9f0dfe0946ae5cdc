"""Pattern tables for assignment extraction.

Each table is an ordered sequence of ``(pattern, result)`` pairs evaluated
top to bottom; the first matching entry wins. Supporting another feed locale
means adding rows here, not branches in the extractor.
"""

import re

from .assignment_models import Gender, RefereeRole

# UID markers
GAME_ID_RE = re.compile(r"for-game-(\d+)")
GAME_ID_FALLBACK_RE = re.compile(r"#(\d+)")

# SUMMARY grammar: "<role> | <home> - <away> (<league>)"
ROLE_DELIMITER = "|"
TEAM_SEPARATOR = " - "
TRAILING_GROUP_RE = re.compile(r"\(([^()]*)\)\s*$")

# Matched against the whitespace-collapsed role segment
ROLE_PATTERNS: tuple[tuple[re.Pattern[str], RefereeRole], ...] = (
    (re.compile(r"^(?:ARB|SR) ?1$", re.IGNORECASE), RefereeRole.REFEREE_1),
    (re.compile(r"^(?:ARB|SR) ?2$", re.IGNORECASE), RefereeRole.REFEREE_2),
    (re.compile(r"^LR(?: ?[12])?$", re.IGNORECASE), RefereeRole.LINE_REFEREE),
    (re.compile(r"^(?:JL(?: ?[12])?|SCR|SEC)$", re.IGNORECASE), RefereeRole.SCORER),
)

# Applied to the league name first, then to the description
GENDER_PATTERNS: tuple[tuple[re.Pattern[str], Gender], ...] = (
    (re.compile(r"\b(?:Herren|Hommes|Uomini)\b", re.IGNORECASE), Gender.MEN),
    (re.compile(r"\b(?:Damen|Femmes|Donne)\b", re.IGNORECASE), Gender.WOMEN),
    (re.compile(r"\b(?:Mixed|Mixte|Misto)\b", re.IGNORECASE), Gender.MIXED),
    (re.compile("♂"), Gender.MEN),
    (re.compile("♀"), Gender.WOMEN),
)

MAPS_URL_RE = re.compile(r"https://(?:maps\.google\.com|www\.google\.com/maps)\S*")
COORDINATES_MAPS_URL = "https://www.google.com/maps?q={latitude},{longitude}"
ADDRESS_MAPS_URL = "https://www.google.com/maps/search/?api=1&query={query}"

# Description labels (German / French / Italian / English)
GAME_NUMBER_RE = re.compile(
    r"\b(?:Match|Spiel|Partie)(?:-Nr\.?)?\s*:\s*#?\s*(\d+)", re.IGNORECASE
)
LEAGUE_LINE_RE = re.compile(r"\b(?:Ligue|Liga|League|Lega)\s*:([^\n]*)", re.IGNORECASE)
HALL_RE = re.compile(
    r"\b(?:Salle|Halle|Hall|Sala)\s*:\s*#?\s*(\d+)(?:[ \t]*\|[ \t]*([^|\n]*))?",
    re.IGNORECASE,
)
# Not line-anchored: feeds indent these lines with a literal "\t" that is
# not an iCal escape and survives unescaping. Otherwise the label must not
# follow a letter, so "USR 1:" is not read as "SR 1:".
REFEREE_LINE_RE = re.compile(
    r"(?:(?<=\\t)|(?<![A-Za-z]))(ARB|SR|LR)[ \t]*([12])[ \t]*:[ \t]*([^|\n]*)"
)

# (label, slot number) -> CalendarAssignment.referees key
REFEREE_SLOTS: dict[tuple[str, str], str] = {
    ("ARB", "1"): "referee1",
    ("ARB", "2"): "referee2",
    ("SR", "1"): "referee1",
    ("SR", "2"): "referee2",
    ("LR", "1"): "lineReferee1",
    ("LR", "2"): "lineReferee2",
}

# Minimum "|"-separated parts in a league line for the category to be read
LEAGUE_LINE_MIN_PARTS = 3
