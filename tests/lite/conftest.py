"""Fixtures shared by the refcal_lite tests.

Feed fixtures are raw strings so iCal escapes (``\\n``, ``\\,``) reach the
parser exactly as they appear in a downloaded .ics file.
"""

from collections.abc import Generator
from typing import Any, Callable

import pytest

SAMPLE_ICAL = r"""BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Volleyball.ch//Volleymanager//EN
BEGIN:VEVENT
UID:referee-convocation-for-game-392936
SUMMARY:ARB 1 | TV St. Johann 1 - VTV Horw 1 (Mobiliar Volley Cup)
DESCRIPTION:Funktion: ARB 1\nSpiel-Nr: 392936\nDatum: 15.02.2025\nZeit: 14:00
DTSTART:20250215T140000
DTEND:20250215T170000
LOCATION:Sporthalle Sternenfeld, Sternenfeldstrasse 50, 4127 Birsfelden
GEO:47.5584;7.6277
END:VEVENT
END:VCALENDAR"""

MULTI_EVENT_ICAL = r"""BEGIN:VCALENDAR
VERSION:2.0
BEGIN:VEVENT
UID:referee-convocation-for-game-100001
SUMMARY:ARB 1 | Team A - Team B (NLA Herren)
DTSTART:20250220T180000
DTEND:20250220T210000
LOCATION:Halle 1, Address 1
GEO:47.1234;8.5678
END:VEVENT
BEGIN:VEVENT
UID:referee-convocation-for-game-100002
SUMMARY:ARB 2 | Team C - Team D (NLA Damen)
DTSTART:20250221T190000
DTEND:20250221T220000
LOCATION:Halle 2, Address 2
END:VEVENT
END:VCALENDAR"""

GERMAN_ICAL = r"""BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Volleyball.ch//Volleymanager//DE
BEGIN:VEVENT
UID:referee-convocation-for-game-456789
SUMMARY:ARB 1 | VBC Zürich - Volley Luzern 1 (NLA Herren)
DESCRIPTION:Funktion: ARB 1\nSpiel-Nr: 456789\nDatum: 20.02.2025\nZeit: 19:30\nTeams: VBC Zürich vs Volley Luzern 1\nLiga: NLA Herren\nHalle: Saalsporthalle\nAdresse: Sihlhölzlistrasse 5\, 8045 Zürich\nKontakt: Max Muster (+41 79 123 45 67)
DTSTART:20250220T193000
DTEND:20250220T220000
LOCATION:Saalsporthalle, Sihlhölzlistrasse 5, 8045 Zürich
GEO:47.3769;8.5417
END:VEVENT
END:VCALENDAR"""

FRENCH_ICAL = r"""BEGIN:VCALENDAR
VERSION:2.0
BEGIN:VEVENT
UID:referee-convocation-for-game-789012
SUMMARY:ARB 2 | Genève Volley - Lausanne UC (Ligue Femmes A)
DESCRIPTION:Fonction: ARB 2\nMatch: 789012\nDate: 22.02.2025\nLigue: Ligue Femmes A
DTSTART:20250222T150000
DTEND:20250222T180000
LOCATION:Centre Sportif du Bois-des-Frères, Route de Valavran 10, 1293 Bellevue
GEO:46.2539;6.1589
END:VEVENT
END:VCALENDAR"""

# Every description-embedded field at once; "\t" before the referee lines is
# a literal backslash-t as served by the federation backend.
COMBINED_ICAL = r"""BEGIN:VCALENDAR
VERSION:2.0
BEGIN:VEVENT
UID:referee-convocation-for-game-382360
SUMMARY:ARB 1 | OTA VOLLEY H1 - VBC Rämi H3 (3L Herren)
DESCRIPTION:Engagé en tant que: ARB 1\nMatch: #382360 | 05.02.2026 20:30 | OTA VOLLEY H1 — VBC Rämi H3\nLigue: #6652 | 3L | ♂\nARB convoqués:\n\tARB 1: Damien Nguyen | ngn.damien@gmail.com | +41786795571\n\tARB 2: Peter Müller | peterc.mueller@icloud.com | +41791940964\nSalle: #3661 | Turnhalle Sekundarschule Feld (H)\nAdresse: Bergstrasse 2, 8800 Thalwil\nhttps://maps.google.com/?q=8FVC7HR7%2BC3&hl=fr
DTSTART:20260205T203000
DTEND:20260205T230000
LOCATION:Turnhalle Sekundarschule Feld (H), Bergstrasse 2, 8800 Thalwil
GEO:47.2900;8.5600
END:VEVENT
END:VCALENDAR"""


def build_ical(*vevent_bodies: str, line_ending: str = "\r\n") -> str:
    """Wrap VEVENT property lines in a minimal VCALENDAR."""
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0"]
    for body in vevent_bodies:
        lines.append("BEGIN:VEVENT")
        lines.extend(body.strip("\n").split("\n"))
        lines.append("END:VEVENT")
    lines.append("END:VCALENDAR")
    return line_ending.join(lines)


@pytest.fixture
def sample_ical() -> str:
    """Single high-confidence referee convocation."""
    return SAMPLE_ICAL


@pytest.fixture
def multi_event_ical() -> str:
    """Two convocations; the second has no GEO."""
    return MULTI_EVENT_ICAL


@pytest.fixture
def german_ical() -> str:
    return GERMAN_ICAL


@pytest.fixture
def french_ical() -> str:
    return FRENCH_ICAL


@pytest.fixture
def combined_ical() -> str:
    """Convocation carrying game number, league category, hall, referees and a maps link."""
    return COMBINED_ICAL


@pytest.fixture
def ical_builder() -> Callable[..., str]:
    """Return the build_ical helper for tests that assemble feeds inline."""
    return build_ical


@pytest.fixture(autouse=True)
def clean_refcal_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Ensure REFCAL_* variables neither leak in from the host nor out of a test.

    Setting before deleting makes monkeypatch record the original state, so
    values written by ConfigManager.load_env_file() are undone at teardown.
    """
    for key in ("REFCAL_DEBUG", "REFCAL_LOG_LEVEL", "REFCAL_MIN_CONFIDENCE", "REFCAL_SORT_BY_START"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    yield
