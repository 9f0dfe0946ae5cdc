"""Unit tests for description_parser module."""

import pytest

from refcal_lite.domain.description_parser import HallInfo, LiteDescriptionParser

pytestmark = pytest.mark.unit


@pytest.fixture
def parser() -> LiteDescriptionParser:
    return LiteDescriptionParser()


class TestParseGameNumber:
    """Tests for LiteDescriptionParser.parse_game_number."""

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("Match: #382360 | 05.02.2026 20:30 | OTA VOLLEY H1", 382360),
            ("Spiel: #123456 | Details", 123456),
            ("Partie: 654321", 654321),
            ("Spiel-Nr: 392936\nDatum: 15.02.2025", 392936),
            ("Fonction: ARB 2\nMatch: 789012\nDate: 22.02.2025", 789012),
        ],
    )
    def test_locale_labels(self, parser, description, expected):
        assert parser.parse_game_number(description) == expected

    def test_first_label_wins(self, parser):
        assert parser.parse_game_number("Match: #111\nMatch: #222") == 111

    def test_label_without_colon_is_ignored(self, parser):
        assert parser.parse_game_number("Match für Frauen ♀") is None

    def test_no_label(self, parser):
        assert parser.parse_game_number("") is None


class TestParseLeagueCategory:
    """Tests for LiteDescriptionParser.parse_league_category."""

    def test_french_ligue(self, parser):
        assert parser.parse_league_category("Ligue: #6652 | 3L | ♂") == "3L"

    def test_german_liga(self, parser):
        assert parser.parse_league_category("Liga: #1234 | NLA | ♂") == "NLA"

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("League: #1 | NLB | ♀", "NLB"),
            ("Lega: #2 | 1L | ♂", "1L"),
        ],
    )
    def test_english_and_italian_labels(self, parser, description, expected):
        assert parser.parse_league_category(description) == expected

    @pytest.mark.parametrize(
        "description",
        ["Ligue: #1234", "Liga: NLA Herren", "Ligue: Ligue Femmes A", "Ligue: #1 | 2L", "no league here"],
    )
    def test_too_few_parts_or_missing(self, parser, description):
        assert parser.parse_league_category(description) is None

    def test_line_ends_at_newline(self, parser):
        description = "Ligue: #6652 | 2L\nother | text | here"

        assert parser.parse_league_category(description) is None


class TestParseHall:
    """Tests for LiteDescriptionParser.parse_hall."""

    def test_french_salle_with_name(self, parser):
        result = parser.parse_hall("Salle: #3661 | Turnhalle Sekundarschule Feld (H)")

        assert result == HallInfo(hall_id="3661", name="Turnhalle Sekundarschule Feld (H)")

    def test_german_halle(self, parser):
        result = parser.parse_hall("Halle: #1234 | Sporthalle Zürich\nAdresse: x")

        assert result == HallInfo(hall_id="1234", name="Sporthalle Zürich")

    def test_english_hall(self, parser):
        result = parser.parse_hall("Hall: #5678 | Sports Center")

        assert result == HallInfo(hall_id="5678", name="Sports Center")

    def test_hash_is_optional(self, parser):
        assert parser.parse_hall("Salle: 1234 | Hall Name").hall_id == "1234"

    def test_id_without_name(self, parser):
        assert parser.parse_hall("Sala: #77") == HallInfo(hall_id="77", name=None)

    def test_label_without_digits(self, parser):
        assert parser.parse_hall("Halle: Saalsporthalle") is None


class TestParseReferees:
    """Tests for LiteDescriptionParser.parse_referees."""

    def test_two_referees(self, parser):
        description = "ARB 1: Damien Nguyen | email1\nARB 2: Peter Müller | email2"

        assert parser.parse_referees(description) == {
            "referee1": "Damien Nguyen",
            "referee2": "Peter Müller",
        }

    def test_literal_tab_escape_before_label(self, parser):
        description = "ARB convoqués:\n\\tARB 1: Damien Nguyen | ngn.damien@gmail.com | +41786795571"

        assert parser.parse_referees(description) == {"referee1": "Damien Nguyen"}

    def test_line_referees_and_sr_labels(self, parser):
        description = "SR 1: Anna Meier\nLR 1: Luca Rossi\nLR 2: Marie Dubois | phone"

        assert parser.parse_referees(description) == {
            "referee1": "Anna Meier",
            "lineReferee1": "Luca Rossi",
            "lineReferee2": "Marie Dubois",
        }

    def test_first_entry_per_slot_wins(self, parser):
        description = "ARB 1: First Person\nSR 1: Second Person"

        assert parser.parse_referees(description) == {"referee1": "First Person"}

    def test_empty_name_is_skipped(self, parser):
        assert parser.parse_referees("ARB 1: | email") == {}

    def test_no_referee_lines(self, parser):
        assert parser.parse_referees("Funktion: ARB 1\nSpiel-Nr: 392936") == {}

    def test_label_inside_word_is_ignored(self, parser):
        description = "USR 1: Not A Ref\nARB 2: Real Two"

        assert parser.parse_referees(description) == {"referee2": "Real Two"}

    def test_label_after_literal_tab_escape_and_space(self, parser):
        description = "\\tSR 1: Anna Meier | mail\n  LR 2: Luca Rossi"

        assert parser.parse_referees(description) == {
            "referee1": "Anna Meier",
            "lineReferee2": "Luca Rossi",
        }
