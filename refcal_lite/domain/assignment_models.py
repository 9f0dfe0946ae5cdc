"""Data models for referee assignments extracted from calendar events."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..calendar.lite_models import GeoCoordinates


class RefereeRole(str, Enum):
    """Role of the convoked official."""

    REFEREE_1 = "referee1"
    REFEREE_2 = "referee2"
    LINE_REFEREE = "lineReferee"
    SCORER = "scorer"
    UNKNOWN = "unknown"


class Gender(str, Enum):
    """Gender category of the match."""

    MEN = "men"
    WOMEN = "women"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class ParseConfidence(str, Enum):
    """How far an extracted assignment can be trusted."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def rank(cls, value: "str | ParseConfidence") -> int:
        """Order confidences low < medium < high."""
        return {cls.LOW: 0, cls.MEDIUM: 1, cls.HIGH: 2}[cls(value)]


# Keys allowed in CalendarAssignment.referees
REFEREE_KEYS = ("referee1", "referee2", "lineReferee1", "lineReferee2")


class CalendarAssignment(BaseModel):
    """Referee assignment recovered from one calendar event.

    Field names are snake_case; ``model_dump(by_alias=True)`` produces the
    camelCase keys used by the client application.
    """

    game_id: str = Field(default="", alias="gameId", description="Game ID from the UID")
    game_number: Optional[int] = Field(
        default=None, alias="gameNumber", description="Game number from the description"
    )
    role: RefereeRole = Field(default=RefereeRole.UNKNOWN, description="Normalized role")
    role_raw: str = Field(default="", alias="roleRaw", description="Role text as matched")

    start_time: str = Field(default="", alias="startTime", description="ISO-8601 start")
    end_time: str = Field(default="", alias="endTime", description="ISO-8601 end")

    home_team: str = Field(default="", alias="homeTeam")
    away_team: str = Field(default="", alias="awayTeam")
    league: str = Field(default="", description="League name from the summary")
    league_category: Optional[str] = Field(
        default=None, alias="leagueCategory", description="League code such as 3L or NLA"
    )

    address: Optional[str] = Field(default=None, description="Venue address")
    coordinates: Optional[GeoCoordinates] = Field(default=None)
    hall_name: Optional[str] = Field(default=None, alias="hallName")
    hall_id: Optional[str] = Field(default=None, alias="hallId")

    gender: Gender = Field(default=Gender.UNKNOWN)
    maps_url: Optional[str] = Field(default=None, alias="mapsUrl")
    referees: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Convoked officials keyed by referee slot",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    @field_validator("referees", mode="after")
    @classmethod
    def _freeze_referees(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("referees")
    def _serialize_referees(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


class ParsedFields(BaseModel):
    """Which field groups were recovered for an event."""

    game_id: bool = Field(default=False, alias="gameId")
    role: bool = False
    teams: bool = False
    league: bool = False
    venue: bool = False
    address: bool = False
    coordinates: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ParseResult(BaseModel):
    """Assignment plus the provenance needed to decide whether to trust it."""

    assignment: CalendarAssignment
    parsed_fields: ParsedFields = Field(..., alias="parsedFields")
    confidence: ParseConfidence
    warnings: tuple[str, ...] = Field(default=())

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)


class FeedSummary(BaseModel):
    """Counts over a list of ParseResult records."""

    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    warning_count: int = Field(default=0, alias="warningCount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
