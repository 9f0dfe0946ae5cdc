"""Data models for decoded iCalendar events - RefCal Lite version."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeoCoordinates(BaseModel):
    """Geographic position taken from a GEO property."""

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)


class CalendarEvent(BaseModel):
    """One VEVENT block decoded into plain strings.

    Dates are ISO-8601 strings as produced by the date normalizer; a trailing
    ``Z`` marks UTC. No timezone resolution happens at this stage.
    """

    uid: str = Field(..., min_length=1, description="UID property")
    summary: str = Field(..., min_length=1, description="SUMMARY property")
    description: str = Field(default="", description="Unescaped DESCRIPTION text")
    dtstart: str = Field(..., min_length=1, description="Normalized DTSTART")
    dtend: str = Field(..., min_length=1, description="Normalized DTEND (DTSTART if absent)")
    location: Optional[str] = Field(default=None, description="LOCATION property")
    geo: Optional[GeoCoordinates] = Field(default=None, description="GEO coordinates")

    # Informational only, never used to convert the instant
    tzid: Optional[str] = Field(default=None, description="TZID parameter of DTSTART")
    apple_location_title: Optional[str] = Field(
        default=None, description="X-TITLE of X-APPLE-STRUCTURED-LOCATION"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("uid", "summary", "dtstart")
    @classmethod
    def _require_text(cls, value: str) -> str:
        """Reject values that are blank once whitespace is removed."""
        if not value.strip():
            raise ValueError("value must not be blank")
        return value
