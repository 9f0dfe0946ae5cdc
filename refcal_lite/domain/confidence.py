"""Confidence scoring for extracted assignments."""

from .assignment_models import ParseConfidence, ParsedFields

# Without these the assignment cannot be displayed at all
CRITICAL_FIELDS = ("game_id", "role", "teams")
OPTIONAL_FIELDS = ("league", "venue", "address", "coordinates")


def calculate_confidence(fields: ParsedFields) -> ParseConfidence:
    """Rate a ParsedFields report.

    - low: any critical field is missing
    - high: every critical and optional field was recovered
    - medium: critical fields present, at least one optional field missing
    """
    if not all(getattr(fields, name) for name in CRITICAL_FIELDS):
        return ParseConfidence.LOW
    if all(getattr(fields, name) for name in OPTIONAL_FIELDS):
        return ParseConfidence.HIGH
    return ParseConfidence.MEDIUM
