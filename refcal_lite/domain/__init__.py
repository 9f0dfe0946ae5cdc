"""Assignment extraction stage: CalendarEvent records to ParseResult records."""

from .assignment_extractor import LiteAssignmentExtractor, extract_assignment
from .assignment_models import (
    CalendarAssignment,
    FeedSummary,
    Gender,
    ParseConfidence,
    ParsedFields,
    ParseResult,
    RefereeRole,
)
from .confidence import calculate_confidence
from .pipeline import FeedPipeline, parse_calendar_feed, select_assignments, summarize_results

__all__ = [
    "CalendarAssignment",
    "FeedPipeline",
    "FeedSummary",
    "Gender",
    "LiteAssignmentExtractor",
    "ParseConfidence",
    "ParseResult",
    "ParsedFields",
    "RefereeRole",
    "calculate_confidence",
    "extract_assignment",
    "parse_calendar_feed",
    "select_assignments",
    "summarize_results",
]
