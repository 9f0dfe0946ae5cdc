"""Feed pipeline: iCalendar text to ParseResult records.

Composes the decoding stage (``calendar.lite_parser``) with assignment
extraction. A run never raises on feed content; a bad event costs at most
that event.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..calendar.lite_models import CalendarEvent
from ..calendar.lite_parser import LiteICSParser
from .assignment_extractor import LiteAssignmentExtractor
from .assignment_models import CalendarAssignment, FeedSummary, ParseConfidence, ParseResult

logger = logging.getLogger(__name__)


class FeedPipeline:
    """Decode a feed and extract one ParseResult per surviving event."""

    def __init__(
        self,
        ics_parser: LiteICSParser | None = None,
        extractor: LiteAssignmentExtractor | None = None,
    ) -> None:
        self.ics_parser = ics_parser or LiteICSParser()
        self.extractor = extractor or LiteAssignmentExtractor()

    def parse(self, ics_content: Any) -> list[CalendarEvent]:
        """Stage one only: feed text to events."""
        return self.ics_parser.parse_ics_content(ics_content)

    def extract(self, event: CalendarEvent) -> ParseResult:
        """Stage two only: one event to one result."""
        return self.extractor.extract(event)

    def run(self, ics_content: Any) -> list[ParseResult]:
        """Parse the feed and extract every event, preserving feed order.

        Args:
            ics_content: Feed text; non-strings and empty text give ``[]``

        Returns:
            One ParseResult per event that survived decoding
        """
        results: list[ParseResult] = []

        for event in self.parse(ics_content):
            try:
                results.append(self.extract(event))
            except Exception:
                logger.exception("Failed to extract assignment from event %s", event.uid)
                continue

        logger.debug("Feed pipeline produced %d results", len(results))
        return results


def parse_calendar_feed(ics_content: Any) -> list[ParseResult]:
    """Run the full pipeline over feed text.

    Example:
        >>> results = parse_calendar_feed(feed_text)
        >>> [r.assignment.game_id for r in results if r.confidence == "high"]
        ['392936']
    """
    return FeedPipeline().run(ics_content)


def select_assignments(
    results: Iterable[ParseResult],
    min_confidence: str | ParseConfidence = ParseConfidence.MEDIUM,
    sort_by_start: bool = True,
) -> list[CalendarAssignment]:
    """Keep assignments at or above a confidence level.

    By default low-confidence results are dropped and the rest are ordered
    by start time, upcoming first. The sort is stable.

    Raises:
        ValueError: If ``min_confidence`` is not a known confidence level
    """
    threshold = ParseConfidence.rank(min_confidence)

    assignments = [
        result.assignment
        for result in results
        if ParseConfidence.rank(result.confidence) >= threshold
    ]

    if sort_by_start:
        assignments.sort(key=lambda assignment: assignment.start_time)

    return assignments


def summarize_results(results: Iterable[ParseResult]) -> FeedSummary:
    """Count results per confidence level and total warnings."""
    counts = {level.value: 0 for level in ParseConfidence}
    total = 0
    warning_count = 0

    for result in results:
        total += 1
        counts[ParseConfidence(result.confidence).value] += 1
        warning_count += len(result.warnings)

    return FeedSummary(total=total, warning_count=warning_count, **counts)
