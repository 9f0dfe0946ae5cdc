"""Content-line handling for iCalendar feeds - RefCal Lite.

Covers the three text-level steps that run before any event is built:

- unfolding RFC 5545 continuation lines into logical lines
- splitting logical lines into one block per VEVENT
- decoding ``NAME;PARAM=VALUE:VALUE`` property lines and unescaping text values

Everything here is tolerant: malformed lines and unterminated blocks are
dropped, never reported as errors.
"""

import logging
import re
from typing import Any, NamedTuple, Optional

logger = logging.getLogger(__name__)

# Only CR/LF variants are line breaks; Unicode separators stay inside values.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

RECOGNIZED_PROPERTIES = frozenset(
    {
        "UID",
        "SUMMARY",
        "DESCRIPTION",
        "DTSTART",
        "DTEND",
        "LOCATION",
        "GEO",
        "X-APPLE-STRUCTURED-LOCATION",
    }
)

_TEXT_ESCAPES = {
    "n": "\n",
    "N": "\n",
    ",": ",",
    ";": ";",
    "\\": "\\",
}


class ContentLine(NamedTuple):
    """A decoded property line."""

    name: str
    params: dict[str, str]
    value: str


def unfold_lines(raw: Any) -> list[str]:
    """Rejoin folded continuation lines.

    A line starting with a single space or tab continues the previous logical
    line: that one character is removed and the rest is appended directly.

    Args:
        raw: Feed text; anything that is not a ``str`` yields no lines

    Returns:
        Logical lines in source order
    """
    if not isinstance(raw, str) or not raw:
        return []

    logical: list[str] = []
    for line in _LINE_BREAK_RE.split(raw):
        if line[:1] in (" ", "\t"):
            if not logical:
                logger.debug("Dropping continuation line without a preceding line")
                continue
            logical[-1] += line[1:]
        else:
            logical.append(line)

    return logical


def split_event_blocks(lines: list[str]) -> list[list[str]]:
    """Partition logical lines into VEVENT property blocks.

    Markers are matched case-insensitively. The BEGIN/END lines themselves are
    not part of a block. Nested components (VALARM and friends) inside an
    event are skipped. A block still open at END:VCALENDAR, at a new
    BEGIN:VEVENT or at end of input is discarded.

    Args:
        lines: Logical (unfolded) lines

    Returns:
        One list of property lines per complete VEVENT, in source order
    """
    blocks: list[list[str]] = []
    current: Optional[list[str]] = None
    nested_depth = 0

    for line in lines:
        marker = line.strip().upper()

        if marker == "BEGIN:VEVENT":
            if current is not None:
                logger.debug("Discarding unterminated VEVENT (%d lines)", len(current))
            current = []
            nested_depth = 0
            continue

        if current is None:
            continue

        if marker == "END:VEVENT" and nested_depth == 0:
            blocks.append(current)
            current = None
        elif marker == "END:VCALENDAR":
            logger.debug("Discarding VEVENT left open at END:VCALENDAR")
            current = None
            nested_depth = 0
        elif marker.startswith("BEGIN:"):
            nested_depth += 1
        elif marker.startswith("END:") and nested_depth > 0:
            nested_depth -= 1
        elif nested_depth == 0:
            current.append(line)

    if current is not None:
        logger.debug("Discarding VEVENT without END:VEVENT at end of input")

    return blocks


def unescape_text(value: str) -> str:
    """Undo RFC 5545 TEXT escaping.

    The scan runs left to right and consumes two characters per escape, so an
    escaped backslash is never re-read as the start of another escape:
    ``Path\\\\nName`` becomes ``Path\\nName`` (backslash, ``n``), not a newline.
    Unknown escapes are kept verbatim.
    """
    if "\\" not in value:
        return value

    out: list[str] = []
    i = 0
    length = len(value)
    while i < length:
        ch = value[i]
        if ch == "\\" and i + 1 < length and value[i + 1] in _TEXT_ESCAPES:
            out.append(_TEXT_ESCAPES[value[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1

    return "".join(out)


def _split_outside_quotes(text: str, separator: str) -> list[str]:
    parts: list[str] = []
    in_quotes = False
    start = 0
    for i, ch in enumerate(text):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == separator and not in_quotes:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


def _find_value_colon(line: str) -> int:
    in_quotes = False
    for i, ch in enumerate(line):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == ":" and not in_quotes:
            return i
    return -1


def parse_content_line(line: str) -> Optional[ContentLine]:
    """Decode one property line.

    The property name is upper-cased and parameter keys are upper-cased;
    parameter values lose surrounding double quotes. The value is returned
    raw; text unescaping is the caller's choice.

    Returns:
        ContentLine, or None if the line has no colon or no name
    """
    colon = _find_value_colon(line)
    if colon < 0:
        return None

    head = line[:colon]
    value = line[colon + 1 :]

    segments = _split_outside_quotes(head, ";")
    name = segments[0].strip().upper()
    if not name:
        return None

    params: dict[str, str] = {}
    for segment in segments[1:]:
        key, sep, param_value = segment.partition("=")
        key = key.strip().upper()
        if not sep or not key:
            continue
        param_value = param_value.strip()
        if len(param_value) >= 2 and param_value[0] == '"' and param_value[-1] == '"':
            param_value = param_value[1:-1]
        params.setdefault(key, param_value)

    return ContentLine(name=name, params=params, value=value)


def decode_block(block: list[str]) -> dict[str, ContentLine]:
    """Decode the recognized properties of one VEVENT block.

    Unrecognized properties are ignored. When a property repeats, the first
    occurrence is kept.

    Returns:
        Mapping of upper-case property name to its ContentLine
    """
    properties: dict[str, ContentLine] = {}
    for line in block:
        content = parse_content_line(line)
        if content is None:
            if line.strip():
                logger.debug("Ignoring malformed property line: %r", line[:80])
            continue
        if content.name not in RECOGNIZED_PROPERTIES:
            continue
        if content.name in properties:
            logger.debug("Ignoring repeated %s property", content.name)
            continue
        properties[content.name] = content

    return properties
