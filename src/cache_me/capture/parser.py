import logging
import re

from cache_me.capture.event import Event
from cache_me.errors import InvalidTTL, MalformedEventLine

logger = logging.getLogger(__name__)

MILLIS_PER_MINUTE = 60_000

# "<timestamp> <path>" with exactly one separating space; the path is kept verbatim
_EVENT_LINE = re.compile(r"^(-?\d+) (.+)$")
_WHOLE_NUMBER = re.compile(r"^[+-]?\d+$")


def parse_line(line: str, line_number: int = 1) -> Event | None:
    """Parse a single log line. Blank lines yield None."""
    stripped = line.strip()
    if not stripped:
        return None
    m = _EVENT_LINE.match(stripped)
    if m is None:
        raise MalformedEventLine(line_number, stripped)
    return Event(timestamp=int(m.group(1)), path=m.group(2))


def parse_events(text: str) -> tuple[list[Event], int]:
    """
    Parse newline-separated "<timestamp> <path>" records.

    Returns the events in input order together with the number of malformed
    lines that were skipped.
    """
    events: list[Event] = []
    skipped = 0
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            event = parse_line(line, line_number)
        except MalformedEventLine as e:
            logger.warning("cache-me: skipping malformed log line: %s", e)
            skipped += 1
            continue
        if event is not None:
            events.append(event)
    return events, skipped


def split_templates(text: str) -> list[str]:
    """Split a comma-separated template list, trimming entries and dropping empty ones."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_ttl_minutes(value) -> int:
    """Validate the cache time input (minutes) as a whole number."""
    if isinstance(value, bool):
        raise InvalidTTL(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _WHOLE_NUMBER.match(value.strip()):
        return int(value.strip())
    raise InvalidTTL(value)


def minutes_to_millis(minutes: int) -> int:
    return minutes * MILLIS_PER_MINUTE
