import logging

from cache_me.capture.aggregator import aggregate, to_route_counts
from cache_me.capture.event import CalculationResult
from cache_me.capture.parser import minutes_to_millis, parse_events, parse_ttl_minutes, split_templates
from cache_me.generation.reconstructor import reconstruct
from cache_me.routing.matcher import compile_templates

logger = logging.getLogger(__name__)

# Example input shown in the form before anything is pasted
SAMPLE_INPUT = """1552321187716 /hello
1552321187716 /is
1552321187716 /it
1552321187716 /me
1552321187716 /hello
"""


def calculate(
    text: str,
    minutes,
    routes: str = "",
    group_by_route: bool = True,
) -> CalculationResult:
    """
    Estimate cache fills for a pasted access log.

    Raises InvalidTTL if minutes is not a whole number. Malformed log lines and
    route templates are skipped.
    """
    ttl_millis = minutes_to_millis(parse_ttl_minutes(minutes))
    events, skipped = parse_events(text)
    matcher = compile_templates(split_templates(routes)) if group_by_route else None

    aggregation = aggregate(events, ttl_millis, matcher)
    log = reconstruct(aggregation.sessions_by_path)

    logger.debug(
        "cache-me: %d event(s) across %d path(s) -> %d cache fill(s), %d line(s) skipped",
        len(events), len(aggregation.sessions_by_path), len(log), skipped,
    )

    return CalculationResult(
        results=to_route_counts(aggregation.counts),
        log=log,
        sessions_by_path=aggregation.sessions_by_path,
        skipped_lines=skipped,
    )
