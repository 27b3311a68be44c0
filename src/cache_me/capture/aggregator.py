from cache_me.capture.event import Aggregation, Event, RouteCount
from cache_me.routing.matcher import CompiledMatcher
from cache_me.sessions.partitioner import partition


def aggregate(
    events: list[Event],
    ttl_millis: int,
    matcher: CompiledMatcher | None = None,
) -> Aggregation:
    """
    Count cache sessions per route.

    Events are grouped by literal path and each group is split into sessions.
    Session counts are then summed under the path's matching route template,
    or under the literal path when nothing matches or matcher is None.
    Groups and keys keep the order in which they first appear in events.
    """
    timestamps_by_path: dict[str, list[int]] = {}
    for event in events:
        timestamps_by_path.setdefault(event.path, []).append(event.timestamp)

    result = Aggregation()
    for path, timestamps in timestamps_by_path.items():
        sessions = partition(timestamps, ttl_millis)
        result.sessions_by_path[path] = sessions

        key = matcher.key_for(path) if matcher is not None else path
        result.counts[key] = result.counts.get(key, 0) + len(sessions)

    return result


def to_route_counts(counts: dict[str, int]) -> list[RouteCount]:
    return [RouteCount(route=key, count=count) for key, count in counts.items()]
