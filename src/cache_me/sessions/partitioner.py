from collections.abc import Iterable

from cache_me.capture.event import Session


def partition(timestamps: Iterable[int], ttl_millis: int) -> list[Session]:
    """
    Split one path's request timestamps into cache sessions.

    A session opens at its first timestamp and absorbs every later timestamp
    before start + ttl_millis. The expiry is fixed when the session opens and
    is not pushed back by later hits.
    """
    ordered = sorted(timestamps)
    if not ordered:
        return []

    sessions: list[Session] = []
    current = [ordered[0]]
    expiry = ordered[0] + ttl_millis

    for ts in ordered[1:]:
        if ts < expiry:
            current.append(ts)
        else:
            sessions.append(Session(tuple(current)))
            current = [ts]
            expiry = ts + ttl_millis

    sessions.append(Session(tuple(current)))
    return sessions
