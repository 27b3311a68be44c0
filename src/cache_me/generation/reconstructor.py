from cache_me.capture.event import ReconstructedLine, Session


def reconstruct(sessions_by_path: dict[str, list[Session]]) -> list[ReconstructedLine]:
    """
    Rebuild the request stream that would reach the origin: one line per
    session, at the session's first timestamp, ordered by time.
    """
    lines = [
        ReconstructedLine(timestamp=session.start, path=path)
        for path, sessions in sessions_by_path.items()
        for session in sessions
    ]
    # sorted() is stable, so equal timestamps keep path encounter order
    return sorted(lines, key=lambda line: line.timestamp)


def format_log(lines: list[ReconstructedLine]) -> str:
    return "\n".join(line.format() for line in lines)
