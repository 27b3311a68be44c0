from cache_me.capture.event import RouteCount

HEADING = "Request Count"
EMPTY_MESSAGE = "No results... yet."


def format_results(results: list[RouteCount]) -> str:
    """Render route counts as a two-column listing under a heading."""
    if not results:
        return EMPTY_MESSAGE

    route_width = max(len(HEADING), *(len(r.route) for r in results))
    count_width = max(len(str(r.count)) for r in results)

    lines = [HEADING, "-" * (route_width + count_width + 2)]
    for r in results:
        lines.append(f"{r.route:<{route_width}}  {r.count:>{count_width}}")
    return "\n".join(lines)
