# cav_route/io/report.py
from cav_route.search.state import SearchResult

NO_PATH = "Did not find a path"


def render(result: SearchResult) -> str:
    """Text report: 1-based node numbers and total length, or the no-path line."""
    if not result.found:
        return NO_PATH
    path = result.path
    return "\n".join(
        [
            "Found the following path:",
            " ".join(str(n) for n in path.numbered()),
            f"Length: {path.total_cost}",
        ]
    )
