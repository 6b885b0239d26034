# cav_route/search/frontier.py
import heapq
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class FrontierEntry:
    # field order is the sort order: estimate first, node index breaks ties
    estimated_cost: float
    node: int


class Frontier:
    """Min-heap of FrontierEntry with lazy deletion (no decrease-key)."""

    def __init__(self):
        self._q: list[FrontierEntry] = []

    def push(self, entry: FrontierEntry) -> None:
        heapq.heappush(self._q, entry)

    def pop_min(self) -> FrontierEntry | None:
        if not self._q:
            return None
        return heapq.heappop(self._q)

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
