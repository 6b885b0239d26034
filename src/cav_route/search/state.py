# cav_route/search/state.py
from dataclasses import dataclass, field
from enum import Enum

from cav_route.domain.entities.geography import Path


class SearchState(Enum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SearchStats:
    expanded: int = 0  # nodes whose neighbors were relaxed
    pushed: int = 0  # frontier entries created, start included
    stale: int = 0  # popped entries superseded by a cheaper ledger cost
    relaxed: int = 0  # ledger writes after the start node
    wall_ms: float = 0.0


@dataclass(frozen=True)
class SearchResult:
    state: SearchState
    start: int
    goal: int
    path: Path | None = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND

    @property
    def cost(self) -> float | None:
        return self.path.total_cost if self.path else None
