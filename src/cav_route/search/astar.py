# cav_route/search/astar.py
import math
import time
from typing import Literal

from cav_route.domain.entities.geography import Path
from cav_route.domain.graph import Graph
from cav_route.search.frontier import Frontier, FrontierEntry
from cav_route.search.hooks import NoopHooks, SearchHooks
from cav_route.search.ledger import CostLedger
from cav_route.search.reconstruct import reconstruct_path
from cav_route.search.state import SearchResult, SearchState, SearchStats

PriorityKey = Literal["exact", "truncated"]


class AStarSearch:
    """
    A* from start to goal over a Graph, Euclidean distance as edge cost and heuristic.

    All run state (ledger, frontier, state flag, counters) lives on the instance;
    run() resets it, so one driver may be reused for repeated searches.
    """

    def __init__(
        self,
        graph: Graph,
        *,
        start: int = 0,
        goal: int | None = None,
        priority_key: PriorityKey = "exact",
        hooks: SearchHooks | None = None,
    ):
        goal = graph.goal if goal is None else goal
        for name, node in (("start", start), ("goal", goal)):
            if not 0 <= node < graph.amount:
                raise ValueError(f"{name} node {node} outside [0, {graph.amount})")
        if priority_key not in ("exact", "truncated"):
            raise ValueError(f"Unknown priority key {priority_key!r}")

        self.graph, self.start, self.goal = graph, start, goal
        self.priority_key = priority_key
        self._hooks = hooks or NoopHooks()
        self._reset()

    def _reset(self) -> None:
        self.state = SearchState.RUNNING
        self.ledger = CostLedger()
        self.frontier = Frontier()
        self._expanded = self._pushed = self._stale = self._relaxed = 0

    def _key(self, estimate: float) -> float:
        # "truncated" reproduces integer priority keys; only safe for integral costs
        if self.priority_key == "truncated":
            return float(math.trunc(estimate))
        return estimate

    def _push(self, node: int, estimate: float) -> None:
        self.frontier.push(FrontierEntry(self._key(estimate), node))
        self._pushed += 1

    def _is_stale(self, entry: FrontierEntry) -> bool:
        best = self.ledger.get_cost(entry.node) + self.graph.distance(entry.node, self.goal)
        return entry.estimated_cost > self._key(best)

    def run(self) -> SearchResult:
        self._reset()
        G, goal = self.graph, self.goal
        t0 = time.perf_counter()
        self._hooks.run_start(start=self.start, goal=goal, nodes=G.amount)

        self.ledger.record(self.start, 0.0, None)
        self.frontier.push(FrontierEntry(0.0, self.start))
        self._pushed += 1

        while (entry := self.frontier.pop_min()) is not None:
            current = entry.node
            if current == goal:
                self.state = SearchState.FOUND
                break
            if self._is_stale(entry):
                self._stale += 1
                self._hooks.stale(current, estimate=entry.estimated_cost)
                continue

            g_current = self.ledger.get_cost(current)
            self._expanded += 1
            self._hooks.expand(
                current, cost=g_current, estimate=entry.estimated_cost, qsize=len(self.frontier)
            )
            for nb in G.neighbors(current):
                tentative = g_current + G.distance(current, nb)
                known = self.ledger.get_cost(nb)
                if known is None or tentative < known:
                    self.ledger.record(nb, tentative, current)
                    self._relaxed += 1
                    estimate = tentative + G.distance(nb, goal)
                    self._hooks.relax(nb, cost=tentative, predecessor=current, estimate=estimate)
                    self._push(nb, estimate)
        else:
            self.state = SearchState.EXHAUSTED

        path = None
        if self.state is SearchState.FOUND:
            nodes = reconstruct_path(self.ledger, goal, self.state)
            path = Path(tuple(nodes), self.ledger.get_cost(goal))

        stats = SearchStats(
            expanded=self._expanded,
            pushed=self._pushed,
            stale=self._stale,
            relaxed=self._relaxed,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        self._hooks.run_end(
            state=self.state.value,
            expanded=stats.expanded,
            pushed=stats.pushed,
            stale=stats.stale,
            relaxed=stats.relaxed,
            wall_ms=stats.wall_ms,
            cost=path.total_cost if path else None,
            hops=len(path.nodes) - 1 if path else None,
        )
        return SearchResult(self.state, self.start, goal, path, stats)


def astar(graph: Graph, **kw) -> SearchResult:
    """One-shot convenience wrapper around AStarSearch."""
    return AStarSearch(graph, **kw).run()
