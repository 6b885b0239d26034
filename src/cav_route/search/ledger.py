# cav_route/search/ledger.py


class CostLedger:
    """
    Best known travelled cost and predecessor per discovered node.
    Plain key-value store with overwrite semantics; callers decide when a
    cost is an improvement.
    """

    def __init__(self):
        self._cost: dict[int, float] = {}
        self._prev: dict[int, int] = {}

    def get_cost(self, node: int) -> float | None:
        return self._cost.get(node)

    def predecessor_of(self, node: int) -> int | None:
        return self._prev.get(node)

    def record(self, node: int, cost: float, predecessor: int | None) -> None:
        self._cost[node] = cost
        if predecessor is None:
            self._prev.pop(node, None)
        else:
            self._prev[node] = predecessor

    def __contains__(self, node: int) -> bool:
        return node in self._cost

    def __len__(self) -> int:
        return len(self._cost)
