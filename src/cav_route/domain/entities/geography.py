from dataclasses import dataclass


# Core geometry types used by the graph model
@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Path:
    nodes: tuple[int, ...]  # 0-based node indices, start first
    total_cost: float

    def numbered(self) -> list[int]:
        """1-based node numbers, as printed in reports."""
        return [n + 1 for n in self.nodes]

    def hops(self):
        return zip(self.nodes, self.nodes[1:])
