# cav_route/domain/graph.py
import math
from collections.abc import Sequence
from typing import Literal

import numpy as np

from cav_route.domain.entities.geography import Point
from cav_route.errors import MalformedInputError

Adjacency = Literal["incoming", "outgoing"]


class Graph:
    """
    Static point graph: integer coordinates plus a dense 0/1 adjacency matrix.

    Neighbor convention:
      • "incoming": n is a neighbor of node when matrix[n][node] == 1
      • "outgoing": n is a neighbor of node when matrix[node][n] == 1
    Both agree on symmetric matrices.
    """

    def __init__(
        self,
        amount: int,
        coords: Sequence[tuple[int, int]] | Sequence[Point],
        matrix,
        *,
        adjacency: Adjacency = "incoming",
        require_symmetric: bool = False,
    ):
        if amount < 1:
            raise MalformedInputError(f"node count must be >= 1, got {amount}")
        if len(coords) != amount:
            raise MalformedInputError(f"expected {amount} coordinates, got {len(coords)}")
        if adjacency not in ("incoming", "outgoing"):
            raise ValueError(f"Unknown adjacency convention {adjacency!r}")

        try:
            m = np.asarray(matrix)
        except (TypeError, ValueError) as exc:
            # ragged rows land here
            raise MalformedInputError(f"adjacency matrix is not rectangular: {exc}") from exc
        if m.shape != (amount, amount):
            raise MalformedInputError(
                f"adjacency matrix must be {amount}x{amount}, got {'x'.join(map(str, m.shape))}"
            )
        # no casting before the check: 0.5 or 1.7 must not truncate into 0/1
        if m.dtype.kind not in "biu" or not np.isin(m, (0, 1)).all():
            raise MalformedInputError("adjacency matrix entries must be 0 or 1")

        self.amount = amount
        self.adjacency = adjacency
        self._points = tuple(p if isinstance(p, Point) else Point(int(p[0]), int(p[1])) for p in coords)
        self._matrix = m.astype(np.uint8)
        self._matrix.setflags(write=False)
        if require_symmetric and not self.is_symmetric():
            raise MalformedInputError("adjacency matrix is not symmetric")

        lookup = self._matrix.T if adjacency == "incoming" else self._matrix
        self._neighbors = tuple(tuple(int(n) for n in np.flatnonzero(row)) for row in lookup)

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    @property
    def goal(self) -> int:
        return self.amount - 1

    def node_point(self, node: int) -> Point:
        return self._points[node]

    def neighbors(self, node: int) -> tuple[int, ...]:
        return self._neighbors[node]

    def is_adjacent(self, a: int, b: int) -> bool:
        """True when b is reachable from a in one hop under the active convention."""
        if self.adjacency == "incoming":
            return bool(self._matrix[b, a])
        return bool(self._matrix[a, b])

    def distance(self, a: int, b: int) -> float:
        pa, pb = self._points[a], self._points[b]
        return math.hypot(pa.x - pb.x, pa.y - pb.y)

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._matrix, self._matrix.T))

    def __len__(self) -> int:
        return self.amount
