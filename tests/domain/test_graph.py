# tests/domain/test_graph.py
import math

import numpy as np
import pytest

from cav_route.domain.entities.geography import Point
from cav_route.domain.graph import Graph
from cav_route.errors import MalformedInputError

CHAIN = [
    [0, 1, 0, 0],
    [1, 0, 1, 0],
    [0, 1, 0, 1],
    [0, 0, 1, 0],
]


def test_neighbors_and_distance():
    g = Graph(4, [(0, 0), (1, 0), (1, 1), (2, 1)], CHAIN)
    assert g.neighbors(0) == (1,)
    assert g.neighbors(1) == (0, 2)
    assert g.neighbors(3) == (2,)
    assert g.distance(0, 2) == pytest.approx(math.sqrt(2))
    assert g.distance(3, 0) == pytest.approx(math.sqrt(5))
    assert g.node_point(3) == Point(2, 1)
    assert g.goal == 3
    assert g.is_symmetric()


def test_incoming_convention_reads_columns():
    # only matrix[1][0] is set: row 1, column 0
    m = [[0, 0], [1, 0]]
    incoming = Graph(2, [(0, 0), (3, 4)], m)
    assert incoming.neighbors(0) == (1,)
    assert incoming.neighbors(1) == ()
    assert incoming.is_adjacent(0, 1)
    assert not incoming.is_adjacent(1, 0)

    outgoing = Graph(2, [(0, 0), (3, 4)], m, adjacency="outgoing")
    assert outgoing.neighbors(0) == ()
    assert outgoing.neighbors(1) == (0,)
    assert outgoing.is_adjacent(1, 0)


def test_matrix_is_read_only():
    g = Graph(2, [(0, 0), (1, 1)], [[0, 1], [1, 0]])
    with pytest.raises(ValueError):
        g.matrix[0, 0] = 1


def test_negative_coordinates():
    g = Graph(2, [(-3, 0), (0, -4)], np.array([[0, 1], [1, 0]]))
    assert g.distance(0, 1) == 5.0


@pytest.mark.parametrize(
    "amount, coords, matrix",
    [
        (0, [], []),
        (2, [(0, 0)], [[0, 1], [1, 0]]),
        (2, [(0, 0), (1, 1)], [[0, 1]]),
        (2, [(0, 0), (1, 1)], [[0, 1, 0], [1, 0, 0]]),
        (2, [(0, 0), (1, 1)], [[0, 2], [1, 0]]),
        (2, [(0, 0), (1, 1)], [[0, 1], [1]]),
        (2, [(0, 0), (1, 0)], [[0, 0.5], [1.7, 0]]),
        (2, [(0, 0), (1, 0)], [[0.0, 1.0], [1.0, 0.0]]),
        (2, [(0, 0), (1, 0)], [["0", "1"], ["1", "0"]]),
    ],
)
def test_malformed_graphs_rejected(amount, coords, matrix):
    with pytest.raises(MalformedInputError):
        Graph(amount, coords, matrix)


def test_require_symmetric():
    m = [[0, 1], [0, 0]]
    Graph(2, [(0, 0), (1, 1)], m)
    Graph(2, [(0, 0), (1, 1)], np.array([[False, True], [True, False]]), require_symmetric=True)
    with pytest.raises(MalformedInputError):
        Graph(2, [(0, 0), (1, 1)], m, require_symmetric=True)
