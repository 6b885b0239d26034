# cav_route/io/generate.py

import numpy as np

from cav_route.io.loader import GraphData


def random_graph(
    amount: int,
    *,
    edge_prob: float = 0.1,
    extent: int = 1000,
    seed: int = 0,
) -> GraphData:
    """
    Random undirected graph: coordinates uniform in [0, extent) and each
    unordered pair connected with probability edge_prob. No self-loops.
    Same arguments always give the same graph.
    """
    if amount < 1:
        raise ValueError(f"amount must be >= 1, got {amount}")
    if not 0.0 <= edge_prob <= 1.0:
        raise ValueError(f"edge_prob must be in [0, 1], got {edge_prob}")
    if extent < 1:
        raise ValueError(f"extent must be >= 1, got {extent}")

    rng = np.random.default_rng(seed)
    xy = rng.integers(0, extent, size=(amount, 2))
    upper = np.triu(rng.random((amount, amount)) < edge_prob, k=1)
    matrix = (upper | upper.T).astype(np.uint8)
    coords = [(int(x), int(y)) for x, y in xy]
    return GraphData(amount, coords, matrix)
