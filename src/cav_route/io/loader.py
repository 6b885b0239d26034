# cav_route/io/loader.py
"""
Reader/writer for the .cav graph format.

One delimited token stream:
  amount, x0, y0, ..., x{amount-1}, y{amount-1}, then amount*amount 0/1 matrix values (row-major)
"""

import os
import re
from dataclasses import dataclass

import numpy as np

from cav_route.domain.graph import Adjacency, Graph
from cav_route.errors import MalformedInputError

# ASCII digits with an optional sign; rejects "1_0", "0x1", "1.0" and non-ASCII digits
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class GraphData:
    amount: int
    coords: list[tuple[int, int]]
    matrix: np.ndarray

    def to_graph(self, *, adjacency: Adjacency = "incoming", require_symmetric: bool = False) -> Graph:
        return Graph(
            self.amount,
            self.coords,
            self.matrix,
            adjacency=adjacency,
            require_symmetric=require_symmetric,
        )


def _tokens(text: str, delimiter: str) -> list[str]:
    toks = [t.strip() for t in text.split(delimiter)]
    # a trailing delimiter or newline leaves one empty token behind
    if toks and toks[-1] == "":
        toks.pop()
    return toks


def _int(tok: str, what: str) -> int:
    if not _INT_RE.fullmatch(tok):
        raise MalformedInputError(f"could not parse {what} {tok!r} as an integer")
    return int(tok)


def parse_graph(text: str, *, delimiter: str = ",") -> GraphData:
    toks = _tokens(text, delimiter)
    if not toks:
        raise MalformedInputError("input is empty, expected a node count")

    amount = _int(toks[0], "node count")
    if amount < 1:
        raise MalformedInputError(f"node count must be >= 1, got {amount}")

    n_coord = 2 * amount
    expected = 1 + n_coord + amount * amount
    if len(toks) < 1 + n_coord:
        raise MalformedInputError(
            f"expected {n_coord} coordinate values for {amount} nodes, got {len(toks) - 1}"
        )
    if len(toks) != expected:
        raise MalformedInputError(
            f"expected {amount * amount} matrix values, got {len(toks) - 1 - n_coord}"
        )

    vals = [_int(t, f"coordinate #{i}") for i, t in enumerate(toks[1 : 1 + n_coord])]
    for i, v in enumerate(vals):
        if not _I32_MIN <= v <= _I32_MAX:
            raise MalformedInputError(f"coordinate #{i} {v} does not fit a 32-bit signed integer")
    coords = list(zip(vals[0::2], vals[1::2]))

    cells = [_int(t, f"matrix value #{i}") for i, t in enumerate(toks[1 + n_coord :])]
    if any(c not in (0, 1) for c in cells):
        raise MalformedInputError("adjacency matrix entries must be 0 or 1")
    matrix = np.array(cells, dtype=np.uint8).reshape(amount, amount)
    return GraphData(amount, coords, matrix)


def load_graph(path: str, *, delimiter: str = ",") -> GraphData:
    path = os.path.expandvars(os.path.expanduser(path))
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedInputError(f"could not read graph file {path!r}: {exc}") from exc
    return parse_graph(text, delimiter=delimiter)


def dump_graph(data: GraphData, *, delimiter: str = ",") -> str:
    out = [str(data.amount)]
    for x, y in data.coords:
        out += [str(x), str(y)]
    out += [str(int(v)) for v in np.asarray(data.matrix).ravel()]
    return delimiter.join(out)
