# tests/search/test_reconstruct.py
import pytest

from cav_route.errors import InternalInvariantError
from cav_route.search.ledger import CostLedger
from cav_route.search.reconstruct import reconstruct_path
from cav_route.search.state import SearchState


def _ledger(*triples):
    led = CostLedger()
    for node, cost, prev in triples:
        led.record(node, cost, prev)
    return led


def test_walks_predecessors_to_start():
    led = _ledger((0, 0.0, None), (2, 1.0, 0), (1, 2.0, 2), (4, 3.0, 1))
    assert reconstruct_path(led, 4, SearchState.FOUND) == [0, 2, 1, 4]


def test_start_equals_goal():
    led = _ledger((0, 0.0, None))
    assert reconstruct_path(led, 0, SearchState.FOUND) == [0]


@pytest.mark.parametrize("state", [SearchState.RUNNING, SearchState.EXHAUSTED])
def test_refuses_unless_found(state):
    led = _ledger((0, 0.0, None), (1, 1.0, 0))
    with pytest.raises(InternalInvariantError):
        reconstruct_path(led, 1, state)


def test_detects_cycle():
    led = _ledger((1, 1.0, 2), (2, 1.0, 3), (3, 1.0, 1))
    with pytest.raises(InternalInvariantError, match="cycle"):
        reconstruct_path(led, 1, SearchState.FOUND)


def test_unrecorded_goal():
    with pytest.raises(InternalInvariantError):
        reconstruct_path(_ledger((0, 0.0, None)), 5, SearchState.FOUND)
