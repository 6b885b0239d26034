# cav_route/search/reconstruct.py
from cav_route.errors import InternalInvariantError
from cav_route.search.ledger import CostLedger
from cav_route.search.state import SearchState


def reconstruct_path(ledger: CostLedger, goal: int, state: SearchState) -> list[int]:
    """Walk predecessors from goal back to the start node; return start..goal."""
    if state is not SearchState.FOUND:
        raise InternalInvariantError(f"cannot reconstruct a path in state {state.name}")
    if goal not in ledger:
        raise InternalInvariantError(f"goal {goal} was never recorded")

    path = [goal]
    seen = {goal}
    current = ledger.predecessor_of(goal)
    while current is not None:
        if current in seen:
            raise InternalInvariantError(f"predecessor cycle through node {current}")
        seen.add(current)
        path.append(current)
        current = ledger.predecessor_of(current)
    path.reverse()
    return path
