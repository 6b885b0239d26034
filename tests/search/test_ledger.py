# tests/search/test_ledger.py
from cav_route.search.ledger import CostLedger


def test_record_and_overwrite():
    led = CostLedger()
    assert led.get_cost(3) is None
    assert led.predecessor_of(3) is None
    assert 3 not in led

    led.record(0, 0.0, None)
    led.record(3, 7.5, 0)
    assert 3 in led and len(led) == 2
    assert led.get_cost(3) == 7.5
    assert led.predecessor_of(3) == 0
    assert led.predecessor_of(0) is None

    # no comparison is made: a worse cost still overwrites
    led.record(3, 9.0, 2)
    assert led.get_cost(3) == 9.0
    assert led.predecessor_of(3) == 2
    assert len(led) == 2
