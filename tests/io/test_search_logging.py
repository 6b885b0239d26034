# tests/io/test_search_logging.py
import json
import logging

from cav_route.domain.graph import Graph
from cav_route.io.search_logging import SearchLogging, _JsonFormatter
from cav_route.search.astar import AStarSearch


def _graph():
    m = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    return Graph(3, [(0, 0), (1, 0), (2, 0)], m)


def test_lifecycle_events(caplog):
    logger = logging.getLogger("test.cav_route.lifecycle")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    AStarSearch(_graph(), hooks=SearchLogging(run_id="r-1", logger=logger)).run()

    msgs = [r.getMessage() for r in caplog.records]
    assert msgs == ["run_start", "run_end"]
    end = caplog.records[-1].extra
    assert end["run_id"] == "r-1"
    assert end["state"] == "found"
    assert end["hops"] == 2
    assert end["expanded"] == 2


def test_debug_trace_is_sampled(caplog):
    logger = logging.getLogger("test.cav_route.debug")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    hooks = SearchLogging(debug=True, sample_every=1, logger=logger)
    AStarSearch(_graph(), hooks=hooks).run()
    msgs = [r.getMessage() for r in caplog.records]
    assert "expand" in msgs and "relax" in msgs

    caplog.clear()
    quiet = SearchLogging(debug=False, logger=logger)
    AStarSearch(_graph(), hooks=quiet).run()
    assert [r.getMessage() for r in caplog.records] == ["run_start", "run_end"]


def test_json_formatter_merges_extra():
    rec = logging.LogRecord("cav_route", logging.INFO, __file__, 1, "run_end", None, None)
    rec.extra = {"state": "exhausted", "run_id": "x"}
    payload = json.loads(_JsonFormatter().format(rec))
    assert payload == {"level": "INFO", "msg": "run_end", "logger": "cav_route", "state": "exhausted", "run_id": "x"}
