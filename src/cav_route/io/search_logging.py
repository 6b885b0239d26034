# io/search_logging.py
import json
import logging
import sys

from cav_route.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def default_json_logger(name="cav_route", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout is reserved for the path report
        h = logging.StreamHandler(stream or sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for one search: run lifecycle at INFO, sampled
    expand/relax/stale trace at DEBUG when debug is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or default_json_logger(level="DEBUG" if debug else level)
        self._seen = 0

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def _sampled(self) -> bool:
        self._seen += 1
        return self.debug and (self._seen % self.sample_every) == 0

    # --------------------------------------------------------

    def run_start(self, *, start, goal, nodes):
        self._seen = 0
        self._emit("INFO", "run_start", start=start, goal=goal, nodes=nodes)

    def expand(self, node, *, cost, estimate, qsize):
        if self._sampled():
            self._emit("DEBUG", "expand", node=node, cost=cost, estimate=estimate, qsize=qsize)

    def relax(self, node, *, cost, predecessor, estimate):
        if self._sampled():
            self._emit("DEBUG", "relax", node=node, cost=cost, predecessor=predecessor, estimate=estimate)

    def stale(self, node, *, estimate):
        if self._sampled():
            self._emit("DEBUG", "stale_pop", node=node, estimate=estimate)

    def run_end(self, *, state, **extra):
        self._emit("INFO", "run_end", state=state, **extra)
