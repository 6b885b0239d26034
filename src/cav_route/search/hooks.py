# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, start, goal, nodes): ...
    def expand(self, node: int, *, cost, estimate, qsize): ...
    def relax(self, node: int, *, cost, predecessor, estimate): ...
    def stale(self, node: int, *, estimate): ...
    def run_end(self, *, state, expanded, pushed, stale, relaxed, wall_ms, **extra): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def relax(self, *_, **__):
        pass

    def stale(self, *_, **__):
        pass

    def run_end(self, **_):
        pass
