# cav_route/app/build.py
import json
from collections.abc import Mapping
from dataclasses import dataclass

from cav_route.config.models import RunModel
from cav_route.domain.graph import Graph
from cav_route.io.loader import load_graph
from cav_route.io.search_logging import SearchLogging
from cav_route.search.astar import AStarSearch
from cav_route.search.hooks import NoopHooks
from cav_route.search.state import SearchResult


@dataclass
class App:
    model: RunModel
    graph: Graph
    search: AStarSearch

    def run(self) -> SearchResult:
        return self.search.run()


def load_config(path: str) -> RunModel:
    with open(path, encoding="utf-8") as f:
        return RunModel.model_validate(json.load(f))


def build(cfg: RunModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, RunModel) else RunModel.model_validate(cfg)

    # 1) Graph (MalformedInputError propagates; no search on a bad graph)
    data = load_graph(model.input.file, delimiter=model.input.delimiter)
    graph = data.to_graph(
        adjacency=model.graph.adjacency,
        require_symmetric=model.graph.require_symmetric,
    )

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Driver
    search = AStarSearch(
        graph,
        start=model.search.start,
        goal=model.search.goal,
        priority_key=model.search.priority_key,
        hooks=hooks,
    )
    return App(model, graph, search)
