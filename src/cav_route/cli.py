# cav_route/cli.py
import argparse
import sys

from pydantic import ValidationError

from cav_route.app.build import build, load_config
from cav_route.config.models import RunModel
from cav_route.errors import MalformedInputError
from cav_route.io.generate import random_graph
from cav_route.io.loader import dump_graph
from cav_route.io.report import render
from cav_route.io.search_logging import default_json_logger

EXIT_FOUND, EXIT_NO_PATH, EXIT_BAD_INPUT = 0, 1, 2


def get_parser():
    parser = argparse.ArgumentParser(prog="cav-route", description="A* shortest path over .cav graph files.")
    sub = parser.add_subparsers(dest="command", required=True)

    s = sub.add_parser("search", help="Find the shortest path from the first to the last node.")
    s.add_argument("file", help="Graph file (.cav)")
    s.add_argument("--config", type=str, default=None, help="JSON run configuration; flags override it.")
    s.add_argument("--delimiter", type=str, default=None, help="Token separator (default ',').")
    s.add_argument("--priority-key", choices=["exact", "truncated"], default=None,
                   help="Order the frontier on exact or truncated cost estimates.")
    s.add_argument("--adjacency", choices=["incoming", "outgoing"], default=None,
                   help="Neighbor convention: matrix[n][node] (incoming) or matrix[node][n] (outgoing).")
    s.add_argument("--require-symmetric", action="store_true", default=None,
                   help="Reject adjacency matrices that are not symmetric.")
    s.add_argument("--level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None,
                   help="Log level as in python logging package.")
    s.add_argument("--debug", action="store_true", default=None, help="Trace expansions and relaxations.")
    s.add_argument("--run-id", type=str, default=None)

    g = sub.add_parser("generate", help="Write a random undirected graph file.")
    g.add_argument("out", help="Output path")
    g.add_argument("--nodes", type=int, required=True, help="Number of nodes.")
    g.add_argument("--edge-prob", type=float, default=0.1, help="Probability of each undirected edge.")
    g.add_argument("--extent", type=int, default=1000, help="Coordinates are drawn from [0, extent).")
    g.add_argument("--seed", type=int, default=0, help="Random seed")
    g.add_argument("--level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO",
                   help="Log level as in python logging package.")
    return parser


def _run_model(args) -> RunModel:
    base = load_config(args.config).model_dump() if args.config else {"input": {"file": args.file}}
    base["input"]["file"] = args.file
    overrides = {
        ("input", "delimiter"): args.delimiter,
        ("graph", "adjacency"): args.adjacency,
        ("graph", "require_symmetric"): args.require_symmetric,
        ("search", "priority_key"): args.priority_key,
        ("log", "level"): args.level,
        ("log", "debug"): args.debug,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            base.setdefault(section, {})[key] = value
    if args.run_id is not None:
        base["run_id"] = args.run_id
    return RunModel.model_validate(base)


def _search(args) -> int:
    try:
        app = build(_run_model(args))
    except (MalformedInputError, ValidationError, ValueError, OSError) as exc:
        # OSError here comes from reading --config
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    result = app.run()
    print(render(result))
    return EXIT_FOUND if result.found else EXIT_NO_PATH


def _generate(args) -> int:
    try:
        data = random_graph(args.nodes, edge_prob=args.edge_prob, extent=args.extent, seed=args.seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    try:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(dump_graph(data))
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    log = default_json_logger(level=args.level)
    edges = int(data.matrix.sum()) // 2
    log.info("graph_written", extra={"extra": {"nodes": data.amount, "edges": edges, "out": args.out}})
    return 0


def main(argv=None) -> int:
    args = get_parser().parse_args(argv)
    if args.command == "generate":
        return _generate(args)
    return _search(args)


if __name__ == "__main__":
    sys.exit(main())
