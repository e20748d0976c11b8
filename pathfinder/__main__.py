import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from pathfinder import (
    ConfigError,
    PathFinderSession,
    QueryError,
    default_config,
    format_edge_key,
    render_scene,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a random weighted graph and search it")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for graph generation and layout (default: fresh entropy)",
    )
    parser.add_argument("--width", type=float, default=1280.0, help="Layout width (default: 1280)")
    parser.add_argument("--height", type=float, default=720.0, help="Layout height (default: 720)")
    parser.add_argument("--nodes-min", type=int, help="Minimum node count (default: config items_min)")
    parser.add_argument("--nodes-max", type=int, help="Maximum node count (default: config items_max)")
    parser.add_argument(
        "--continuous-weights",
        action="store_true",
        help="Use un-rounded edge weights",
    )
    parser.add_argument(
        "--query",
        help="Route to solve, e.g. 'A to F', 'A-F' or 'a,f'",
    )
    parser.add_argument(
        "--plot-output-path",
        help="Write a PNG of the graph (and route, if any) to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    overrides = {}
    if args.nodes_min is not None:
        overrides["items_min"] = args.nodes_min
    if args.nodes_max is not None:
        overrides["items_max"] = args.nodes_max
    if args.continuous_weights:
        overrides["integer_weights"] = False
    try:
        config = default_config(**overrides)
    except ConfigError as exc:
        parser.error(str(exc))

    session = PathFinderSession(config, np.random.default_rng(args.seed))
    graph = session.new_graph(args.width, args.height)
    layout = session.layout
    assert layout is not None

    print(f"Nodes ({graph.node_count}): {' '.join(graph.nodes)}")
    print(f"Edges ({graph.edge_count}):")
    for key, weight in graph.edges.items():
        print(f"  {format_edge_key(key)}: {weight:g}")
    components = graph.connected_components()
    print(f"Components ({len(components)}):")
    for group in components:
        print(f"  {' '.join(group)}")
    print("Layout:")
    for label, circle in layout.circles.items():
        print(f"  {label}: ({circle.x:.1f}, {circle.y:.1f}) {circle.color}")
    if not layout.complete:
        print(f"  unplaced: {' '.join(layout.unplaced)}")

    result = None
    if args.query:
        try:
            result = session.search(args.query)
        except QueryError as exc:
            logger.error("Invalid query: %s", exc)
            raise SystemExit(2)
        print(f"Route: {result.describe()}")
        if result.is_reachable and result.path:
            print(f"  edges: {', '.join(format_edge_key(key) for key in result.path)}")

    if args.plot_output_path:
        written = render_scene(
            graph,
            layout,
            args.plot_output_path,
            path=result,
            width=args.width,
            height=args.height,
            config=config,
        )
        print(f"Plot written to {written}")


if __name__ == "__main__":
    main(sys.argv[1:])
