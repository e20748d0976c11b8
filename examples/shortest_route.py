"""Example pipeline: generate a seeded graph and solve one route."""

import numpy as np

from pathfinder import GraphBuilder, default_config, find_route, format_edge_key


def main() -> None:
    config = default_config(items_min=8, items_max=8)
    graph = GraphBuilder(config, np.random.default_rng(123)).build()
    for key, weight in graph.edges.items():
        print(f"{format_edge_key(key)}: {weight:g}")

    result = find_route(graph, "A", "H")
    print("Status:", result.status)
    print("Distance:", result.distance)
    if result.path:
        print("Edges:", ", ".join(format_edge_key(key) for key in result.path))


if __name__ == "__main__":
    main()
