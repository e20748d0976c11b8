"""Example pipeline: lay out a graph, highlight a route and save a PNG."""

import sys

import numpy as np

from pathfinder import PathFinderSession, default_config, render_scene


def main(output_path: str = "pathfinder.png") -> None:
    config = default_config(items_min=12, items_max=16)
    session = PathFinderSession(config, np.random.default_rng(2024))
    graph = session.new_graph(1280, 720)
    layout = session.layout
    if not layout.complete:
        print("Unplaced:", " ".join(layout.unplaced))

    result = session.search("A to L")
    print(result.describe())
    render_scene(graph, layout, output_path, path=result, width=1280, height=720, config=config)
    print("Written", output_path)


if __name__ == "__main__":
    main(*sys.argv[1:2])
