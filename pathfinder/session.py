"""Stateful facade tying generation, layout and search together for a host UI."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .builder import GraphBuilder
from .config import PathFinderConfig, default_config
from .layout import generate_circles
from .model import Graph, LayoutResult, PathResult
from .query import parse_route_query
from .solver import find_route

logger = logging.getLogger(__name__)


class PathFinderSession:
    """Holds the current graph and layout; a reset replaces both wholesale."""

    def __init__(
        self,
        config: Optional[PathFinderConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = (config or default_config()).validate()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.graph: Optional[Graph] = None
        self.layout: Optional[LayoutResult] = None
        self.last_result: Optional[PathResult] = None

    def reset(self) -> "PathFinderSession":
        self.graph = None
        self.layout = None
        self.last_result = None
        return self

    def new_graph(self, width: float, height: float) -> Graph:
        self.reset()
        builder = GraphBuilder(self.config, self.rng)
        graph = builder.build()
        layout = generate_circles(graph.nodes, width, height, self.config, self.rng)
        self.graph = graph
        self.layout = layout
        return graph

    def search(self, start_or_query: str, end: Optional[str] = None) -> PathResult:
        """Solve a route given either a query such as ``"A to F"`` or explicit labels."""

        if self.graph is None:
            raise RuntimeError("no graph generated yet; call new_graph() first")
        if end is None:
            start, end = parse_route_query(start_or_query)
        else:
            start = start_or_query
        self.last_result = find_route(self.graph, start, end)
        return self.last_result
