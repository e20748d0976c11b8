"""Random graph generation under node-count and edge-density constraints."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping, Optional

import numpy as np

from .config import ConfigError, PathFinderConfig, default_config
from .labels import ALPHABET, LabelAllocationError, generate_labels
from .model import AdjacencyGraph, EdgeKey, Graph, NodeLabel, edge_key

logger = logging.getLogger(__name__)


def max_edge_count(n: int) -> int:
    """Largest number of edges in a simple undirected graph on ``n`` nodes."""

    return n * (n - 1) // 2 if n > 1 else 0


def to_adjacency(edges: Mapping[EdgeKey, float], nodes: Iterable[NodeLabel] = ()) -> AdjacencyGraph:
    """Build a symmetric adjacency map from canonical edges.

    Every label in ``nodes`` gets an entry, so isolated nodes map to ``{}``
    and stay distinguishable from labels that are not in the graph.
    """

    adjacency: AdjacencyGraph = {node: {} for node in nodes}
    for (u, v), weight in edges.items():
        adjacency.setdefault(u, {})[v] = weight
        adjacency.setdefault(v, {})[u] = weight
    return adjacency


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class GraphBuilder:
    """Builds random weighted undirected graphs.

    All randomness is drawn from the ``rng`` passed in, so two builders fed
    generators with the same seed produce identical graphs.
    """

    def __init__(
        self,
        config: Optional[PathFinderConfig] = None,
        rng: Optional[np.random.Generator] = None,
        *,
        alphabet: str = ALPHABET,
    ) -> None:
        self.config = (config or default_config()).validate()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.alphabet = alphabet

    def choose_node_count(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            raise ConfigError(f"node count minimum {minimum} exceeds maximum {maximum}")
        if maximum > len(self.alphabet):
            raise LabelAllocationError(
                f"node count maximum {maximum} exceeds alphabet size {len(self.alphabet)}"
            )
        return int(self.rng.integers(minimum, maximum, endpoint=True))

    def choose_edge_count(self, n: int, density: float) -> int:
        # density > 1 biases the raw target below n; the clamp restores n - 1.
        target = n + math.floor(self.rng.random() * (n - n * density + 1))
        target = min(target, max_edge_count(n))
        if n > 1:
            target = max(target, n - 1)
        return max(target, 0)

    def generate_weight(self) -> float:
        cfg = self.config
        value = float(self.rng.uniform(cfg.w_min, cfg.w_max))
        if not cfg.integer_weights:
            return value
        low = math.ceil(cfg.w_min)
        high = math.floor(cfg.w_max)
        return float(min(max(_round_half_up(value), low), high))

    def add_edge(self, graph: Graph, u: NodeLabel, v: NodeLabel, weight: float) -> bool:
        """Insert an undirected edge; returns ``False`` without touching ``graph`` on bad input."""

        missing = [label for label in (u, v) if label not in graph]
        if missing:
            logger.warning("Ignoring edge %s-%s: unknown node(s) %s", u, v, ", ".join(missing))
            return False
        if u == v:
            logger.warning("Ignoring self-loop on %s", u)
            return False
        graph.adjacency[u][v] = weight
        graph.adjacency[v][u] = weight
        graph.edges[edge_key(u, v)] = weight
        return True

    def generate_edges(self, graph: Graph, target: int) -> Graph:
        n = graph.node_count
        limit = max_edge_count(n)
        if target > limit:
            raise ValueError(f"cannot place {target} edges on {n} nodes (maximum {limit})")

        draws = 0
        while graph.edge_count < target:
            a = graph.nodes[int(self.rng.integers(n))]
            b = graph.nodes[int(self.rng.integers(n))]
            draws += 1
            if a == b or graph.has_edge(a, b):
                continue
            self.add_edge(graph, a, b, self.generate_weight())

        logger.debug("Placed %d edges after %d pair draws", graph.edge_count, draws)
        return graph

    def build(self, minimum: Optional[int] = None, maximum: Optional[int] = None) -> Graph:
        cfg = self.config
        minimum = cfg.items_min if minimum is None else minimum
        maximum = cfg.items_max if maximum is None else maximum

        n = self.choose_node_count(minimum, maximum)
        graph = Graph(nodes=generate_labels(n, self.alphabet))
        target = self.choose_edge_count(n, cfg.edge_density)
        self.generate_edges(graph, target)

        logger.info(
            "Generated graph with %d nodes, %d edges, %d component(s)",
            graph.node_count,
            graph.edge_count,
            len(graph.connected_components()),
        )
        return graph


__all__ = ["GraphBuilder", "max_edge_count", "to_adjacency"]
