"""Single-source, single-target shortest paths on an adjacency map.

The solver is a linear-scan Dijkstra: no priority queue, the next node is
found by scanning every unvisited distance. Graphs here hold at most one
node per alphabet letter, so the quadratic scan is never the bottleneck.

Two rules are literal and covered by tests:

* ties in :func:`nearest_unvisited` go to the node met first while iterating
  ``distances``, which follows the adjacency's key order (label order for
  generated graphs);
* edges leading back into ``start`` are never relaxed.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Set

from .logging_utils import apply_debug_logging
from .model import AdjacencyGraph, Graph, NodeLabel, PathResult

logger = logging.getLogger(__name__)


def nearest_unvisited(distances: Dict[NodeLabel, float], visited: Set[NodeLabel]) -> Optional[NodeLabel]:
    """Return the unvisited node with the strictly smallest finite distance."""

    shortest: Optional[NodeLabel] = None
    min_distance = math.inf
    for node, distance in distances.items():
        if node in visited:
            continue
        if distance < min_distance:
            min_distance = distance
            shortest = node
    return shortest


def shortest_path(adjacency: AdjacencyGraph, start: NodeLabel, end: NodeLabel) -> PathResult:
    """Solve ``start`` -> ``end`` over ``adjacency``; never raises for unknown or unreachable nodes."""

    missing = tuple(label for label in dict.fromkeys((start, end)) if label not in adjacency)
    if missing:
        return PathResult.not_found(missing)

    distances: Dict[NodeLabel, float] = {node: math.inf for node in adjacency}
    parents: Dict[NodeLabel, Optional[NodeLabel]] = {node: None for node in adjacency}
    distances[start] = 0.0

    for child, weight in adjacency[start].items():
        if child == start:
            continue
        distances[child] = weight
        parents[child] = start

    visited: Set[NodeLabel] = set()
    node = nearest_unvisited(distances, visited)
    while node is not None:
        distance = distances[node]
        for child, weight in adjacency[node].items():
            if child == start:
                continue
            candidate = distance + weight
            if candidate < distances[child]:
                distances[child] = candidate
                parents[child] = node
        visited.add(node)
        node = nearest_unvisited(distances, visited)

    logger.debug("Visited %d of %d nodes from %s", len(visited), len(adjacency), start)

    if math.isinf(distances[end]):
        return PathResult.unreachable()

    chain: List[NodeLabel] = [end]
    parent = parents[end]
    while parent is not None:
        chain.append(parent)
        parent = parents[parent]
    chain.reverse()
    return PathResult.reachable(distances[end], tuple(chain))


def find_route(graph: Graph, start: NodeLabel, end: NodeLabel) -> PathResult:
    """Validate ``start``/``end`` against ``graph`` and solve between them."""

    start, end = start.strip(), end.strip()
    if start not in graph:
        start = start.upper()
    if end not in graph:
        end = end.upper()
    result = shortest_path(graph.adjacency, start, end)
    if result.status == "not_found":
        logger.warning("Route %s -> %s references unknown node(s) %s", start, end, ", ".join(result.missing))
    else:
        logger.info("Route %s -> %s: %s", start, end, result.describe())
    return result


apply_debug_logging(globals(), logger=logger, skip={"nearest_unvisited"})


__all__ = ["find_route", "nearest_unvisited", "shortest_path"]
