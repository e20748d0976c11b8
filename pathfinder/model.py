"""Core data structures shared by the builder, layout engine and solver."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components as csgraph_components

NodeLabel = str
EdgeKey = Tuple[NodeLabel, NodeLabel]
AdjacencyGraph = Dict[NodeLabel, Dict[NodeLabel, float]]
PathStatus = Literal["reachable", "unreachable", "not_found"]


def edge_key(a: NodeLabel, b: NodeLabel) -> EdgeKey:
    return (a, b) if a <= b else (b, a)


def format_edge_key(key: EdgeKey) -> str:
    return f"{key[0]}-{key[1]}"


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two distinct nodes."""

    u: NodeLabel
    v: NodeLabel
    weight: float

    @property
    def key(self) -> EdgeKey:
        return edge_key(self.u, self.v)

    def __str__(self) -> str:
        return f"{format_edge_key(self.key)}:{self.weight:g}"


@dataclass
class Graph:
    """A generated graph: node labels, canonical edges and symmetric adjacency.

    Instances are built once and replaced wholesale on reset; only
    :class:`~pathfinder.builder.GraphBuilder` inserts edges.
    """

    nodes: List[NodeLabel] = field(default_factory=list)
    edges: Dict[EdgeKey, float] = field(default_factory=dict)
    adjacency: AdjacencyGraph = field(default_factory=dict)

    def __post_init__(self) -> None:
        for node in self.nodes:
            self.adjacency.setdefault(node, {})

    def __contains__(self, label: object) -> bool:
        return label in self.adjacency

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def has_edge(self, a: NodeLabel, b: NodeLabel) -> bool:
        return edge_key(a, b) in self.edges

    def weight(self, a: NodeLabel, b: NodeLabel) -> Optional[float]:
        return self.edges.get(edge_key(a, b))

    def edge_list(self) -> List[Edge]:
        return [Edge(u, v, weight) for (u, v), weight in self.edges.items()]

    def to_csr(self) -> csr_matrix:
        """Return the symmetric weighted adjacency matrix in node order."""

        index = {name: idx for idx, name in enumerate(self.nodes)}
        n = len(self.nodes)
        rows: List[int] = []
        cols: List[int] = []
        data: List[float] = []
        for (u, v), weight in self.edges.items():
            rows.extend((index[u], index[v]))
            cols.extend((index[v], index[u]))
            data.extend((weight, weight))
        return csr_matrix(
            (np.asarray(data, dtype=float), (np.asarray(rows, dtype=int), np.asarray(cols, dtype=int))),
            shape=(n, n),
        )

    def connected_components(self) -> List[List[NodeLabel]]:
        """Group node labels by connected component, ordered by first node."""

        if not self.nodes:
            return []
        _, labels = csgraph_components(self.to_csr(), directed=False)
        groups: Dict[int, List[NodeLabel]] = {}
        for name, component in zip(self.nodes, labels):
            groups.setdefault(int(component), []).append(name)
        return list(groups.values())

    @property
    def is_connected(self) -> bool:
        return len(self.connected_components()) <= 1


@dataclass(frozen=True)
class Circle:
    """Display position of one node."""

    x: float
    y: float
    r: float
    color: str

    @property
    def d(self) -> float:
        return self.r * 2.0

    def distance_to(self, other: "Circle") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass
class LayoutResult:
    """Outcome of a layout pass; ``unplaced`` lists nodes the retry budget could not fit."""

    circles: Dict[NodeLabel, Circle] = field(default_factory=dict)
    unplaced: Tuple[NodeLabel, ...] = ()
    attempts: int = 0
    rejections: int = 0

    @property
    def complete(self) -> bool:
        return not self.unplaced

    def circle(self, label: NodeLabel) -> Optional[Circle]:
        return self.circles.get(label)


@dataclass(frozen=True)
class PathResult:
    """Tagged shortest-path result.

    ``distance`` is ``math.inf`` and ``path``/``nodes`` are ``None`` unless
    ``status == "reachable"``. ``missing`` names the labels that were not in
    the graph for a ``"not_found"`` result.
    """

    status: PathStatus
    distance: float = math.inf
    path: Optional[Tuple[EdgeKey, ...]] = None
    nodes: Optional[Tuple[NodeLabel, ...]] = None
    missing: Tuple[NodeLabel, ...] = ()

    @classmethod
    def reachable(cls, distance: float, nodes: Tuple[NodeLabel, ...]) -> "PathResult":
        path = tuple(edge_key(a, b) for a, b in zip(nodes, nodes[1:]))
        return cls(status="reachable", distance=distance, path=path, nodes=nodes)

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(status="unreachable")

    @classmethod
    def not_found(cls, missing: Tuple[NodeLabel, ...]) -> "PathResult":
        return cls(status="not_found", missing=missing)

    @property
    def is_reachable(self) -> bool:
        return self.status == "reachable"

    def describe(self) -> str:
        if self.status == "not_found":
            return f"unknown node(s): {', '.join(self.missing)}"
        if self.status == "unreachable":
            return "no path"
        assert self.nodes is not None
        return f"{' -> '.join(self.nodes)} (distance {self.distance:g})"


__all__ = [
    "AdjacencyGraph",
    "Circle",
    "Edge",
    "EdgeKey",
    "Graph",
    "LayoutResult",
    "NodeLabel",
    "PathResult",
    "PathStatus",
    "edge_key",
    "format_edge_key",
]
