from .config import ConfigError, PathFinderConfig, default_config
from .labels import ALPHABET, LabelAllocationError, generate_labels
from .model import (
    AdjacencyGraph,
    Circle,
    Edge,
    EdgeKey,
    Graph,
    LayoutResult,
    PathResult,
    PathStatus,
    edge_key,
    format_edge_key,
)
from .builder import GraphBuilder, max_edge_count, to_adjacency
from .layout import CIRCLE_COLORS, circles_overlap, edge_segment, generate_circles
from .solver import find_route, nearest_unvisited, shortest_path
from .query import QueryError, parse_route_query
from .session import PathFinderSession
from .render import render_scene

__all__ = [
    'ALPHABET',
    'AdjacencyGraph',
    'CIRCLE_COLORS',
    'Circle',
    'ConfigError',
    'Edge',
    'EdgeKey',
    'Graph',
    'GraphBuilder',
    'LabelAllocationError',
    'LayoutResult',
    'PathFinderConfig',
    'PathFinderSession',
    'PathResult',
    'PathStatus',
    'QueryError',
    'circles_overlap',
    'default_config',
    'edge_key',
    'edge_segment',
    'find_route',
    'format_edge_key',
    'generate_circles',
    'generate_labels',
    'max_edge_count',
    'nearest_unvisited',
    'parse_route_query',
    'render_scene',
    'shortest_path',
    'to_adjacency',
]
