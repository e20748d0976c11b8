"""Rejection-sampling placement of node circles inside a bounding box."""

from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .config import PathFinderConfig, default_config
from .model import Circle, LayoutResult, NodeLabel

logger = logging.getLogger(__name__)

CIRCLE_COLORS: Tuple[str, ...] = (
    "#8b5cf6",
    "#3b82f6",
    "#0ea5e9",
    "#10b981",
    "#f97316",
)

Point = Tuple[float, float]


def circles_overlap(a: Circle, b: Circle, separation: float) -> bool:
    """Return ``True`` when ``a`` and ``b`` are closer than their radii plus ``separation``."""

    return a.distance_to(b) < a.r + b.r + separation


def edge_segment(a: Circle, b: Circle, adjust: float = 0.0) -> Tuple[Point, Point]:
    """Endpoints of the line from ``a`` to ``b`` trimmed to each rim plus ``adjust``."""

    angle = math.atan2(a.y - b.y, a.x - b.x)
    cos_t, sin_t = math.cos(angle), math.sin(angle)
    start = (a.x - (a.r + adjust) * cos_t, a.y - (a.r + adjust) * sin_t)
    end = (b.x + (b.r + adjust) * cos_t, b.y + (b.r + adjust) * sin_t)
    return start, end


def generate_circles(
    nodes: Sequence[NodeLabel],
    width: float,
    height: float,
    config: Optional[PathFinderConfig] = None,
    rng: Optional[np.random.Generator] = None,
    *,
    palette: Sequence[str] = CIRCLE_COLORS,
) -> LayoutResult:
    """Place one circle per node without overlap.

    Candidates are drawn uniformly in ``[x_offset, width - x_offset] x
    [y_offset, height - y_offset]``. Every rejected candidate spends one unit
    of ``config.max_iterations``, a budget shared by all nodes; when it runs
    out the remaining nodes are returned in ``LayoutResult.unplaced``.
    """

    cfg = (config or default_config()).validate()
    rng = rng if rng is not None else np.random.default_rng()
    x_low, x_high = cfg.x_offset, width - cfg.x_offset
    y_low, y_high = cfg.y_offset, height - cfg.y_offset
    if x_low > x_high or y_low > y_high:
        logger.warning(
            "Layout box %sx%s is smaller than its margins (%s, %s); sampling a degenerate region",
            width,
            height,
            cfg.x_offset,
            cfg.y_offset,
        )
        x_low, x_high = sorted((x_low, x_high))
        y_low, y_high = sorted((y_low, y_high))

    circles: Dict[NodeLabel, Circle] = {}
    attempts = 0
    rejections = 0
    index = 0
    while index < len(nodes):
        attempts += 1
        candidate = Circle(
            x=float(rng.uniform(x_low, x_high)),
            y=float(rng.uniform(y_low, y_high)),
            r=cfg.radius,
            color=palette[int(rng.integers(len(palette)))],
        )
        if any(circles_overlap(candidate, other, cfg.separation) for other in circles.values()):
            rejections += 1
            if rejections >= cfg.max_iterations:
                break
            continue
        circles[nodes[index]] = candidate
        index += 1

    unplaced = tuple(nodes[index:])
    if unplaced:
        logger.warning(
            "Layout budget of %d rejections exhausted; %d node(s) unplaced: %s",
            cfg.max_iterations,
            len(unplaced),
            ", ".join(unplaced),
        )
    else:
        logger.info("Placed %d circles in %d attempts (%d rejected)", len(circles), attempts, rejections)

    return LayoutResult(circles=circles, unplaced=unplaced, attempts=attempts, rejections=rejections)


__all__ = ["CIRCLE_COLORS", "circles_overlap", "edge_segment", "generate_circles"]
