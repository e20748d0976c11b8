"""Matplotlib rendering of a graph, its layout and a highlighted route."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch

from .config import PathFinderConfig, default_config
from .layout import edge_segment
from .model import EdgeKey, Graph, LayoutResult, PathResult

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#cbd5e1"
EDGE_COLOR = "white"
PATH_COLOR = "#04bc2f"


def _draw_edges(ax, keys: Iterable[EdgeKey], graph: Graph, layout: LayoutResult, *, color: str, adjust: float, labels: bool, linewidth: float) -> int:
    drawn = 0
    for key in keys:
        circ_a = layout.circle(key[0])
        circ_b = layout.circle(key[1])
        if circ_a is None or circ_b is None:
            continue
        (x1, y1), (x2, y2) = edge_segment(circ_a, circ_b, adjust)
        ax.plot([x1, x2], [y1, y2], color=color, linewidth=linewidth, zorder=1)
        if labels:
            weight = graph.weight(*key)
            ax.text(
                (circ_a.x + circ_b.x) / 2,
                (circ_a.y + circ_b.y) / 2,
                f"{weight:g}",
                color=EDGE_COLOR,
                fontsize=9,
                ha="center",
                va="center",
                zorder=3,
            )
        drawn += 1
    return drawn


def render_scene(
    graph: Graph,
    layout: LayoutResult,
    output_path: Union[str, Path],
    *,
    path: Optional[PathResult] = None,
    width: float = 800.0,
    height: float = 600.0,
    config: Optional[PathFinderConfig] = None,
    dpi: int = 100,
) -> Path:
    """Write a PNG of ``graph`` placed by ``layout``; a reachable ``path`` is drawn on top."""

    cfg = (config or default_config()).validate()
    output_path = Path(output_path)

    # Not registered with pyplot, so there is no figure to close.
    fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot()
    fig.patch.set_facecolor(BACKGROUND_COLOR)
    ax.set_facecolor(BACKGROUND_COLOR)

    drawn = _draw_edges(ax, graph.edges, graph, layout, color=EDGE_COLOR, adjust=cfg.draw_adjust, labels=True, linewidth=1.2)
    if path is not None and path.is_reachable and path.path:
        _draw_edges(ax, path.path, graph, layout, color=PATH_COLOR, adjust=cfg.draw_adjust, labels=False, linewidth=2.4)

    for label, circle in layout.circles.items():
        ax.add_patch(CirclePatch((circle.x, circle.y), circle.r, color=circle.color, zorder=2))
        ax.text(circle.x, circle.y, label, color="white", fontsize=14, ha="center", va="center", zorder=3)

    ax.set_xlim(0, width)
    # Screen coordinates grow downwards.
    ax.set_ylim(height, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    fig.tight_layout()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, facecolor=fig.get_facecolor())

    logger.info(
        "Rendered %d circles and %d/%d edges to %s",
        len(layout.circles),
        drawn,
        graph.edge_count,
        output_path,
    )
    return output_path
