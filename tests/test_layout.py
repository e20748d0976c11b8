import math
from itertools import combinations

import numpy as np
import pytest

from pathfinder.config import ConfigError, PathFinderConfig, default_config
from pathfinder.labels import generate_labels
from pathfinder.layout import CIRCLE_COLORS, circles_overlap, edge_segment, generate_circles
from pathfinder.model import Circle


@pytest.mark.parametrize("seed", range(10))
def test_placed_circles_respect_separation(seed):
    config = default_config(separation=20, radius=15)
    nodes = generate_labels(15)
    layout = generate_circles(nodes, 1280, 720, config, np.random.default_rng(seed))

    for (_, a), (_, b) in combinations(layout.circles.items(), 2):
        assert a.distance_to(b) >= a.r + b.r + config.separation
    for circle in layout.circles.values():
        assert config.x_offset <= circle.x <= 1280 - config.x_offset
        assert config.y_offset <= circle.y <= 720 - config.y_offset
        assert circle.color in CIRCLE_COLORS
        assert circle.r == 15
        assert circle.d == 30


def test_roomy_canvas_places_every_node_in_order():
    nodes = generate_labels(6)
    layout = generate_circles(nodes, 2000, 2000, default_config(), np.random.default_rng(1))

    assert layout.complete
    assert layout.unplaced == ()
    assert list(layout.circles) == nodes
    assert layout.attempts == len(nodes) + layout.rejections


def test_tiny_canvas_reports_second_circle_unplaced(caplog):
    config = default_config(separation=50, radius=25, max_iterations=200)

    with caplog.at_level("WARNING", logger="pathfinder.layout"):
        layout = generate_circles(["A", "B"], 120, 120, config, np.random.default_rng(0))

    assert list(layout.circles) == ["A"]
    assert layout.unplaced == ("B",)
    assert not layout.complete
    assert layout.rejections == 200
    assert "unplaced: B" in caplog.text


def test_budget_is_shared_across_nodes():
    config = default_config(separation=50, radius=25, max_iterations=50)
    layout = generate_circles(generate_labels(5), 120, 120, config, np.random.default_rng(3))

    assert layout.unplaced == ("B", "C", "D", "E")
    assert layout.rejections == 50


def test_first_rejection_at_budget_stops_placement():
    config = default_config(separation=50, radius=25, max_iterations=1)
    layout = generate_circles(["A", "B"], 120, 120, config, np.random.default_rng(0))

    assert list(layout.circles) == ["A"]
    assert layout.unplaced == ("B",)
    assert layout.attempts == 2


def test_layout_is_deterministic_for_a_seed():
    nodes = generate_labels(12)
    config = default_config()
    first = generate_circles(nodes, 1280, 720, config, np.random.default_rng(99))
    second = generate_circles(nodes, 1280, 720, config, np.random.default_rng(99))

    assert first.circles == second.circles
    assert first.unplaced == second.unplaced


def test_circles_overlap_boundary():
    a = Circle(0.0, 0.0, 25.0, "#000000")
    b = Circle(100.0, 0.0, 25.0, "#000000")

    assert not circles_overlap(a, b, 50.0)
    assert circles_overlap(a, b, 50.1)


def test_edge_segment_trims_to_rims():
    a = Circle(0.0, 0.0, 10.0, "#000000")
    b = Circle(100.0, 0.0, 20.0, "#000000")
    (x1, y1), (x2, y2) = edge_segment(a, b, adjust=2.0)

    assert x1 == pytest.approx(12.0)
    assert x2 == pytest.approx(78.0)
    assert y1 == pytest.approx(0.0, abs=1e-9)
    assert y2 == pytest.approx(0.0, abs=1e-9)
    assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(66.0)


def test_generate_circles_validates_config():
    with pytest.raises(ConfigError) as exc:
        generate_circles(["A"], 800, 600, PathFinderConfig(radius=-1), np.random.default_rng(0))

    assert "radius must be positive" in str(exc.value)
