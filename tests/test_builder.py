import numpy as np
import pytest

from pathfinder.builder import GraphBuilder, max_edge_count, to_adjacency
from pathfinder.config import ConfigError, default_config
from pathfinder.labels import LabelAllocationError
from pathfinder.model import Graph
from pathfinder.solver import shortest_path


def _builder(seed: int = 0, **overrides) -> GraphBuilder:
    return GraphBuilder(default_config(**overrides), np.random.default_rng(seed))


def test_choose_node_count_fixed_range():
    builder = _builder()
    assert all(builder.choose_node_count(10, 10) == 10 for _ in range(20))


def test_choose_node_count_covers_inclusive_range():
    builder = _builder(3)
    seen = {builder.choose_node_count(2, 4) for _ in range(200)}
    assert seen == {2, 3, 4}


def test_choose_node_count_fails_fast_beyond_alphabet():
    builder = _builder()
    with pytest.raises(LabelAllocationError):
        builder.choose_node_count(10, 27)


def test_choose_node_count_rejects_inverted_range():
    with pytest.raises(ConfigError):
        _builder().choose_node_count(5, 4)


def test_choose_edge_count_default_density():
    builder = _builder(11)
    counts = {builder.choose_edge_count(10, 1.3) for _ in range(300)}

    assert all(9 <= count <= 45 for count in counts)
    # density 1.3 pulls the raw target below n, so only the floor and n survive
    assert counts <= {9, 10}


def test_choose_edge_count_sparse_density_adds_edges():
    builder = _builder(5)
    counts = {builder.choose_edge_count(10, 0.5) for _ in range(300)}
    assert counts <= set(range(10, 16))
    assert len(counts) > 1


@pytest.mark.parametrize("n, expected_max", [(0, 0), (1, 0), (2, 1), (3, 3), (4, 6)])
def test_choose_edge_count_clamps_to_simple_graph_maximum(n, expected_max):
    builder = _builder(1)
    for _ in range(50):
        count = builder.choose_edge_count(n, 0.0)
        assert count <= expected_max
        assert count >= max(n - 1, 0)
    assert max_edge_count(n) == expected_max


def test_generate_weight_integer_within_bounds():
    builder = _builder(2)
    weights = [builder.generate_weight() for _ in range(500)]

    assert all(float(w).is_integer() for w in weights)
    assert min(weights) >= 1
    assert max(weights) <= 100


def test_generate_weight_continuous():
    builder = _builder(2, w_min=0.5, w_max=1.5, integer_weights=False)
    weights = [builder.generate_weight() for _ in range(200)]

    assert all(0.5 <= w <= 1.5 for w in weights)
    assert any(not float(w).is_integer() for w in weights)


def test_add_edge_is_symmetric():
    graph = Graph(nodes=["A", "B"])
    assert _builder().add_edge(graph, "B", "A", 7.0)

    assert graph.adjacency["A"]["B"] == 7.0
    assert graph.adjacency["B"]["A"] == 7.0
    assert graph.edges == {("A", "B"): 7.0}


def test_add_edge_unknown_node_is_a_logged_no_op(caplog):
    graph = Graph(nodes=["A", "B"])

    with caplog.at_level("WARNING", logger="pathfinder.builder"):
        assert not _builder().add_edge(graph, "A", "Z", 3.0)

    assert "unknown node(s) Z" in caplog.text
    assert graph.edges == {}
    assert graph.adjacency == {"A": {}, "B": {}}


def test_add_edge_rejects_self_loop():
    graph = Graph(nodes=["A"])
    assert not _builder().add_edge(graph, "A", "A", 1.0)
    assert graph.adjacency == {"A": {}}


def test_generate_edges_reaches_complete_graph():
    graph = Graph(nodes=["A", "B", "C", "D"])
    _builder(4).generate_edges(graph, 6)

    assert graph.edge_count == 6
    assert set(graph.edges) == {
        ("A", "B"), ("A", "C"), ("A", "D"), ("B", "C"), ("B", "D"), ("C", "D"),
    }


def test_generate_edges_rejects_impossible_target():
    graph = Graph(nodes=["A", "B", "C"])
    with pytest.raises(ValueError):
        _builder().generate_edges(graph, 4)


@pytest.mark.parametrize("seed", range(25))
def test_built_graph_invariants(seed):
    graph = _builder(seed, items_min=1, items_max=12).build()
    n = graph.node_count

    assert len(set(graph.nodes)) == n
    assert set(graph.adjacency) == set(graph.nodes)
    for (u, v), weight in graph.edges.items():
        assert u < v
        assert graph.adjacency[u][v] == graph.adjacency[v][u] == weight
        assert 1 <= weight <= 100
    for node, neighbours in graph.adjacency.items():
        assert node not in neighbours
        for other, weight in neighbours.items():
            assert graph.adjacency[other][node] == weight
    if n > 1:
        assert n - 1 <= graph.edge_count <= n * (n - 1) // 2
    else:
        assert graph.edge_count == 0


def test_build_is_deterministic_for_a_seed():
    first = _builder(42).build()
    second = _builder(42).build()

    assert first.nodes == second.nodes
    assert list(first.edges.items()) == list(second.edges.items())


def test_to_adjacency_matches_builder_output():
    graph = _builder(9).build()
    rebuilt = to_adjacency(graph.edges, graph.nodes)

    assert rebuilt == graph.adjacency
    assert list(rebuilt) == graph.nodes


def test_to_adjacency_keeps_isolated_nodes_unreachable():
    graph = Graph(nodes=["A", "B", "C", "D"])
    builder = _builder()
    for (u, v), weight in {("A", "B"): 5.0, ("B", "C"): 3.0, ("A", "C"): 100.0}.items():
        builder.add_edge(graph, u, v, weight)

    adjacency = to_adjacency(graph.edges, graph.nodes)
    assert adjacency["D"] == {}

    result = shortest_path(adjacency, "A", "D")
    assert result.status == "unreachable"
    assert result.path is None
    assert shortest_path(to_adjacency(graph.edges), "A", "D").status == "not_found"
