import itertools
import random

import networkx as nx
import pytest

from app.algorithms.errors import InvalidArgumentError, VertexIndexError
from app.algorithms.kruskal import Edge, MSTResult, is_spanning_tree, kruskal_mst
from app.algorithms.union_find import DisjointSetUnion


def brute_force_cost(num_vertices, edges):
    """Peso mínimo de un bosque de expansión, probando todos los subconjuntos."""
    components = DisjointSetUnion(num_vertices)
    for e in edges:
        components.union(e.source, e.destination)
    size = num_vertices - components.count

    best = None
    for subset in itertools.combinations(edges, size):
        dsu = DisjointSetUnion(num_vertices)
        if all(dsu.union(e.source, e.destination) for e in subset):
            cost = sum(e.weight for e in subset)
            if best is None or cost < best:
                best = cost
    return best


def random_edges(rng, num_vertices, num_edges):
    return [
        Edge(rng.randrange(num_vertices), rng.randrange(num_vertices), rng.randint(-5, 20))
        for _ in range(num_edges)
    ]


def test_classic_four_vertex_graph():
    edges = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]
    result = kruskal_mst(4, edges)
    assert result.cost == 19
    assert result.edges == [Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)]


def test_single_vertex_without_edges():
    assert kruskal_mst(1, []) == MSTResult([], 0)


def test_single_vertex_ignores_self_loop():
    assert kruskal_mst(1, [(0, 0, 1)]) == MSTResult([], 0)


def test_no_vertices():
    assert kruskal_mst(0, []) == MSTResult([], 0)


def test_disconnected_graph_gives_forest():
    result = kruskal_mst(3, [(0, 1, 5)])
    assert result.edges == [Edge(0, 1, 5)]
    assert result.cost == 5
    assert not is_spanning_tree(result, 3)


def test_parallel_edges_keep_cheapest():
    result = kruskal_mst(2, [(0, 1, 3), (0, 1, 7)])
    assert result.edges == [Edge(0, 1, 3)]
    assert result.cost == 3


def test_self_loops_are_never_selected():
    result = kruskal_mst(3, [(0, 0, -10), (1, 1, 0), (0, 1, 2), (1, 2, 3)])
    assert result.edges == [Edge(0, 1, 2), Edge(1, 2, 3)]
    assert result.cost == 5


def test_negative_weights_are_accepted():
    result = kruskal_mst(3, [(0, 1, -2), (1, 2, -1), (0, 2, -3)])
    assert result.cost == -5
    assert len(result.edges) == 2


def test_float_weights():
    result = kruskal_mst(3, [(0, 1, 0.5), (1, 2, 1.25), (0, 2, 2.0)])
    assert result.cost == pytest.approx(1.75)


def test_input_is_not_reordered():
    edges = [Edge(0, 1, 9), Edge(1, 2, 1)]
    kruskal_mst(3, edges)
    assert edges == [Edge(0, 1, 9), Edge(1, 2, 1)]


def test_negative_vertex_count_is_rejected():
    with pytest.raises(InvalidArgumentError):
        kruskal_mst(-1, [])


@pytest.mark.parametrize("edge", [(0, 3, 1), (-1, 0, 1), (3, 3, 1)])
def test_out_of_range_edges_are_rejected(edge):
    with pytest.raises(VertexIndexError):
        kruskal_mst(3, [(0, 1, 1), edge])


def test_edges_with_zero_vertices_are_rejected():
    with pytest.raises(VertexIndexError):
        kruskal_mst(0, [(0, 0, 1)])


def test_is_spanning_tree_trivial_graphs():
    assert is_spanning_tree(MSTResult([], 0), 0)
    assert is_spanning_tree(MSTResult([], 0), 1)
    assert not is_spanning_tree(MSTResult([], 0), 2)


@pytest.mark.parametrize("seed", range(25))
def test_matches_brute_force_on_small_graphs(seed):
    rng = random.Random(seed)
    num_vertices = rng.randint(1, 6)
    edges = random_edges(rng, num_vertices, rng.randint(0, 8))

    result = kruskal_mst(num_vertices, edges)

    assert len(result.edges) <= max(num_vertices - 1, 0)
    assert result.cost == sum(e.weight for e in result.edges)
    assert result.cost == brute_force_cost(num_vertices, edges)

    dsu = DisjointSetUnion(num_vertices)
    for e in result.edges:
        assert dsu.union(e.source, e.destination)

    assert kruskal_mst(num_vertices, edges) == result


@pytest.mark.parametrize("seed", range(10))
def test_connected_graphs_agree_with_networkx(seed):
    rng = random.Random(seed)
    num_vertices = rng.randint(2, 30)
    G = nx.connected_watts_strogatz_graph(num_vertices, 2, 0.3, seed=seed) if num_vertices > 2 else nx.path_graph(2)
    edges = [Edge(u, v, rng.randint(1, 100)) for u, v in G.edges()]
    for e in edges:
        G[e.source][e.destination]["weight"] = e.weight

    result = kruskal_mst(num_vertices, edges)

    expected = nx.minimum_spanning_tree(G, algorithm="kruskal")
    assert len(result.edges) == num_vertices - 1
    assert is_spanning_tree(result, num_vertices)
    assert result.cost == expected.size(weight="weight")


@pytest.mark.parametrize("edge", [(0.5, 1, 1), (0, 1.0, 1), (True, 1, 1), ("0", 1, 1)])
def test_non_integer_vertices_are_rejected(edge):
    with pytest.raises(VertexIndexError):
        kruskal_mst(3, [edge])


def test_stops_once_tree_is_complete(monkeypatch):
    calls = []
    original_union = DisjointSetUnion.union

    def recording_union(self, a, b):
        calls.append((a, b))
        return original_union(self, a, b)

    monkeypatch.setattr(DisjointSetUnion, "union", recording_union)

    result = kruskal_mst(2, [(0, 1, 1), (0, 1, 2), (0, 1, 3)])

    assert result.edges == [Edge(0, 1, 1)]
    assert calls == [(0, 1)]
