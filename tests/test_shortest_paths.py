import math
import random

import pytest

from algokit.shortest_paths import (
    NegativeCycleError,
    NoPathError,
    bellman_ford_path,
    dag_shortest_paths,
    dijkstra,
    find_negative_cycle,
    floyd_warshall,
    spfa_min_distance,
)


def _random_graph(rng, n, m, lo, hi, *, dag=False, undirected=False):
    pairs = set()
    edges = []
    while len(edges) < m:
        u, v = rng.randrange(n), rng.randrange(n)
        if u == v:
            continue
        if dag and u > v:
            u, v = v, u
        key = (min(u, v), max(u, v)) if undirected else (u, v)
        if key in pairs:
            continue
        pairs.add(key)
        edges.append((u, v, rng.randint(lo, hi)))
    return edges


def test_dijkstra_worked_example():
    edges = [(0, 1, 4), (1, 2, 1), (0, 2, 7)]
    assert dijkstra(3, edges, 0) == [0, 4, 5]


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_agrees_with_floyd_warshall(seed):
    rng = random.Random(seed)
    n = 8
    edges = _random_graph(rng, n, 12, 0, 20, undirected=True)
    table = floyd_warshall(n, edges, directed=False)
    for source in range(n):
        assert dijkstra(n, edges, source) == table[source]


def test_dijkstra_unreachable_is_infinite():
    dist = dijkstra(4, [(0, 1, 3)], 0)
    assert dist[2] == math.inf and dist[3] == math.inf


@pytest.mark.parametrize("seed", range(5))
def test_bellman_ford_path_matches_floyd_with_negative_weights(seed):
    rng = random.Random(seed)
    n = 7
    edges = _random_graph(rng, n, 12, -5, 10, dag=True)
    weight = {(u, v): w for u, v, w in edges}
    table = floyd_warshall(n, edges)
    source = 0
    for target in range(n):
        if table[source][target] == math.inf:
            with pytest.raises(NoPathError):
                bellman_ford_path(n, edges, source, target)
            continue
        distance, path = bellman_ford_path(n, edges, source, target)
        assert distance == table[source][target]
        assert path[0] == source and path[-1] == target
        assert sum(weight[(a, b)] for a, b in zip(path, path[1:])) == distance


def test_bellman_ford_path_to_itself():
    assert bellman_ford_path(3, [(0, 1, 2)], 1, 1) == (0, [1])


def test_bellman_ford_path_raises_on_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1), (2, 3, 1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford_path(4, edges, 0, 3)


def test_find_negative_cycle_returns_closed_negative_cycle():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1), (2, 3, 1)]
    weight = {(u, v): w for u, v, w in edges}
    cycle = find_negative_cycle(4, edges, 0)
    assert cycle[0] == cycle[-1]
    assert len(cycle) > 1
    assert all((a, b) in weight for a, b in zip(cycle, cycle[1:]))
    assert sum(weight[(a, b)] for a, b in zip(cycle, cycle[1:])) < 0


@pytest.mark.parametrize("seed", range(3))
def test_find_negative_cycle_none_without_negative_edges(seed):
    rng = random.Random(seed)
    edges = _random_graph(rng, 6, 15, 0, 9)
    assert find_negative_cycle(6, edges, 0) is None


def test_find_negative_cycle_ignores_unreachable_cycle():
    edges = [(0, 1, 2), (2, 3, -4), (3, 2, 1)]
    assert find_negative_cycle(4, edges, 0) is None
    assert find_negative_cycle(4, edges, 2) is not None and find_negative_cycle(4, edges, 2)[0] in {2, 3}


def test_floyd_warshall_detects_negative_cycle():
    with pytest.raises(NegativeCycleError):
        floyd_warshall(3, [(0, 1, 2), (1, 2, -1), (2, 0, -2)])


def test_floyd_warshall_triangle_inequality():
    rng = random.Random(11)
    n = 7
    edges = _random_graph(rng, n, 18, 1, 30)
    table = floyd_warshall(n, edges)
    for u, v, w in edges:
        for i in range(n):
            assert table[i][v] <= table[i][u] + w
    assert all(table[i][i] == 0 for i in range(n))


@pytest.mark.parametrize("seed", range(5))
def test_dag_shortest_paths_matches_floyd(seed):
    rng = random.Random(seed)
    n = 8
    edges = _random_graph(rng, n, 14, -6, 9, dag=True)
    table = floyd_warshall(n, edges)
    source = rng.randrange(n)
    assert dag_shortest_paths(n, edges, source) == table[source]


def test_spfa_non_negative_returns_lightest_edge():
    edges = [(0, 1, 7), (1, 2, 3), (2, 0, 5)]
    assert spfa_min_distance(3, edges) == min(w for _, _, w in edges)


def test_spfa_without_edges_is_infinite():
    assert spfa_min_distance(3, []) == math.inf


@pytest.mark.parametrize("seed", range(5))
def test_spfa_with_negative_edges_matches_floyd(seed):
    rng = random.Random(seed)
    n = 7
    edges = _random_graph(rng, n, 12, -8, 8, dag=True)
    edges.append((0, n - 1, -1))
    table = floyd_warshall(n, edges)
    expected = min(d for i, row in enumerate(table) for j, d in enumerate(row) if i != j)
    assert spfa_min_distance(n, edges) == expected


def test_spfa_negative_cycle_raises():
    with pytest.raises(NegativeCycleError):
        spfa_min_distance(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)])


def test_out_of_range_vertex_rejected():
    with pytest.raises(IndexError):
        dijkstra(2, [(0, 5, 1)], 0)