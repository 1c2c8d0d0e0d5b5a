"""Shortest path algorithms on weighted graphs.

Vertices are the integers ``0 .. n-1`` and an edge is a ``(u, v, weight)``
triple. A vertex that cannot be reached has distance ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable


class NegativeCycleError(ValueError):
    """A negative-weight cycle makes shortest distances undefined."""


class NoPathError(LookupError):
    """The target vertex cannot be reached from the source."""


def _check_vertex(n: int, v: int) -> None:
    if not 0 <= v < n:
        raise IndexError(f"vertex {v} out of range for a graph of {n} vertices")


def _edge_list(n: int, edges: Iterable[tuple[int, int, float]]) -> list[tuple[int, int, float]]:
    result = []
    for u, v, w in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        result.append((u, v, w))
    return result


def _adjacency(n: int, edges: Iterable[tuple[int, int, float]], directed: bool) -> list[list[tuple[int, float]]]:
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, w in _edge_list(n, edges):
        adj[u].append((v, w))
        if not directed:
            adj[v].append((u, w))
    return adj


def find_negative_cycle(n, edges, source):
    """Return a negative cycle reachable from ``source``, or ``None``.

    The cycle is a list of vertices in edge order whose first and last
    entries are the same vertex.
    """
    _check_vertex(n, source)
    edge_list = _edge_list(n, edges)
    dist = [math.inf] * n
    parent = [-1] * n
    dist[source] = 0
    last = None
    for _ in range(n):
        last = None
        for u, v, w in edge_list:
            if dist[u] < math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
                last = v
        if last is None:
            return None

    # Walking back n steps is guaranteed to land inside the cycle.
    start = last
    for _ in range(n):
        start = parent[start]
    cycle = [start]
    node = parent[start]
    while True:
        cycle.append(node)
        if node == start:
            break
        node = parent[node]
    cycle.reverse()
    return cycle


def bellman_ford_path(n, edges, source, target):
    """Return ``(distance, path)`` of a shortest path from source to target.

    Negative weights are allowed. Raises :class:`NegativeCycleError` when a
    negative cycle is reachable from the source and :class:`NoPathError`
    when the target is unreachable.
    """
    _check_vertex(n, source)
    _check_vertex(n, target)
    edge_list = _edge_list(n, edges)
    dist = [math.inf] * n
    parent = [-1] * n
    dist[source] = 0
    for _ in range(n):
        changed = False
        for u, v, w in edge_list:
            if dist[u] < math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
                changed = True
        if not changed:
            break
    else:
        raise NegativeCycleError("graph contains a negative cycle reachable from the source")

    if dist[target] == math.inf:
        raise NoPathError(f"no path from {source} to {target}")
    path = []
    node = target
    while node != -1:
        path.append(node)
        node = parent[node]
    path.reverse()
    return dist[target], path


def dijkstra(n, edges, source):
    """Return distances from ``source`` in an undirected graph with non-negative weights."""
    _check_vertex(n, source)
    adj = _adjacency(n, edges, directed=False)
    dist = [math.inf] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        length, node = heapq.heappop(heap)
        if length > dist[node]:
            continue
        for nxt, w in adj[node]:
            candidate = length + w
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return dist


def floyd_warshall(n, edges, directed=True):
    """Return the matrix of shortest distances between all pairs of vertices.

    For an undirected graph each edge is used in both directions. A later
    edge between the same pair replaces an earlier one. Raises
    :class:`NegativeCycleError` if some vertex lies on a negative cycle.
    """
    edge_list = _edge_list(n, edges)
    dist = [[math.inf] * n for _ in range(n)]
    if directed:
        for u, v, w in edge_list:
            dist[u][v] = w
        for i in range(n):
            dist[i][i] = 0
    else:
        for i in range(n):
            dist[i][i] = 0
        for u, v, w in edge_list:
            dist[u][v] = w
            dist[v][u] = w

    for k in range(n):
        row_k = dist[k]
        for row_i in dist:
            via = row_i[k]
            if via == math.inf:
                continue
            for j, through in enumerate(row_k):
                if through < math.inf and via + through < row_i[j]:
                    row_i[j] = via + through

    if any(dist[i][i] < 0 for i in range(n)):
        raise NegativeCycleError("graph contains a negative cycle")
    return dist


def spfa_min_distance(n, edges):
    """Return the smallest weight of any path in a directed graph.

    With no negative edge this is the lightest edge (``math.inf`` when there
    are no edges). Otherwise every vertex is fed from a virtual source and
    the smallest resulting distance is returned. Raises
    :class:`NegativeCycleError` when the minimum is unbounded.
    """
    edge_list = _edge_list(n, edges)
    lightest = min((w for _, _, w in edge_list), default=math.inf)
    if lightest >= 0:
        return lightest

    virtual = n
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n + 1)]
    for u, v, w in edge_list:
        adj[u].append((v, w))
    adj[virtual] = [(v, 0) for v in range(n)]

    dist = [math.inf] * (n + 1)
    on_path = [False] * (n + 1)
    dist[virtual] = 0
    on_path[virtual] = True
    stack = [(virtual, iter(adj[virtual]))]
    while stack:
        node, pending = stack[-1]
        for nxt, w in pending:
            if dist[node] + w < dist[nxt]:
                if on_path[nxt]:
                    raise NegativeCycleError("graph contains a negative cycle")
                dist[nxt] = dist[node] + w
                on_path[nxt] = True
                stack.append((nxt, iter(adj[nxt])))
                break
        else:
            on_path[node] = False
            stack.pop()
    return min(dist[:n])


def _postorder(n: int, adj: list[list[tuple[int, float]]]) -> list[int]:
    seen = [False] * n
    order = []
    for start in range(n):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, pending = stack[-1]
            for nxt, _ in pending:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def dag_shortest_paths(n, edges, source):
    """Return distances from ``source`` in a directed acyclic graph.

    Negative weights are allowed; vertices are relaxed in topological order.
    """
    _check_vertex(n, source)
    adj = _adjacency(n, edges, directed=True)
    dist = [math.inf] * n
    dist[source] = 0
    for node in reversed(_postorder(n, adj)):
        if dist[node] == math.inf:
            continue
        for nxt, w in adj[node]:
            if dist[node] + w < dist[nxt]:
                dist[nxt] = dist[node] + w
    return dist