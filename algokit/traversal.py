"""Whole-graph properties found by simple traversals.

Vertices are ``0 .. n-1`` and edges are ``(u, v)`` pairs.
"""

from __future__ import annotations

import enum
from collections import deque

from algokit.dsu import DisjointSet


class EulerKind(enum.Enum):
    """Whether an undirected graph has an Euler circuit, only a path, or neither."""

    NONE = "none"
    PATH = "path"
    CIRCUIT = "circuit"


def _check_edge(n: int, u: int, v: int) -> None:
    if not (0 <= u < n and 0 <= v < n):
        raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")


def euler_kind(n, edges):
    """Classify an undirected graph by the Euler trails it admits.

    All vertices that have an edge must be connected. Then no odd vertex
    gives a circuit, exactly two give a path, and any other count neither.
    """
    degree = [0] * n
    sets = DisjointSet(n)
    for u, v in edges:
        _check_edge(n, u, v)
        degree[u] += 1
        degree[v] += 1
        sets.union(u, v)

    used = [v for v in range(n) if degree[v] > 0]
    if len({sets.find(v) for v in used}) > 1:
        return EulerKind.NONE
    odd = sum(d & 1 for d in degree)
    if odd == 0:
        return EulerKind.CIRCUIT
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NONE


def is_bipartite(n, edges):
    """Return True if the undirected graph can be two-coloured."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_edge(n, u, v)
        adj[u].append(v)
        adj[v].append(u)

    colour = [-1] * n
    for start in range(n):
        if colour[start] != -1:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if colour[nxt] == -1:
                    colour[nxt] = colour[node] ^ 1
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True


def topological_order(n, edges):
    """Return a topological order of a directed graph by Kahn's algorithm.

    Ready vertices are taken first-in first-out, starting from the sources
    in increasing order. Raises ``ValueError`` if the graph has a cycle.
    """
    adj: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for u, v in edges:
        _check_edge(n, u, v)
        adj[u].append(v)
        indegree[v] += 1

    queue = deque(v for v in range(n) if indegree[v] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order