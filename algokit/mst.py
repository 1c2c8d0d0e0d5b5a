"""Minimum spanning trees of undirected weighted graphs."""

from __future__ import annotations

import heapq

from algokit.dsu import DisjointSet


def kruskal(n, edges):
    """Return ``(cost, tree_edges)`` of a minimum spanning forest.

    Edges are ``(u, v, weight)`` triples; the chosen ones are returned in
    the order they were taken.
    """
    sets = DisjointSet(n)
    chosen = [edge for edge in sorted(edges, key=lambda e: e[2]) if sets.union(edge[0], edge[1])]
    return sum(w for _, _, w in chosen), chosen


def prim(n, edges):
    """Return ``(cost, tree_edges)`` of a minimum spanning tree grown from vertex 0.

    Only the component containing vertex 0 is spanned. Each tree edge is a
    ``(parent, child, weight)`` triple in the order the child was reached.
    """
    if n == 0:
        return 0, []
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")
        adj[u].append((v, w))
        adj[v].append((u, w))

    visited = [False] * n
    heap = [(0, 0, -1)]
    total = 0
    tree = []
    while heap:
        w, node, parent = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += w
        if parent >= 0:
            tree.append((parent, node, w))
        for nxt, nw in adj[node]:
            if not visited[nxt]:
                heapq.heappush(heap, (nw, nxt, node))
    return total, tree