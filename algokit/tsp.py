"""Travelling salesman tour over a small undirected weighted graph."""

from __future__ import annotations

import math
from functools import cache


def shortest_tour(n, edges):
    """Return the weight of the lightest tour visiting every vertex once.

    The tour starts and ends at vertex 0 and uses only the given undirected
    ``(u, v, weight)`` edges. Returns ``math.inf`` when no tour exists.
    """
    if n < 1:
        raise ValueError("a tour needs at least one vertex")
    cost = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        cost[i][i] = 0
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")
        best_weight = min(cost[u][v], w)
        cost[u][v] = best_weight
        cost[v][u] = best_weight

    full = (1 << n) - 1

    @cache
    def best(mask: int, pos: int) -> float:
        if mask == full:
            return cost[pos][0]
        result = math.inf
        for nxt, step in enumerate(cost[pos]):
            if mask >> nxt & 1 or step == math.inf:
                continue
            result = min(result, step + best(mask | 1 << nxt, nxt))
        return result

    return best(1, 0)