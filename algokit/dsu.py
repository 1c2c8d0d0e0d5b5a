"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Partition of the elements ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n):
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, u):
        """Return the representative of the set containing ``u``."""
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u, v):
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._rank[v] > self._rank[u]:
            u, v = v, u
        self._parent[v] = u
        if self._rank[u] == self._rank[v]:
            self._rank[u] += 1
        return True


def has_cycle(n, edges):
    """Return True if the undirected edges ``(u, v)`` on ``n`` vertices form a cycle."""
    sets = DisjointSet(n)
    return any(not sets.union(u, v) for u, v in edges)