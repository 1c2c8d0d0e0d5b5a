"""Lowest common ancestor queries on a rooted tree by binary lifting."""

from __future__ import annotations


class LowestCommonAncestor:
    """Answer lowest-common-ancestor queries on a tree of ``n`` vertices.

    The tree is given by undirected ``(u, v)`` edges and rooted at ``root``.
    """

    def __init__(self, n, edges, root=0):
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range for {n} vertices")
        adj: list[list[int]] = [[] for _ in range(n)]
        for u, v in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")
            adj[u].append(v)
            adj[v].append(u)

        self._n = n
        self._depth: list[int | None] = [None] * n
        parent = list(range(n))
        self._depth[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for nxt in adj[node]:
                if self._depth[nxt] is None:
                    self._depth[nxt] = self._depth[node] + 1
                    parent[nxt] = node
                    stack.append(nxt)

        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def depth(self, node):
        """Return the number of edges between ``node`` and the root."""
        if not 0 <= node < self._n:
            raise IndexError(f"vertex {node} out of range")
        d = self._depth[node]
        if d is None:
            raise ValueError(f"vertex {node} is not connected to the root")
        return d

    def query(self, u, v):
        """Return the deepest vertex that is an ancestor of both ``u`` and ``v``."""
        du, dv = self.depth(u), self.depth(v)
        if du < dv:
            u, v, du, dv = v, u, dv, du
        diff = du - dv
        for k, level in enumerate(self._up):
            if diff >> k & 1:
                u = level[u]
        if u == v:
            return u
        for level in reversed(self._up):
            if level[u] != level[v]:
                u, v = level[u], level[v]
        return self._up[0][u]