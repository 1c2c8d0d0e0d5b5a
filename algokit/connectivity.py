"""Articulation points and bridges of undirected graphs.

Vertices are ``0 .. n-1`` and edges are ``(u, v)`` pairs. Every connected
component is examined. Parallel edges are told apart, so a doubled edge is
never a bridge.
"""

from __future__ import annotations

from collections import Counter


def _adjacency(n: int, edges) -> list[list[tuple[int, int]]]:
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for eid, (u, v) in enumerate(edges):
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")
        adj[u].append((v, eid))
        adj[v].append((u, eid))
    return adj


def _lowlink(n: int, edges):
    """Run a depth-first search over every component.

    Returns the discovery times, the low-link values, the tree edges as
    ``(parent, child)`` in the order the children finish, and the roots.
    """
    adj = _adjacency(n, edges)
    disc = [-1] * n
    low = [0] * n
    tree: list[tuple[int, int]] = []
    roots: set[int] = set()
    timer = 0
    for root in range(n):
        if disc[root] != -1:
            continue
        roots.add(root)
        disc[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent_edge, pending = stack[-1]
            for nxt, eid in pending:
                if eid == parent_edge:
                    continue
                if disc[nxt] == -1:
                    disc[nxt] = low[nxt] = timer
                    timer += 1
                    stack.append((nxt, eid, iter(adj[nxt])))
                    break
                low[node] = min(low[node], disc[nxt])
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[node])
                    tree.append((parent, node))
    return disc, low, tree, roots


def articulation_points(n, edges):
    """Return the sorted vertices whose removal splits their component."""
    disc, low, tree, roots = _lowlink(n, edges)
    points: set[int] = set()
    root_children: Counter[int] = Counter()
    for parent, child in tree:
        if parent in roots:
            root_children[parent] += 1
        elif low[child] >= disc[parent]:
            points.add(parent)
    points.update(root for root, count in root_children.items() if count > 1)
    return sorted(points)


def bridges(n, edges):
    """Return the edges whose removal splits their component.

    Each bridge is a ``(parent, child)`` pair oriented along the search tree.
    """
    disc, low, tree, _ = _lowlink(n, edges)
    return [(parent, child) for parent, child in tree if low[child] > disc[parent]]