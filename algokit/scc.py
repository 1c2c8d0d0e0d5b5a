"""Strongly connected components of directed graphs.

Vertices are ``0 .. n-1`` and edges are ``(u, v)`` pairs.
"""

from __future__ import annotations


def _adjacency(n: int, edges) -> tuple[list[list[int]], list[list[int]]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    radj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) out of range for {n} vertices")
        adj[u].append(v)
        radj[v].append(u)
    return adj, radj


def kosaraju(n, edges):
    """Return the strongly connected components in topological order of the condensation."""
    adj, radj = _adjacency(n, edges)

    seen = [False] * n
    order = []
    for start in range(n):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                order.append(node)

    seen = [False] * n
    components = []
    for start in reversed(order):
        if seen[start]:
            continue
        seen[start] = True
        component = [start]
        walk = [iter(radj[start])]
        while walk:
            for nxt in walk[-1]:
                if not seen[nxt]:
                    seen[nxt] = True
                    component.append(nxt)
                    walk.append(iter(radj[nxt]))
                    break
            else:
                walk.pop()
        components.append(component)
    return components


def tarjan(n, edges):
    """Return the strongly connected components in reverse topological order."""
    adj, _ = _adjacency(n, edges)
    disc = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components = []
    timer = 0

    def visit(node: int) -> None:
        nonlocal timer
        disc[node] = low[node] = timer
        timer += 1
        stack.append(node)
        on_stack[node] = True

    for start in range(n):
        if disc[start] != -1:
            continue
        visit(start)
        calls = [(start, iter(adj[start]))]
        while calls:
            node, pending = calls[-1]
            for nxt in pending:
                if disc[nxt] == -1:
                    visit(nxt)
                    calls.append((nxt, iter(adj[nxt])))
                    break
                if on_stack[nxt]:
                    low[node] = min(low[node], disc[nxt])
            else:
                calls.pop()
                if calls:
                    parent = calls[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] == disc[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack[member] = False
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)
    return components