"""Closest pair of points in the plane."""

from __future__ import annotations

import math
from itertools import combinations


def _points(points) -> list[tuple[float, float]]:
    pts = [(p[0], p[1]) for p in points]
    if len(pts) < 2:
        raise ValueError("need at least two points")
    return pts


def _d2(a, b) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def _solve(px: list, py: list) -> float:
    n = len(px)
    if n <= 3:
        return min(_d2(a, b) for a, b in combinations(px, 2))
    mid = n // 2
    pivot = px[mid]
    left_y = [p for p in py if p < pivot]
    right_y = [p for p in py if not p < pivot]
    best = min(_solve(px[:mid], left_y), _solve(px[mid:], right_y))
    strip = [p for p in py if (p[0] - pivot[0]) ** 2 < best]
    for i, p in enumerate(strip):
        for q in strip[i + 1 :]:
            if (q[1] - p[1]) ** 2 >= best:
                break
            best = min(best, _d2(p, q))
    return best


def closest_pair_distance(points):
    """Return the smallest distance between two of the ``(x, y)`` points.

    Uses divide and conquer in O(n log n).
    """
    pts = _points(points)
    tagged = [(x, y, i) for i, (x, y) in enumerate(pts)]
    px = sorted(tagged)
    py = sorted(tagged, key=lambda p: (p[1], p[0], p[2]))
    return math.sqrt(_solve(px, py))


def closest_pair_indices(points):
    """Return the indices ``(i, j)``, ``i < j``, of a closest pair of points."""
    pts = _points(points)
    order = sorted(range(len(pts)), key=lambda i: pts[i])
    best = _d2(pts[order[0]], pts[order[1]])
    pair = (order[0], order[1])
    lb = 0
    for rb in range(2, len(order)):
        right = pts[order[rb]]
        while lb < rb and (pts[order[lb]][0] - right[0]) ** 2 >= best:
            lb += 1
        for i in order[lb:rb]:
            cur = _d2(pts[i], right)
            if cur < best:
                best = cur
                pair = (i, order[rb])
    return tuple(sorted(pair))