"""Segment trees: point-update range maximum and range-add range sum.

Positions are 0-based and ranges ``lo .. hi`` are inclusive.
"""

from __future__ import annotations

import math


def _check_range(n: int, lo: int, hi: int) -> None:
    if not 0 <= lo <= hi < n:
        raise IndexError(f"range {lo}..{hi} invalid for {n} elements")


class MaxSegmentTree:
    """Range maximum queries with point assignment."""

    def __init__(self, values):
        items = list(values)
        self._n = len(items)
        self._tree = [-math.inf] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    def update(self, idx, val):
        """Set position ``idx`` to ``val``."""
        if not 0 <= idx < self._n:
            raise IndexError(f"position {idx} out of range")
        i = idx + self._n
        self._tree[i] = val
        i //= 2
        while i:
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, lo, hi):
        """Return the maximum over positions ``lo .. hi``."""
        _check_range(self._n, lo, hi)
        best = -math.inf
        left, right = lo + self._n, hi + self._n + 1
        while left < right:
            if left & 1:
                best = max(best, self._tree[left])
                left += 1
            if right & 1:
                right -= 1
                best = max(best, self._tree[right])
            left //= 2
            right //= 2
        return best


class LazySumSegmentTree:
    """Range sums with lazily propagated range additions."""

    def __init__(self, values):
        items = list(values)
        self._n = len(items)
        size = 4 * max(1, self._n)
        self._tree = [0] * size
        self._lazy = [0] * size
        if self._n:
            self._build(1, 0, self._n - 1, items)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, l: int, r: int, items: list) -> None:
        if l == r:
            self._tree[node] = items[l]
            return
        mid = (l + r) // 2
        self._build(2 * node, l, mid, items)
        self._build(2 * node + 1, mid + 1, r, items)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _apply(self, node: int, l: int, r: int, val) -> None:
        self._tree[node] += val * (r - l + 1)
        self._lazy[node] += val

    def _push(self, node: int, l: int, r: int) -> None:
        pending = self._lazy[node]
        if pending:
            mid = (l + r) // 2
            self._apply(2 * node, l, mid, pending)
            self._apply(2 * node + 1, mid + 1, r, pending)
            self._lazy[node] = 0

    def _add(self, node: int, l: int, r: int, lo: int, hi: int, val) -> None:
        if r < lo or hi < l:
            return
        if lo <= l and r <= hi:
            self._apply(node, l, r, val)
            return
        self._push(node, l, r)
        mid = (l + r) // 2
        self._add(2 * node, l, mid, lo, hi, val)
        self._add(2 * node + 1, mid + 1, r, lo, hi, val)
        self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def _query(self, node: int, l: int, r: int, lo: int, hi: int):
        if r < lo or hi < l:
            return 0
        if lo <= l and r <= hi:
            return self._tree[node]
        self._push(node, l, r)
        mid = (l + r) // 2
        return self._query(2 * node, l, mid, lo, hi) + self._query(2 * node + 1, mid + 1, r, lo, hi)

    def add(self, lo, hi, val):
        """Add ``val`` to every position in ``lo .. hi``."""
        _check_range(self._n, lo, hi)
        self._add(1, 0, self._n - 1, lo, hi, val)

    def query(self, lo, hi):
        """Return the sum over positions ``lo .. hi``."""
        _check_range(self._n, lo, hi)
        return self._query(1, 0, self._n - 1, lo, hi)