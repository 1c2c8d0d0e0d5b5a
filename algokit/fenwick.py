"""Fenwick (binary indexed) trees and a longest increasing subsequence built on one."""

from __future__ import annotations

from bisect import bisect_left


class FenwickTree:
    """Prefix sums over positions ``1 .. n`` with point updates."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self._n = n
        self._tree = [0] * (n + 1)

    def __len__(self) -> int:
        return self._n

    def update(self, idx, val):
        """Add ``val`` at position ``idx`` (1-based)."""
        if not 1 <= idx <= self._n:
            raise IndexError(f"position {idx} out of range 1..{self._n}")
        while idx <= self._n:
            self._tree[idx] += val
            idx += idx & -idx

    def query(self, idx):
        """Return the sum of positions ``1 .. idx``; 0 when ``idx`` is not positive."""
        idx = min(idx, self._n)
        total = 0
        while idx > 0:
            total += self._tree[idx]
            idx -= idx & -idx
        return total

    def range_sum(self, lo, hi):
        """Return the sum of positions ``lo .. hi`` inclusive."""
        if lo > hi:
            return 0
        return self.query(hi) - self.query(lo - 1)


class FenwickTree2D:
    """Rectangle sums over a ``rows`` by ``cols`` grid with 1-based coordinates."""

    def __init__(self, rows, cols):
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._tree = [[0] * (cols + 1) for _ in range(rows + 1)]

    def update(self, x, y, val):
        """Add ``val`` at cell ``(x, y)``."""
        if not (1 <= x <= self._rows and 1 <= y <= self._cols):
            raise IndexError(f"cell ({x}, {y}) out of range")
        while x <= self._rows:
            row = self._tree[x]
            j = y
            while j <= self._cols:
                row[j] += val
                j += j & -j
            x += x & -x

    def query(self, x, y):
        """Return the sum of the rectangle from ``(1, 1)`` to ``(x, y)``."""
        x = min(x, self._rows)
        y = min(y, self._cols)
        total = 0
        while x > 0:
            row = self._tree[x]
            j = y
            while j > 0:
                total += row[j]
                j -= j & -j
            x -= x & -x
        return total

    def rect_sum(self, x1, y1, x2, y2):
        """Return the sum of the inclusive rectangle ``(x1, y1) .. (x2, y2)``."""
        if x1 > x2 or y1 > y2:
            return 0
        return (
            self.query(x2, y2)
            - self.query(x1 - 1, y2)
            - self.query(x2, y1 - 1)
            + self.query(x1 - 1, y1 - 1)
        )


def longest_increasing_subsequence(values):
    """Return the length of the longest strictly increasing subsequence."""
    items = list(values)
    ranks = sorted(set(items))
    size = len(ranks)
    best = [0] * (size + 1)
    answer = 0
    for value in items:
        idx = bisect_left(ranks, value)  # 1-based rank minus one
        current = 0
        i = idx
        while i > 0:
            current = max(current, best[i])
            i -= i & -i
        length = current + 1
        i = idx + 1
        while i <= size:
            if best[i] < length:
                best[i] = length
            i += i & -i
        answer = max(answer, length)
    return answer