"""Offline range queries answered with Mo's ordering."""

from __future__ import annotations

from collections import Counter
from math import isqrt


def weighted_square_sums(values, queries):
    """For each inclusive 0-based range ``(lo, hi)`` return the sum of ``count(c)**2 * c``.

    ``c`` runs over the distinct values in the range. Answers come back in
    the order the queries were given.
    """
    items = list(values)
    query_list = list(queries)
    n = len(items)
    for lo, hi in query_list:
        if not 0 <= lo <= hi < n:
            raise IndexError(f"range {lo}..{hi} invalid for {n} elements")
    if not query_list:
        return []

    block = max(1, isqrt(n))
    order = sorted(
        range(len(query_list)),
        key=lambda q: (query_list[q][0] // block, -query_list[q][1]),
    )

    counts: Counter = Counter()
    total = 0

    def shift(value, delta: int) -> None:
        nonlocal total
        total -= counts[value] ** 2 * value
        counts[value] += delta
        total += counts[value] ** 2 * value

    answers = [0] * len(query_list)
    left = query_list[order[0]][0]
    right = left - 1
    for q in order:
        lo, hi = query_list[q]
        while lo < left:
            left -= 1
            shift(items[left], 1)
        while hi > right:
            right += 1
            shift(items[right], 1)
        while lo > left:
            shift(items[left], -1)
            left += 1
        while hi < right:
            shift(items[right], -1)
            right -= 1
        answers[q] = total
    return answers