"""Suffix array by prefix doubling, and LCP array by Kasai's algorithm."""

from __future__ import annotations


def suffix_array(s):
    """Return the start indices of the suffixes of ``s`` in sorted order."""
    n = len(s)
    if n == 0:
        return []
    rank = [ord(c) for c in s]
    order = list(range(n))
    k = 1
    while True:
        def key(i: int, rank=rank, k=k) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(order, order[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[order[-1]] == n - 1:
            return order
        k <<= 1


def lcp_array(s, sa):
    """Return ``lcp[i]``, the common prefix length of suffixes ``sa[i]`` and ``sa[i+1]``.

    The last entry is 0.
    """
    n = len(s)
    if len(sa) != n:
        raise ValueError("suffix array length does not match the string")
    rank = [0] * n
    for position, start in enumerate(sa):
        rank[start] = position
    lcp = [0] * n
    h = 0
    for i in range(n):
        r = rank[i]
        if r == n - 1:
            h = 0
            continue
        j = sa[r + 1]
        while i + h < n and j + h < n and s[i + h] == s[j + h]:
            h += 1
        lcp[r] = h
        if h:
            h -= 1
    return lcp


def count_distinct_substrings_in_length_range(s, lo, hi):
    """Return the number of distinct substrings whose length lies in ``[lo, hi]``."""
    sa = suffix_array(s)
    lcp = lcp_array(s, sa)
    n = len(s)
    return sum(
        max(0, min(n - start, hi) - max(lo - 1, common))
        for start, common in zip(sa, lcp)
    )