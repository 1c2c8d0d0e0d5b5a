"""Palindromic tree (eertree) of a string."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_IMAGINARY = 0
_EMPTY = 1


@dataclass(slots=True)
class _Node:
    length: int
    link: int = 0
    diff: int = 0
    slink: int = 0
    cnt: int = 0
    oc: int = 0
    start: int = 0
    end: int = 0
    next: dict[str, int] = field(default_factory=dict)


class PalindromicTree:
    """Palindromic tree built incrementally over the characters of ``s``.

    Call :meth:`extend` for positions ``0, 1, ...`` in order. Besides the
    suffix link, each node keeps ``diff`` (its length minus its link's
    length) and a series link to the longest suffix palindrome with a
    different ``diff``; ``cnt`` is the number of palindromic suffixes.
    """

    def __init__(self, s):
        self.s = s
        self._nodes = [
            _Node(length=-1, link=_IMAGINARY, slink=_IMAGINARY),
            _Node(length=0, link=_IMAGINARY, slink=_EMPTY),
        ]
        self.last = _EMPTY
        self._processed = 0

    def _suffix_for(self, node: int, pos: int) -> int:
        s = self.s
        while True:
            length = self._nodes[node].length
            if pos - 1 - length >= 0 and s[pos - 1 - length] == s[pos]:
                return node
            node = self._nodes[node].link

    def extend(self, pos):
        """Add ``s[pos]``; return True if a new distinct palindrome appears."""
        if pos != self._processed:
            raise ValueError(f"expected position {self._processed}, got {pos}")
        self._processed += 1
        nodes = self._nodes
        ch = self.s[pos]
        cur = self._suffix_for(self.last, pos)
        existing = nodes[cur].next.get(ch)
        if existing is not None:
            self.last = existing
            nodes[existing].oc += 1
            return False

        node = _Node(length=nodes[cur].length + 2, oc=1, end=pos)
        node.start = pos - node.length + 1
        index = len(nodes)
        nodes.append(node)
        nodes[cur].next[ch] = index
        self.last = index
        if node.length == 1:
            node.link = _EMPTY
            node.cnt = 1
            node.diff = 1
            node.slink = _EMPTY
            return True

        cur = self._suffix_for(nodes[cur].link, pos)
        node.link = nodes[cur].next[ch]
        link = nodes[node.link]
        node.cnt = 1 + link.cnt
        node.diff = node.length - link.length
        node.slink = link.slink if node.diff == link.diff else node.link
        return True

    def calc_occurrences(self):
        """Turn per-node end counts into total occurrence counts; call once."""
        nodes = self._nodes
        for index in range(len(nodes) - 1, _EMPTY, -1):
            nodes[nodes[index].link].oc += nodes[index].oc

    def minimum_partition(self):
        """Return, for each prefix length, the fewest palindromes that split it.

        Entry ``i`` is ``(even, odd)``: the smallest even and the smallest
        odd number of palindromes whose concatenation is ``s[:i]``, with
        ``math.inf`` where no such split exists. Builds the tree itself, so
        it must be called on a fresh tree.
        """
        if self._processed:
            raise RuntimeError("minimum_partition needs a tree with no characters added")
        nodes = self._nodes
        n = len(self.s)
        ans = [[0, 0] for _ in range(n + 1)]
        ans[0][1] = math.inf
        series: dict[int, list[float]] = {_EMPTY: [0, math.inf]}
        for i in range(1, n + 1):
            self.extend(i - 1)
            for k in (0, 1):
                other = 1 - k
                best = math.inf
                v = self.last
                while nodes[v].length > 0:
                    node = nodes[v]
                    value = ans[i - (nodes[node.slink].length + node.diff)][other]
                    if node.diff == nodes[node.link].diff:
                        value = min(value, series[node.link][other])
                    series.setdefault(v, [0, 0])[other] = value
                    best = min(best, value + 1)
                    v = node.slink
                ans[i][k] = best
        return [(even, odd) for even, odd in ans]


def count_palindromic_substrings(s):
    """Return the number of palindromic substrings of ``s``, counting repeats."""
    tree = PalindromicTree(s)
    for pos in range(len(s)):
        tree.extend(pos)
    tree.calc_occurrences()
    return sum(node.oc for node in tree._nodes[_EMPTY + 1 :])