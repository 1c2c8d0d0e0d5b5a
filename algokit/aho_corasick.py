"""Aho-Corasick automaton for matching many patterns at once."""

from __future__ import annotations

import math
from collections import deque


class AhoCorasick:
    """Automaton over a set of non-empty string patterns.

    Patterns are added with :meth:`add_pattern`, then :meth:`build` computes
    the failure links. State ``0`` is the root.
    """

    def __init__(self):
        self._next: list[dict[str, int]] = []
        self._link: list[int] = []
        self._out_link: list[int] = []
        self._out: list[list[int]] = []
        self._count = 0
        self._built = False
        self._new_node()

    def _new_node(self) -> int:
        self._next.append({})
        self._link.append(0)
        self._out_link.append(0)
        self._out.append([])
        return len(self._next) - 1

    def add_pattern(self, pattern):
        """Add ``pattern`` and return its id, counted from 0."""
        if not pattern:
            raise ValueError("patterns must not be empty")
        node = 0
        for ch in pattern:
            nxt = self._next[node].get(ch)
            if nxt is None:
                nxt = self._new_node()
                self._next[node][ch] = nxt
            node = nxt
        pattern_id = self._count
        self._count += 1
        self._out[node].append(pattern_id)
        self._built = False
        return pattern_id

    def build(self):
        """Compute failure and output links; call after the last pattern."""
        queue = deque([0])
        while queue:
            node = queue.popleft()
            for ch, child in self._next[node].items():
                if node == 0:
                    link = 0
                else:
                    fallback = self._link[node]
                    while fallback and ch not in self._next[fallback]:
                        fallback = self._link[fallback]
                    link = self._next[fallback].get(ch, 0)
                self._link[child] = link
                self._out_link[child] = link if self._out[link] else self._out_link[link]
                queue.append(child)
        self._built = True

    def advance(self, state, char):
        """Return the state reached from ``state`` after reading ``char``."""
        if not self._built:
            raise RuntimeError("build() must be called before matching")
        while state and char not in self._next[state]:
            state = self._link[state]
        return self._next[state].get(char, 0)

    def matches(self, state):
        """Return the ids of every pattern that ends at ``state``."""
        found = []
        while state:
            found.extend(self._out[state])
            state = self._out_link[state]
        return found


def min_pattern_cover(patterns, text):
    """Return the fewest pattern occurrences that concatenate to ``text``.

    Any pattern may be used any number of times. Returns ``None`` when
    ``text`` cannot be built from the patterns.
    """
    unique = sorted(set(patterns))
    automaton = AhoCorasick()
    lengths = {automaton.add_pattern(p): len(p) for p in unique}
    automaton.build()

    best = [0] + [math.inf] * len(text)
    state = 0
    for end, ch in enumerate(text, start=1):
        state = automaton.advance(state, ch)
        for pattern_id in automaton.matches(state):
            best[end] = min(best[end], best[end - lengths[pattern_id]] + 1)
    result = best[-1]
    return None if result == math.inf else result