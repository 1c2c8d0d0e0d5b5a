"""Binary tries for XOR queries over integers, and a prefix-counting word trie."""

from __future__ import annotations


class _BitNode:
    __slots__ = ("children", "size")

    def __init__(self) -> None:
        self.children: list[_BitNode | None] = [None, None]
        self.size = 0


class XorTrie:
    """Multiset of non-negative integers below ``2**bits`` supporting XOR queries."""

    def __init__(self, bits=31):
        if bits < 1:
            raise ValueError("bits must be positive")
        self._bits = bits
        self._root = _BitNode()

    def __len__(self) -> int:
        return self._root.size

    def _check(self, val: int) -> None:
        if not 0 <= val < 1 << self._bits:
            raise ValueError(f"value {val} does not fit in {self._bits} bits")

    def insert(self, val):
        """Add ``val`` to the trie."""
        self._check(val)
        node = self._root
        node.size += 1
        for i in range(self._bits - 1, -1, -1):
            b = val >> i & 1
            child = node.children[b]
            if child is None:
                child = node.children[b] = _BitNode()
            child.size += 1
            node = child

    def count_xor_less(self, x, k):
        """Return how many stored values ``v`` satisfy ``x ^ v < k``."""
        self._check(x)
        if k <= 0:
            return 0
        if k >= 1 << self._bits:
            return len(self)
        node = self._root
        total = 0
        for i in range(self._bits - 1, -1, -1):
            if node is None:
                break
            xb = x >> i & 1
            if k >> i & 1:
                same = node.children[xb]
                if same is not None:
                    total += same.size
                node = node.children[1 - xb]
            else:
                node = node.children[xb]
        return total

    def _walk(self, x: int, prefer_different: bool) -> int:
        self._check(x)
        if not len(self):
            raise ValueError("trie is empty")
        node = self._root
        result = 0
        for i in range(self._bits - 1, -1, -1):
            b = x >> i & 1
            wanted = 1 - b if prefer_different else b
            result <<= 1
            if node.children[wanted] is not None:
                node = node.children[wanted]
                result |= wanted ^ b
            else:
                node = node.children[1 - wanted]
                result |= (1 - wanted) ^ b
        return result

    def max_xor(self, x):
        """Return the largest ``x ^ v`` over stored values ``v``."""
        return self._walk(x, prefer_different=True)

    def min_xor(self, x):
        """Return the smallest ``x ^ v`` over stored values ``v``."""
        return self._walk(x, prefer_different=False)


class _WordNode:
    __slots__ = ("children", "prefix_count", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, _WordNode] = {}
        self.prefix_count = 0
        self.is_end = False


class WordTrie:
    """Set of words that counts how many inserted words share a prefix."""

    def __init__(self):
        self._root = _WordNode()

    def __len__(self) -> int:
        return self._root.prefix_count

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def insert(self, word):
        """Add ``word``; inserting it again counts it again for prefixes."""
        node = self._root
        node.prefix_count += 1
        for ch in word:
            node = node.children.setdefault(ch, _WordNode())
            node.prefix_count += 1
        node.is_end = True

    def _find(self, text: str) -> _WordNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word):
        """Return True if ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def count_prefix(self, prefix):
        """Return the number of inserted words that start with ``prefix``."""
        node = self._find(prefix)
        return 0 if node is None else node.prefix_count


def min_pairwise_xor(values):
    """Return the smallest ``a ^ b`` over pairs of values at different positions."""
    items = list(values)
    if len(items) < 2:
        raise ValueError("need at least two values")
    if any(v < 0 for v in items):
        raise ValueError("values must not be negative")
    trie = XorTrie(max(1, max(items).bit_length()))
    trie.insert(items[0])
    best = None
    for value in items[1:]:
        candidate = trie.min_xor(value)
        best = candidate if best is None else min(best, candidate)
        trie.insert(value)
    return best