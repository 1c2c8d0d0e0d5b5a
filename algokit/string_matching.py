"""Prefix-function, Z-function and palindrome based string algorithms."""

from __future__ import annotations


def prefix_function(s):
    """Return, for each position, the length of the longest proper border of ``s[:i+1]``."""
    pi = [0] * len(s)
    k = 0
    for i in range(1, len(s)):
        while k > 0 and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def kmp_search(text, pattern):
    """Return the start index of every, possibly overlapping, occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    pi = prefix_function(pattern)
    m = len(pattern)
    positions = []
    k = 0
    for i, ch in enumerate(text):
        while k > 0 and ch != pattern[k]:
            k = pi[k - 1]
        if ch == pattern[k]:
            k += 1
        if k == m:
            positions.append(i - m + 1)
            k = pi[k - 1]
    return positions


def z_array(s):
    """Return the Z-function: ``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``.

    ``z[0]`` is 0.
    """
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def longest_palindrome(s):
    """Return the length of the longest palindromic substring, by Manacher's algorithm."""
    padded = "#" + "#".join(s) + "#" if s else "#"
    n = len(padded)
    radius = [0] * n
    center = right = 0
    for i in range(n):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        lo, hi = i - radius[i] - 1, i + radius[i] + 1
        while lo >= 0 and hi < n and padded[lo] == padded[hi]:
            radius[i] += 1
            lo -= 1
            hi += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
    return max(radius)


def count_distinct_substrings(s):
    """Return the number of distinct non-empty substrings of ``s`` in O(n^2)."""
    total = 0
    reversed_prefix = ""
    for length, ch in enumerate(s, start=1):
        reversed_prefix = ch + reversed_prefix
        total += length - max(prefix_function(reversed_prefix))
    return total