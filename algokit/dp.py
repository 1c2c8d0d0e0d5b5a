"""Classic dynamic programming problems."""

from __future__ import annotations

from functools import cache


def _count_upto(n: int, k: int) -> int:
    """Count ``x`` in ``0 .. n`` divisible by ``k`` whose digit sum is too."""
    if n < 0:
        return 0
    digits = [int(d) for d in str(n)]

    @cache
    def go(pos: int, num_mod: int, sum_mod: int, tight: bool) -> int:
        if pos == len(digits):
            return int(num_mod == 0 and sum_mod == 0)
        top = digits[pos] if tight else 9
        return sum(
            go(pos + 1, (num_mod * 10 + d) % k, (sum_mod + d) % k, tight and d == top)
            for d in range(top + 1)
        )

    return go(0, 0, 0, True)


def count_digit_sum_divisible(lo, hi, k):
    """Count integers in ``[lo, hi]`` divisible by ``k`` whose digit sum is divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    if lo < 0:
        raise ValueError("range must not contain negative numbers")
    if lo > hi:
        return 0
    if k > 9 * len(str(hi)):
        # No positive digit sum can reach k, so only zero qualifies.
        return int(lo == 0)
    return _count_upto(hi, k) - _count_upto(lo - 1, k)


def coin_change_ways(coins, total):
    """Return the number of multisets of ``coins`` adding up to ``total``."""
    if total < 0:
        raise ValueError("total must not be negative")
    ways = [1] + [0] * total
    for coin in coins:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def knapsack(values, weights, capacity):
    """Return the best total value of items whose total weight fits in ``capacity``."""
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def matrix_chain_cost(dims):
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    dims = list(dims)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("need at least two dimensions")
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][m] + cost[m + 1][j] + dims[i] * dims[m + 1] * dims[j + 1]
                for m in range(i, j)
            )
    return cost[0][count - 1]


def edit_distance(a, b):
    """Return the Levenshtein distance between ``a`` and ``b``."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j - 1], previous[j], current[j - 1]))
        previous = current
    return previous[-1]