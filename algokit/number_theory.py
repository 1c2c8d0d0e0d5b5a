"""Sieves, multiplicative functions and modular arithmetic."""

from __future__ import annotations

from itertools import compress


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError("limit must not be negative")


def totients(limit):
    """Return Euler's totient ``phi(i)`` for every ``i`` in ``0 .. limit``."""
    _check_limit(limit)
    phi = list(range(limit + 1))
    for i in range(2, limit + 1):
        if phi[i] == i:
            for j in range(i, limit + 1, i):
                phi[j] -= phi[j] // i
    return phi


def linear_sieve(limit):
    """Return the primes up to ``limit`` inclusive, each composite crossed out once."""
    _check_limit(limit)
    primes: list[int] = []
    composite = bytearray(limit + 1)
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
        for p in primes:
            if i * p > limit:
                break
            composite[i * p] = 1
            if i % p == 0:
                break
    return primes


def mobius(limit):
    """Return the Moebius function ``mu(i)`` for every ``i`` in ``0 .. limit``.

    ``mu(0)`` is reported as 0.
    """
    _check_limit(limit)
    mu = [1] * (limit + 1)
    mu[0] = 0
    is_prime = bytearray([1]) * (limit + 1)
    for i in range(2, limit + 1):
        if not is_prime[i]:
            continue
        mu[i] = -mu[i]
        for j in range(2, limit // i + 1):
            is_prime[i * j] = 0
            mu[i * j] = 0 if j % i == 0 else -mu[i * j]
    return mu


def primes_up_to(n):
    """Return all primes ``p <= n`` in increasing order."""
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    i = 2
    while i * i <= n:
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
        i += 1
    return list(compress(range(n + 1), sieve))


def power_mod(base, exp, mod):
    """Return ``base ** exp % mod`` by repeated squaring."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    if exp < 0:
        raise ValueError("exponent must not be negative")
    result = 1 % mod
    base %= mod
    while exp:
        if exp & 1:
            result = result * base % mod
        base = base * base % mod
        exp >>= 1
    return result


class Binomial:
    """Binomial coefficients modulo a prime from precomputed factorials."""

    def __init__(self, limit, mod=1_000_000_007):
        _check_limit(limit)
        if mod < 2:
            raise ValueError("modulus must be a prime")
        if limit >= mod:
            raise ValueError("limit must be smaller than the modulus")
        self.limit = limit
        self.mod = mod
        fact = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fact[i] = fact[i - 1] * i % mod
        inv = [1] * (limit + 1)
        inv[limit] = power_mod(fact[limit], mod - 2, mod)
        for i in range(limit, 0, -1):
            inv[i - 1] = inv[i] * i % mod
        self._fact = fact
        self._inv_fact = inv

    def choose(self, n, r):
        """Return ``C(n, r) % mod``; 0 when ``r`` is outside ``0 .. n``."""
        if n < 0 or n > self.limit:
            raise ValueError(f"n must lie in 0..{self.limit}")
        if not 0 <= r <= n:
            return 0
        return self._fact[n] * self._inv_fact[r] % self.mod * self._inv_fact[n - r] % self.mod


_Matrix = tuple[tuple[int, int], tuple[int, int]]


def _mat_mul(a: _Matrix, b: _Matrix, mod: int) -> _Matrix:
    return tuple(
        tuple(sum(a[i][j] * b[j][k] for j in range(2)) % mod for k in range(2))
        for i in range(2)
    )  # type: ignore[return-value]


def fibonacci_mod(n, mod=1_000_000_007):
    """Return the ``n``-th Fibonacci number modulo ``mod``, with ``F(0) = 0``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if mod <= 0:
        raise ValueError("modulus must be positive")
    result: _Matrix = ((1 % mod, 0), (0, 1 % mod))
    step: _Matrix = ((0, 1), (1, 1))
    while n:
        if n & 1:
            result = _mat_mul(result, step, mod)
        step = _mat_mul(step, step, mod)
        n >>= 1
    return result[1][0]


def max_subset_xor(values):
    """Return the largest XOR of any subset of non-negative ``values`` (0 for none)."""
    rows = sorted(values, reverse=True)
    if any(v < 0 for v in rows):
        raise ValueError("values must not be negative")
    top = max(rows, default=0).bit_length()
    pivot = 0
    for bit in range(top - 1, -1, -1):
        found = next((i for i in range(pivot, len(rows)) if rows[i] >> bit & 1), None)
        if found is None:
            continue
        rows[pivot], rows[found] = rows[found], rows[pivot]
        for i, row in enumerate(rows):
            if i != pivot and row >> bit & 1:
                rows[i] = row ^ rows[pivot]
        pivot += 1
    result = 0
    for row in rows:
        result ^= row
    return result