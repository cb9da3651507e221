"""Primality testing and prime-power factorisation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from taguchi.combinatorics import mod_pow

# Sufficient for a deterministic Miller-Rabin test far beyond 32-bit inputs.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


@dataclass(frozen=True)
class PrimePowerFactorization:
    """A number written as ``prime ** exponent``."""

    prime: int
    exponent: int

    def value(self) -> int:
        """Return ``prime ** exponent``."""
        return self.prime**self.exponent


def is_prime(n: int) -> bool:
    """Return whether ``n`` is prime, using a deterministic Miller-Rabin test."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    if n < 9:
        return True
    if n % 3 == 0:
        return False

    n_minus_1 = n - 1
    r = (n_minus_1 & -n_minus_1).bit_length() - 1
    d = n_minus_1 >> r

    for a in _WITNESSES:
        if a >= n:
            continue
        x = mod_pow(a, d, n)
        if x in (1, n_minus_1):
            continue
        for _ in range(r - 1):
            x = x * x % n
            if x == n_minus_1:
                break
        else:
            return False
    return True


def is_prime_power(n: int) -> bool:
    """Return whether ``n`` is ``p ** k`` for a prime ``p`` and ``k >= 1``."""
    return factor_prime_power(n) is not None


def factor_prime_power(n: int) -> PrimePowerFactorization | None:
    """Write ``n`` as a prime power, or return ``None`` if it is not one."""
    if n < 2:
        return None
    if is_prime(n):
        return PrimePowerFactorization(prime=n, exponent=1)
    if n & (n - 1) == 0:
        return PrimePowerFactorization(prime=2, exponent=n.bit_length() - 1)

    for k in range(2, n.bit_length() + 1):
        root = _integer_kth_root(n, k)
        if root is not None and root > 1 and is_prime(root) and root**k == n:
            return PrimePowerFactorization(prime=root, exponent=k)
    return None


def _integer_kth_root(n: int, k: int) -> int | None:
    """Return the exact integer k-th root of ``n``, or ``None`` if there is none."""
    if k == 0:
        return None
    if n in (0, 1) or k == 1:
        return n

    x = 1 << -(-n.bit_length() // k)
    while True:
        new_x = ((k - 1) * x + n // x ** (k - 1)) // k
        if new_x >= x:
            return x if x**k == n else None
        x = new_x


def smallest_prime_factor(n: int) -> int | None:
    """Return the smallest prime factor of ``n``, or ``None`` when ``n < 2``."""
    if n < 2:
        return None
    if n % 2 == 0:
        return 2
    limit = math.isqrt(n)
    for i in range(3, limit + 1, 2):
        if n % i == 0:
            return i
    return n