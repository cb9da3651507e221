"""Combinatorial helpers: binomial coefficients, modular powers and combinations."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

_U64_MAX = (1 << 64) - 1


def binomial(n: int, k: int) -> int | None:
    """Return C(n, k), or ``None`` if a 64-bit unsigned computation would overflow.

    C(n, k) is 0 when ``k > n``.
    """
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if k > n:
        return 0

    k = min(k, n - k)
    result = 1
    for i in range(k):
        result *= n - i
        if result > _U64_MAX:
            return None
        result //= i + 1
    return result


def mod_pow(base: int, exp: int, modulus: int) -> int:
    """Return ``base ** exp % modulus`` using fast exponentiation."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    if modulus == 1:
        return 0
    return pow(base, exp, modulus)


def combinations(n: int, k: int) -> Iterator[list[int]]:
    """Yield every k-combination of ``range(n)`` in lexicographic order.

    With ``k == 0`` a single empty combination is produced; with ``k > n``
    nothing is produced.
    """
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    for combo in itertools.combinations(range(n), k):
        yield list(combo)