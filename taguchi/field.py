"""Arithmetic in finite (Galois) fields of prime-power order.

Elements are the integers ``0 .. order - 1``. For an order ``p ** m`` an
element's base-``p`` digits are the coefficients of its polynomial over
GF(p), lowest degree first.
"""

from __future__ import annotations

import itertools

from taguchi.errors import InvalidParametersError, LevelsNotPrimePowerError
from taguchi.primality import factor_prime_power


class GaloisField:
    """The finite field with ``order`` elements."""

    def __init__(self, order: int) -> None:
        factorization = factor_prime_power(order)
        if factorization is None:
            raise LevelsNotPrimePowerError(order, "GaloisField")
        self.order = order
        self.characteristic = factorization.prime
        self.degree = factorization.exponent
        self._exp, self._log = self._build_tables()

    def __repr__(self) -> str:
        return f"GaloisField({self.order})"

    def add(self, a: int, b: int) -> int:
        """Return ``a + b``."""
        self._check(a)
        self._check(b)
        p = self.characteristic
        if self.degree == 1:
            return (a + b) % p
        return self._encode(
            (x + y) % p for x, y in zip(self._digits(a), self._digits(b))
        )

    def neg(self, a: int) -> int:
        """Return the additive inverse of ``a``."""
        self._check(a)
        p = self.characteristic
        if self.degree == 1:
            return -a % p
        return self._encode(-d % p for d in self._digits(a))

    def mul(self, a: int, b: int) -> int:
        """Return ``a * b``."""
        self._check(a)
        self._check(b)
        if a == 0 or b == 0:
            return 0
        return self._exp[(self._log[a] + self._log[b]) % (self.order - 1)]

    def inv(self, a: int) -> int:
        """Return the multiplicative inverse of ``a``."""
        self._check(a)
        if a == 0:
            raise ZeroDivisionError("zero has no inverse in a field")
        return self._exp[-self._log[a] % (self.order - 1)]

    def _check(self, a: int) -> None:
        if not 0 <= a < self.order:
            raise InvalidParametersError(
                f"{a} is not an element of GF({self.order})"
            )

    def _digits(self, value: int) -> list[int]:
        p = self.characteristic
        digits = []
        for _ in range(self.degree):
            value, digit = divmod(value, p)
            digits.append(digit)
        return digits

    def _encode(self, digits) -> int:
        value = 0
        for digit in reversed(list(digits)):
            value = value * self.characteristic + digit
        return value

    def _build_tables(self) -> tuple[list[int], list[int]]:
        """Find a primitive polynomial and tabulate powers of its root."""
        p, m, q = self.characteristic, self.degree, self.order
        for tail in itertools.product(range(p), repeat=m):
            if tail[0] == 0:
                continue
            reduction = [-a % p for a in tail]
            powers = self._powers_of_x(reduction)
            if powers is not None:
                log = [0] * q
                for exponent, value in enumerate(powers):
                    log[value] = exponent
                return powers, log
        raise InvalidParametersError(f"no primitive polynomial found for GF({q})")

    def _powers_of_x(self, reduction: list[int]) -> list[int] | None:
        """Return x**0 .. x**(q-2) modulo the polynomial, or None if x is not primitive."""
        p, q = self.characteristic, self.order
        powers = [1]
        current = 1
        for _ in range(q - 1):
            digits = self._digits(current)
            top = digits[-1]
            shifted = [0, *digits[:-1]]
            current = self._encode(
                (s + top * r) % p for s, r in zip(shifted, reduction)
            )
            if current == 1:
                break
            powers.append(current)
        if current != 1 or len(powers) != q - 1:
            return None
        return powers