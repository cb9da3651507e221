"""Constructions of symmetric orthogonal arrays.

Each constructor fixes the number of levels (and, where it applies, the
strength) and builds an array for any number of factors up to its maximum.
"""

from __future__ import annotations

from taguchi.array import OrthogonalArray
from taguchi.errors import (
    InvalidParametersError,
    LevelsNotPrimePowerError,
    TooManyFactorsError,
)
from taguchi.field import GaloisField
from taguchi.primality import factor_prime_power


def _next_power_of_two(value: int) -> int:
    return 1 << (value - 1).bit_length() if value > 1 else 1


def _check_factors(factors: int, maximum: int, algorithm: str) -> None:
    if factors > maximum:
        raise TooManyFactorsError(factors, maximum, algorithm)
    if factors < 1:
        raise InvalidParametersError("factors must be at least 1")


class Bose:
    """Bose construction: OA(q², k, q, 2) for a prime power q and k <= q + 1."""

    name = "Bose"
    family = "OA(q², k, q, 2), k ≤ q+1"

    def __init__(self, q: int) -> None:
        if factor_prime_power(q) is None:
            raise LevelsNotPrimePowerError(q, self.name)
        self._q = q
        self._field = GaloisField(q)

    def __repr__(self) -> str:
        return f"Bose({self._q})"

    def levels(self) -> int:
        """Return the number of levels of every factor."""
        return self._q

    def strength(self) -> int:
        """Return the strength of the arrays built."""
        return 2

    def runs(self) -> int:
        """Return the number of runs of the arrays built."""
        return self._q * self._q

    def max_factors(self) -> int:
        """Return the largest number of factors supported."""
        return self._q + 1

    def construct(self, factors: int) -> OrthogonalArray:
        """Build the array with ``factors`` columns."""
        _check_factors(factors, self.max_factors(), self.name)
        q, field = self._q, self._field
        rows = []
        for i in range(q):
            for j in range(q):
                row = [j]
                row.extend(
                    field.add(i, field.mul(c % q, j)) for c in range(1, factors)
                )
                rows.append(row)
        return OrthogonalArray(rows, q, min(2, factors))


class Bush:
    """Bush construction: OA(q^t, k, q, t) for a prime power q and k <= t + 1."""

    name = "Bush"
    family = "OA(q^t, k, q, t), k ≤ t+1"

    def __init__(self, q: int, t: int) -> None:
        if factor_prime_power(q) is None:
            raise LevelsNotPrimePowerError(q, self.name)
        if t < 2:
            raise InvalidParametersError("strength must be at least 2")
        self._q = q
        self._t = t
        self._field = GaloisField(q)

    def __repr__(self) -> str:
        return f"Bush({self._q}, {self._t})"

    def levels(self) -> int:
        """Return the number of levels of every factor."""
        return self._q

    def strength(self) -> int:
        """Return the strength of the arrays built."""
        return self._t

    def runs(self) -> int:
        """Return the number of runs of the arrays built."""
        return self._q**self._t

    def max_factors(self) -> int:
        """Return the largest number of factors supported."""
        return self._t + 1

    def construct(self, factors: int) -> OrthogonalArray:
        """Build the array with ``factors`` columns.

        Each run is a polynomial of degree below t; its columns are the
        polynomial's values at 0 .. t-1 and, last, its leading coefficient.
        """
        _check_factors(factors, self.max_factors(), self.name)
        q, t, field = self._q, self._t, self._field
        rows = []
        for index in range(self.runs()):
            coeffs = []
            remaining = index
            for _ in range(t):
                remaining, digit = divmod(remaining, q)
                coeffs.append(digit)

            row = []
            for x in range(min(factors, t)):
                point = x % q
                value = 0
                for coeff in reversed(coeffs):
                    value = field.add(coeff, field.mul(point, value))
                row.append(value)
            if factors > t:
                row.append(coeffs[-1])
            rows.append(row)
        return OrthogonalArray(rows, q, min(t, factors))


class AddelmanKempthorne:
    """Addelman-Kempthorne construction: OA(2q², k, q, 2) for an odd prime power q, k <= 2q + 1."""

    name = "AddelmanKempthorne"
    family = "OA(2q², k, q, 2), q odd prime power, k ≤ 2q+1"

    def __init__(self, q: int) -> None:
        factorization = factor_prime_power(q)
        if factorization is None:
            raise LevelsNotPrimePowerError(q, self.name)
        if factorization.prime == 2:
            raise InvalidParametersError(
                "AddelmanKempthorne requires an odd prime power; "
                "use HadamardSylvester or Bose for powers of 2"
            )
        field = GaloisField(q)
        self._q = q
        self._field = field
        self._kay = self._find_non_residue(field)

        four = 1 if factorization.prime == 3 else 4
        kay_minus_one = field.add(self._kay, field.neg(1))
        four_inv = field.inv(four)

        self._b = [0] * q
        self._c = [0] * q
        self._k = [0] * q
        for m in range(1, q):
            self._k[m] = field.mul(self._kay, m)
            denominator = field.mul(field.mul(self._kay, four), m)
            self._b[m] = field.mul(kay_minus_one, field.inv(denominator))
            self._c[m] = field.mul(field.mul(field.mul(m, m), kay_minus_one), four_inv)

    def __repr__(self) -> str:
        return f"AddelmanKempthorne({self._q})"

    @staticmethod
    def _find_non_residue(field: GaloisField) -> int:
        squares = {field.mul(y, y) for y in range(field.order)}
        for x in range(1, field.order):
            if x not in squares:
                return x
        raise InvalidParametersError("failed to find a quadratic non-residue")

    def levels(self) -> int:
        """Return the number of levels of every factor."""
        return self._q

    def strength(self) -> int:
        """Return the strength of the arrays built."""
        return 2

    def runs(self) -> int:
        """Return the number of runs of the arrays built."""
        return 2 * self._q * self._q

    def max_factors(self) -> int:
        """Return the largest number of factors supported."""
        return 2 * self._q + 1

    def construct(self, factors: int) -> OrthogonalArray:
        """Build the array with ``factors`` columns."""
        _check_factors(factors, self.max_factors(), self.name)
        q = self._q
        rows = [
            self._first_block_row(i, j, factors) for i in range(q) for j in range(q)
        ]
        rows.extend(
            self._second_block_row(i, j, factors) for i in range(q) for j in range(q)
        )
        return OrthogonalArray(rows, q, min(2, factors))

    def _first_block_row(self, i: int, j: int, factors: int) -> list[int]:
        q, f = self._q, self._field
        i_sq = f.mul(i, i)
        row = []
        for col in range(factors):
            if col == 0:
                value = j
            elif col <= q - 1:
                value = f.add(i, f.mul(col, j))
            elif col == q:
                value = i
            else:
                m = col - q - 1
                value = f.add(f.add(i_sq, f.mul(m, i)), j)
            row.append(value)
        return row

    def _second_block_row(self, i: int, j: int, factors: int) -> list[int]:
        q, f = self._q, self._field
        kay_i_sq = f.mul(self._kay, f.mul(i, i))
        row = []
        for col in range(factors):
            if col == 0:
                value = f.add(j, self._b[0])
            elif col <= q - 1:
                value = f.add(f.add(i, f.mul(col, j)), self._b[col])
            elif col == q:
                value = f.add(i, self._b[0])
            else:
                m = col - q - 1
                value = f.add(
                    f.add(f.add(kay_i_sq, f.mul(self._k[m], i)), j), self._c[m]
                )
            row.append(value)
        return row


class HadamardSylvester:
    """Sylvester-Hadamard construction: OA(n, k, 2, 2) for n = 2^m >= 4 and k <= n - 1."""

    name = "HadamardSylvester"
    family = "OA(2^m, k, 2, 2), k ≤ 2^m - 1"

    def __init__(self, n: int) -> None:
        if n < 4 or n & (n - 1) != 0:
            raise InvalidParametersError(
                "n must be a power of 2 >= 4 for Hadamard-Sylvester"
            )
        self._n = n

    def __repr__(self) -> str:
        return f"HadamardSylvester({self._n})"

    @classmethod
    def for_factors(cls, factors: int) -> HadamardSylvester:
        """Return the smallest constructor that supports ``factors`` columns."""
        if factors < 1:
            raise InvalidParametersError("factors must be at least 1")
        return cls(max(_next_power_of_two(factors + 1), 4))

    def levels(self) -> int:
        """Return the number of levels of every factor."""
        return 2

    def strength(self) -> int:
        """Return the strength of the arrays built."""
        return 2

    def runs(self) -> int:
        """Return the number of runs of the arrays built."""
        return self._n

    def max_factors(self) -> int:
        """Return the largest number of factors supported."""
        return self._n - 1

    def construct(self, factors: int) -> OrthogonalArray:
        """Build the array with ``factors`` columns, mapping +1 to 0 and -1 to 1."""
        _check_factors(factors, self.max_factors(), self.name)
        rows = [
            [(i & j).bit_count() % 2 for j in range(1, factors + 1)]
            for i in range(self._n)
        ]
        return OrthogonalArray(rows, 2, min(2, factors))


def build_oa(levels: int, factors: int, strength: int) -> OrthogonalArray:
    """Build an orthogonal array, choosing a suitable construction."""
    prime_power = factor_prime_power(levels)

    if levels == 2 and strength == 2:
        n = max(_next_power_of_two(factors + 1), 4)
        if n - 1 >= factors:
            return HadamardSylvester(n).construct(factors)

    if strength == 2 and prime_power is not None:
        if factors <= levels + 1:
            return Bose(levels).construct(factors)
        if prime_power.prime != 2 and factors <= 2 * levels + 1:
            return AddelmanKempthorne(levels).construct(factors)

    if prime_power is not None and factors <= strength + 1:
        return Bush(levels, strength).construct(factors)

    raise InvalidParametersError(
        f"No construction available for OA(?, {factors}, {levels}, {strength})"
    )