import pytest
from hypothesis import given, strategies as st

from taguchi.primality import (
    PrimePowerFactorization,
    factor_prime_power,
    is_prime,
    is_prime_power,
    smallest_prime_factor,
)


@pytest.mark.parametrize(
    "n", [2, 3, 5, 7, 11, 13, 17, 19, 23, 97, 101, 1009, 10007, 100003]
)
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [0, 1, 4, 6, 8, 9, 10, 100])
def test_non_primes(n):
    assert is_prime(n) is False


@pytest.mark.parametrize("n", [561, 1105, 1729])
def test_carmichael_numbers_are_composite(n):
    assert is_prime(n) is False


@given(st.integers(min_value=0, max_value=5000))
def test_is_prime_agrees_with_smallest_factor(n):
    assert is_prime(n) == (n >= 2 and smallest_prime_factor(n) == n)


@pytest.mark.parametrize(
    "n", [2, 4, 8, 16, 32, 64, 3, 9, 27, 81, 5, 25, 125, 7, 11, 13]
)
def test_prime_powers(n):
    assert is_prime_power(n) is True


@pytest.mark.parametrize("n", [0, 1, 6, 10, 12, 15, 18, 20])
def test_not_prime_powers(n):
    assert is_prime_power(n) is False


@pytest.mark.parametrize(
    ("n", "prime", "exponent"),
    [
        (8, 2, 3),
        (9, 3, 2),
        (16, 2, 4),
        (27, 3, 3),
        (7, 7, 1),
        (125, 5, 3),
    ],
)
def test_factor_prime_power(n, prime, exponent):
    assert factor_prime_power(n) == PrimePowerFactorization(prime=prime, exponent=exponent)


@pytest.mark.parametrize("n", [0, 1, 6, 12])
def test_factor_prime_power_none(n):
    assert factor_prime_power(n) is None


@given(
    st.sampled_from([2, 3, 5, 7, 11, 13, 31, 127]),
    st.integers(min_value=1, max_value=8),
)
def test_factor_prime_power_round_trip(prime, exponent):
    result = factor_prime_power(prime**exponent)
    assert result == PrimePowerFactorization(prime=prime, exponent=exponent)
    assert result.value() == prime**exponent


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, None),
        (1, None),
        (2, 2),
        (3, 3),
        (4, 2),
        (6, 2),
        (9, 3),
        (15, 3),
        (17, 17),
        (35, 5),
    ],
)
def test_smallest_prime_factor(n, expected):
    assert smallest_prime_factor(n) == expected


def test_prime_power_factorization_value():
    assert PrimePowerFactorization(prime=2, exponent=10).value() == 1024
    assert PrimePowerFactorization(prime=3, exponent=5).value() == 243