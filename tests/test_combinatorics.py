import pytest
from hypothesis import given, strategies as st

from taguchi.combinatorics import binomial, combinations, mod_pow


@pytest.mark.parametrize(
    ("n", "k", "expected"),
    [
        (0, 0, 1),
        (5, 0, 1),
        (5, 5, 1),
        (5, 2, 10),
        (10, 3, 120),
        (10, 5, 252),
        (20, 10, 184_756),
        (3, 5, 0),
    ],
)
def test_binomial(n, k, expected):
    assert binomial(n, k) == expected


def test_binomial_overflow_returns_none():
    assert binomial(100, 50) is None


def test_binomial_rejects_negative():
    with pytest.raises(ValueError):
        binomial(-1, 2)


@given(st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_binomial_symmetry(n, k):
    if k <= n:
        assert binomial(n, k) == binomial(n, n - k)
    else:
        assert binomial(n, k) == 0


@pytest.mark.parametrize(
    ("base", "exp", "modulus", "expected"),
    [
        (2, 10, 1000, 24),
        (3, 5, 7, 5),
        (2, 0, 7, 1),
        (0, 5, 7, 0),
        (3, 4, 5, 1),
        (7, 3, 11, 2),
        (5, 3, 1, 0),
    ],
)
def test_mod_pow(base, exp, modulus, expected):
    assert mod_pow(base, exp, modulus) == expected


def test_mod_pow_zero_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_combinations_four_choose_two():
    assert list(combinations(4, 2)) == [
        [0, 1],
        [0, 2],
        [0, 3],
        [1, 2],
        [1, 3],
        [2, 3],
    ]


def test_combinations_counts():
    assert len(list(combinations(5, 3))) == 10


def test_combinations_empty_choice():
    assert list(combinations(3, 0)) == [[]]


def test_combinations_too_many():
    assert list(combinations(3, 4)) == []


@given(st.integers(min_value=0, max_value=9), st.integers(min_value=0, max_value=9))
def test_combinations_count_matches_binomial(n, k):
    combos = list(combinations(n, k))
    assert len(combos) == binomial(n, k)
    assert all(combo == sorted(set(combo)) for combo in combos)
    assert combos == sorted(combos)