import pytest

from taguchi.array import OrthogonalArray
from taguchi.errors import InvalidParametersError

L4 = [[0, 0, 0], [0, 1, 1], [1, 0, 1], [1, 1, 0]]
UNBALANCED = [[0, 0], [0, 1], [0, 0], [1, 1]]
PAIRED = [[0, 0], [0, 0], [1, 1], [1, 1]]


def test_dimensions():
    oa = OrthogonalArray(L4, 2, 2)
    assert oa.runs() == 4
    assert oa.factors() == 3
    assert len(oa) == 4
    assert oa.strength == 2


def test_symmetric_levels_expand_per_factor():
    assert OrthogonalArray(L4, 2, 2).levels == (2, 2, 2)


def test_rows_iterate_in_order():
    oa = OrthogonalArray(L4, 2, 2)
    assert [list(row) for row in oa] == L4


def test_column():
    oa = OrthogonalArray(L4, 2, 2)
    assert oa.column(1) == tuple(row[1] for row in L4)
    with pytest.raises(IndexError):
        oa.column(3)


def test_l4_has_strength_two():
    assert OrthogonalArray(L4, 2, 2).verify_strength(2) == []


def test_strength_zero_is_trivial():
    assert OrthogonalArray(PAIRED, 2, 0).verify_strength(0) == []


def test_paired_columns_fail_strength_two_but_pass_one():
    oa = OrthogonalArray(PAIRED, 2, 1)
    assert oa.verify_strength(1) == []
    issues = oa.verify_strength(2)
    assert len(issues) == 4


def test_runs_not_divisible_reported():
    oa = OrthogonalArray([[0, 0], [1, 1], [2, 2]], [3, 3], 1)
    assert len(oa.verify_strength(2)) == 1


def test_verify_strength_beyond_factors_rejected():
    with pytest.raises(InvalidParametersError):
        OrthogonalArray(L4, 2, 2).verify_strength(4)


def test_balance():
    assert OrthogonalArray(L4, 2, 2).is_balanced()
    assert not OrthogonalArray(UNBALANCED, 2, 0).is_balanced()


def test_missing_level_is_unbalanced():
    assert not OrthogonalArray([[0, 0], [1, 1]], [3, 2], 0).is_balanced()


def test_mixed_levels():
    data = [[a, b] for a in range(3) for b in range(2)]
    oa = OrthogonalArray(data, [3, 2], 2)
    assert oa.levels == (3, 2)
    assert oa.is_balanced()
    assert oa.verify_strength(2) == []


@pytest.mark.parametrize(
    "data, levels, strength",
    [
        ([], 2, 1),
        ([[]], 2, 0),
        ([[0, 1], [1]], 2, 1),
        ([[0, 2], [1, 0]], 2, 1),
        ([[0, -1], [1, 0]], 2, 1),
        ([[0, 1], [1, 0]], [2], 1),
        ([[0, 0], [0, 0]], 1, 1),
        ([[0, 1], [1, 0]], 2, 3),
    ],
)
def test_invalid_arrays_rejected(data, levels, strength):
    with pytest.raises(InvalidParametersError):
        OrthogonalArray(data, levels, strength)