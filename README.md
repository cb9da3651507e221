# taguchi

Orthogonal arrays for experimental design (Taguchi designs).

An orthogonal array OA(N, k, s, t) has N runs (rows) and k factors
(columns), and each entry is one of s levels. In any t columns, every
combination of levels appears equally often. `taguchi` builds these arrays
from classical algebraic constructions over finite fields. It is plain
Python and has no dependencies.

## Installation

```
pip install taguchi
```

## Quick start

```python
from taguchi.constructions import build_oa

oa = build_oa(3, 4, 2)           # levels, factors, strength -> the L9 design
print(oa.runs(), oa.factors())   # 9 4
print(oa.is_balanced())          # True
print(oa.column(1))
```

`build_oa(levels, factors, strength)` chooses a construction from the
parameters, checking them in this order:

- two levels at strength 2: Hadamard–Sylvester, using the smallest power of
  two greater than the number of factors (at least 4)
- prime-power levels q at strength 2 with at most q+1 factors: Bose
- odd prime-power levels q at strength 2 with at most 2q+1 factors:
  Addelman–Kempthorne
- prime-power levels q at strength t with at most t+1 factors: Bush

If none of these applies, it raises `InvalidParametersError`.

## Constructions

`taguchi.constructions` has four constructor classes. Each one reports
`levels()`, `strength()`, `runs()` and `max_factors()`, and builds an array
with `construct(factors)`:

| Class | Array | Limits |
|---|---|---|
| `Bose(q)` | OA(q², k, q, 2) | q prime power, k ≤ q+1 |
| `Bush(q, t)` | OA(qᵗ, k, q, t) | q prime power, t ≥ 2, k ≤ t+1 |
| `AddelmanKempthorne(q)` | OA(2q², k, q, 2) | q odd prime power, k ≤ 2q+1 |
| `HadamardSylvester(n)` | OA(n, k, 2, 2) | n power of two ≥ 4, k ≤ n−1 |

`HadamardSylvester.for_factors(k)` returns the constructor with the
smallest n that holds k factors. The strength recorded on a built array is
the constructor's strength, capped at the number of factors.

```python
from taguchi.constructions import AddelmanKempthorne

oa = AddelmanKempthorne(3).construct(7)   # L18
assert oa.runs() == 18
assert oa.verify_strength(2) == []
```

## Arrays

`taguchi.array.OrthogonalArray(data, levels, strength)` holds a run table.
`levels` is either one number shared by all factors or a sequence with one
count per factor. The constructor checks that the rows all have the same
width, that every value lies within its factor's levels and that the
strength is no larger than the number of factors. Otherwise it raises
`InvalidParametersError`.

- `data`, `levels`, `strength`: the rows as tuples, the per-factor level
  counts and the declared strength
- `runs()`, `factors()`: the dimensions; `len(oa)` and iterating over `oa`
  work over the rows
- `column(index)`: one factor's levels over all runs (`IndexError` when out
  of range)
- `is_balanced()`: whether each level of each factor appears, and they all
  appear equally often
- `verify_strength(t)`: a list of problems that stop every set of t columns
  from covering all level combinations equally often. The list is empty
  when the array has strength t.

## Finite fields and number theory

- `taguchi.field.GaloisField(order)` gives arithmetic in GF(pⁿ) through
  `add`, `neg`, `mul` and `inv`. Elements are the integers 0 to order−1.
  `inv(0)` raises `ZeroDivisionError`.
- `taguchi.primality` provides `is_prime`, `is_prime_power`,
  `factor_prime_power` and `smallest_prime_factor`. `factor_prime_power`
  returns a `PrimePowerFactorization` with `prime`, `exponent` and `value()`,
  or `None`.
- `taguchi.combinatorics` provides `binomial`, `mod_pow` and `combinations`.
  `binomial` returns `None` when the value would not fit in 64 unsigned bits.

## Errors

All errors derive from `taguchi.errors.TaguchiError`. They are also
`ValueError`s:

- `InvalidParametersError`: unusable parameters, such as zero factors
- `LevelsNotPrimePowerError`: a construction needs prime-power levels
- `TooManyFactorsError`: more factors were asked for than a construction
  supports

## What it does not do

`taguchi` is a library only and has no command-line tool. All of its
constructions are symmetric, so every factor has the same number of
levels. `OrthogonalArray` can hold and check a mixed-level table, but no
construction builds one. Analysing experimental results (main effects,
signal-to-noise ratios, ANOVA) is not included.

## Running the tests

```
pip install "taguchi[test]"
pytest
```