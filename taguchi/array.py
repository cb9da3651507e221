"""Orthogonal arrays and checks of their balance and strength."""

from __future__ import annotations

import itertools
import math
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

from taguchi.combinatorics import combinations
from taguchi.errors import InvalidParametersError


class OrthogonalArray:
    """A table of runs by factors whose entries are factor levels.

    ``levels`` is either one number of levels shared by every factor or a
    sequence giving the number of levels of each factor.
    """

    def __init__(
        self,
        data: Iterable[Sequence[int]],
        levels: int | Sequence[int],
        strength: int,
    ) -> None:
        rows = tuple(tuple(int(v) for v in row) for row in data)
        if not rows or not rows[0]:
            raise InvalidParametersError("an array needs at least one run and one factor")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidParametersError("every run must have the same number of factors")

        per_factor = (levels,) * width if isinstance(levels, int) else tuple(levels)
        if len(per_factor) != width:
            raise InvalidParametersError(
                f"{len(per_factor)} level counts given for {width} factors"
            )
        if any(level < 2 for level in per_factor):
            raise InvalidParametersError("every factor needs at least 2 levels")
        if not 0 <= strength <= width:
            raise InvalidParametersError(
                f"strength {strength} must lie between 0 and the {width} factors"
            )
        for row in rows:
            for value, level in zip(row, per_factor):
                if not 0 <= value < level:
                    raise InvalidParametersError(
                        f"value {value} is outside the levels 0..{level - 1}"
                    )

        self.data = rows
        self.levels = per_factor
        self.strength = strength

    def __repr__(self) -> str:
        return (
            f"OrthogonalArray(runs={self.runs()}, factors={self.factors()}, "
            f"levels={self.levels}, strength={self.strength})"
        )

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def runs(self) -> int:
        """Return the number of runs (rows)."""
        return len(self.data)

    def factors(self) -> int:
        """Return the number of factors (columns)."""
        return len(self.data[0])

    def column(self, index: int) -> tuple[int, ...]:
        """Return the levels of one factor over all runs."""
        if not 0 <= index < self.factors():
            raise IndexError(f"factor {index} out of range")
        return tuple(row[index] for row in self.data)

    def is_balanced(self) -> bool:
        """Return whether every level of every factor appears equally often."""
        for index, level in enumerate(self.levels):
            counts = Counter(self.column(index))
            if len(counts) != level or len(set(counts.values())) != 1:
                return False
        return True

    def verify_strength(self, strength: int) -> list[str]:
        """Return the problems that stop the array having ``strength``; empty if none."""
        if not 0 <= strength <= self.factors():
            raise InvalidParametersError(
                f"strength {strength} must lie between 0 and the {self.factors()} factors"
            )
        issues: list[str] = []
        for columns in combinations(self.factors(), strength):
            if not columns:
                continue
            level_counts = [self.levels[c] for c in columns]
            cells = math.prod(level_counts)
            expected, remainder = divmod(self.runs(), cells)
            if remainder:
                issues.append(
                    f"columns {columns}: {self.runs()} runs cannot cover "
                    f"{cells} combinations equally"
                )
                continue
            counts = Counter(tuple(row[c] for c in columns) for row in self.data)
            for combo in itertools.product(*(range(level) for level in level_counts)):
                seen = counts.get(combo, 0)
                if seen != expected:
                    issues.append(
                        f"columns {columns}: {combo} appears {seen} times, "
                        f"expected {expected}"
                    )
        return issues