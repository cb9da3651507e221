"""Exceptions raised when an orthogonal array cannot be built or checked."""

from __future__ import annotations


class TaguchiError(Exception):
    """Base class for every error raised by this package."""


class InvalidParametersError(TaguchiError, ValueError):
    """The parameters given for a construction or an array are not valid."""


class LevelsNotPrimePowerError(TaguchiError, ValueError):
    """A construction needs a prime-power number of levels and did not get one."""

    def __init__(self, levels: int, algorithm: str) -> None:
        self.levels = levels
        self.algorithm = algorithm
        super().__init__(f"{algorithm} requires a prime-power number of levels, got {levels}")


class TooManyFactorsError(TaguchiError, ValueError):
    """More factors were requested than a construction can provide."""

    def __init__(self, factors: int, maximum: int, algorithm: str) -> None:
        self.factors = factors
        self.maximum = maximum
        self.algorithm = algorithm
        super().__init__(
            f"{algorithm} supports at most {maximum} factors, {factors} requested"
        )