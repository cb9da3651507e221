"""Orthogonal array (Taguchi) constructions, finite-field arithmetic and number-theory helpers."""

__version__ = "0.2.0"

__all__ = ["array", "combinatorics", "constructions", "errors", "field", "primality"]