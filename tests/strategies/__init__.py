"""Hypothesis strategies for intscan property-based testing.

Usage:
    from tests.strategies import canonical_literals, render
    from tests.strategies.integers import STANDARD_KINDS

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - integer_kinds, bases, in_range_values, out_of_range_literals
"""

from .integers import (
    C_SPACES,
    SIGNED_KINDS,
    STANDARD_KINDS,
    UNSIGNED_KINDS,
    bases,
    canonical_literals,
    in_range_values,
    integer_kinds,
    invalid_bases,
    out_of_range_literals,
    render,
    whitespace_runs,
)

__all__ = [
    "C_SPACES",
    "SIGNED_KINDS",
    "STANDARD_KINDS",
    "UNSIGNED_KINDS",
    "bases",
    "canonical_literals",
    "in_range_values",
    "integer_kinds",
    "invalid_bases",
    "out_of_range_literals",
    "render",
    "whitespace_runs",
]
