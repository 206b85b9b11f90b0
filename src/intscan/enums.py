"""Enumerations for intscan type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParseStatus(StrEnum):
    """Outcome of a single integer parse.

    StrEnum provides automatic string conversion: str(ParseStatus.OK) == "ok"
    """

    OK = "ok"
    """At least one digit was converted and the value fits the kind."""

    INVALID_CONFIGURATION = "invalid_configuration"
    """Base outside {0} and [2, 36]; the input was not inspected."""

    NO_DIGITS_CONSUMED = "no_digits_consumed"
    """No valid digit after optional whitespace, sign and prefix."""

    OUT_OF_RANGE = "out_of_range"
    """Digits were converted but the magnitude does not fit; value is clamped."""


class OverflowStrategy(StrEnum):
    """How the digit loop detects that the next multiply-add would overflow.

    StrEnum provides automatic string conversion: str(OverflowStrategy.CUTOFF) == "cutoff"
    """

    CHECKED = "checked"
    """Modular multiply and add, each reporting whether it wrapped (unsigned only)."""

    CUTOFF = "cutoff"
    """Compare against a precomputed cutoff/cutlim pair before each multiply-add."""


__all__ = [
    "OverflowStrategy",
    "ParseStatus",
]
