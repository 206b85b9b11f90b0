"""Shared constants for intscan.

This module provides centralized configuration constants used across the
classifier, overflow detector and parser engine. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Base limits: Accepted numeric bases
- Digit classification: Sentinel values and whitespace set
- Overflow strategy: Process-wide default and its environment override

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base limits
    "AUTO_BASE",
    "MIN_BASE",
    "MAX_BASE",
    # Digit classification
    "INVALID_DIGIT",
    "SPACE_CHARACTERS",
    # Overflow strategy
    "DEFAULT_OVERFLOW_STRATEGY",
    "OVERFLOW_STRATEGY_ENV",
]

# ============================================================================
# BASE LIMITS
# ============================================================================

# Base 0 asks the engine to detect the base from the literal's prefix:
# "0x"/"0X" selects 16, a leading "0" selects 8, anything else selects 10.
AUTO_BASE: int = 0

# Inclusive range of explicit bases. Digits beyond 9 are the letters a-z.
MIN_BASE: int = 2
MAX_BASE: int = 36

# ============================================================================
# DIGIT CLASSIFICATION
# ============================================================================

# Returned by digit_value() for characters that are not digits in any base.
# Always >= MAX_BASE, so a single "digit >= base" test rejects it. For an
# invalid base above it, digit_value() returns the base itself.
INVALID_DIGIT: int = 255

# C isspace() in the "C" locale: HT, LF, VT, FF, CR and SPACE.
SPACE_CHARACTERS: frozenset[str] = frozenset("\t\n\v\f\r ")

# ============================================================================
# OVERFLOW STRATEGY
# ============================================================================

# Strategy used when a parser is created without an explicit choice.
# "checked" only applies to unsigned kinds; signed kinds always use "cutoff".
DEFAULT_OVERFLOW_STRATEGY: str = "checked"

# Environment variable consulted once, at import of intscan.overflow.
OVERFLOW_STRATEGY_ENV: str = "INTSCAN_OVERFLOW_STRATEGY"
