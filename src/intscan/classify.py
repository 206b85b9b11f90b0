"""Character classification for integer scanning.

Pure, stateless predicates. Both operate on single characters from the
ASCII repertoire only: no locale, no Unicode digit or space categories.
None stands for end of input and is rejected by both.

Python 3.13+. Zero external dependencies.
"""

from intscan.constants import INVALID_DIGIT, MAX_BASE, MIN_BASE, SPACE_CHARACTERS

__all__ = ["digit_value", "is_space"]


def is_space(char: str | None) -> bool:
    """Check for C-locale whitespace.

    Args:
        char: Single character, or None at end of input

    Returns:
        True for HT, LF, VT, FF, CR (U+0009..U+000D) and SPACE (U+0020)

    Example:
        >>> is_space("\\v")
        True
        >>> is_space("\\u00a0")  # NO-BREAK SPACE is not C whitespace
        False
    """
    return char is not None and char in SPACE_CHARACTERS


def digit_value(char: str | None, base: int) -> int:
    """Map a character to its digit value.

    '0'-'9' map to 0-9 and letters map to 10-35 regardless of case.
    Characters that are not digits in any base map to INVALID_DIGIT.

    The caller compares the result against the effective base: a value
    >= base means "not a digit here, stop consuming".

    Args:
        char: Single character, or None at end of input
        base: Effective base

    Returns:
        Digit value if char is a digit valid for base, else INVALID_DIGIT.
        When base is outside [2, 36] every character maps to
        max(INVALID_DIGIT, base), so the result is never below base.

    Example:
        >>> digit_value("7", 8)
        7
        >>> digit_value("F", 16), digit_value("f", 16)
        (15, 15)
        >>> digit_value("8", 8) >= 8
        True
    """
    if not MIN_BASE <= base <= MAX_BASE:
        return max(INVALID_DIGIT, base)
    if char is None or len(char) != 1 or not char.isascii():
        return INVALID_DIGIT
    if "0" <= char <= "9":
        value = ord(char) - ord("0")
    else:
        lower = char.lower()
        if not "a" <= lower <= "z":
            return INVALID_DIGIT
        value = ord(lower) - ord("a") + 10
    return value if value < base else INVALID_DIGIT
