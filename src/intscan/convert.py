"""Whole-string integer conversion.

- to_int() returns tuple[int | None, tuple[IntScanError, ...]]
- Conversion errors are returned in the tuple, never raised
- The whole text must be a single integer (optionally space-padded)

Use parse_integer() instead to read an integer prefix and learn where it
ended.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from intscan.classify import is_space
from intscan.cursor import Cursor
from intscan.diagnostics import (
    ErrorTemplate,
    IntScanError,
    NoDigitsError,
    SourceSpan,
    TrailingCharactersError,
)
from intscan.engine import parse_integer
from intscan.enums import ParseStatus
from intscan.kinds import INT64, IntegerKind

__all__ = ["to_int"]


def to_int(
    value: str | bytes | bytearray,
    base: int = 10,
    kind: IntegerKind = INT64,
    *,
    allow_surrounding_space: bool = True,
) -> tuple[int | None, tuple[IntScanError, ...]]:
    """Convert text that must consist of exactly one integer.

    Args:
        value: Text to convert (bytes are read as Latin-1)
        base: 0 to detect from a 0/0x prefix, or 2 through 36
        kind: Target integer kind (default: INT64)
        allow_surrounding_space: Accept C whitespace before and after the number

    Returns:
        Tuple of (result, errors):
        - result: Converted int, or None if conversion failed
        - errors: Tuple of IntScanError (empty tuple on success)

    Raises:
        TypeError: If value, base or kind has the wrong type

    Examples:
        >>> to_int(" 0x1f ", base=0)
        (31, ())
        >>> result, errors = to_int("12abc")
        >>> result, type(errors[0]).__name__
        (None, 'TrailingCharactersError')
        >>> from intscan.kinds import UINT8
        >>> result, errors = to_int("300", kind=UINT8)
        >>> result, errors[0].clamped_value
        (None, 255)
    """
    cursor = Cursor.of(value)
    text = cursor.source

    result = parse_integer(cursor, base, kind)
    error = result.error
    # A bad base is reported before anything about the text itself
    if result.status is ParseStatus.INVALID_CONFIGURATION and error is not None:
        return (None, (error,))

    if not allow_surrounding_space and is_space(cursor.peek()):
        span = SourceSpan(start=0, end=0, line=1, column=1)
        diagnostic = ErrorTemplate.no_digits(text, base, span)
        return (None, (NoDigitsError(diagnostic, input_value=text),))

    if error is not None:
        return (None, (error,))

    end = result.cursor
    if allow_surrounding_space:
        while is_space(end.peek()):
            end = end.advance()

    if not end.is_eof:
        line, column = end.compute_line_col()
        span = SourceSpan(start=end.pos, end=len(text), line=line, column=column)
        diagnostic = ErrorTemplate.trailing_characters(text, end.pos, span)
        error = TrailingCharactersError(diagnostic, input_value=text, position=end.pos)
        return (None, (error,))

    return (result.value, ())
