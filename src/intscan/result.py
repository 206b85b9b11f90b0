"""Parse configuration and result types.

ParseConfig is the validated (base, kind) pair for one call. ParseResult is
the fully-defined outcome of one call: it always carries a usable value, the
number of characters consumed and a status. Failures are data, not
exceptions; diagnostic, error and unwrap() turn them into structured
diagnostics or exceptions on demand.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from intscan.constants import AUTO_BASE, MAX_BASE, MIN_BASE
from intscan.cursor import Cursor
from intscan.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    IntegerRangeError,
    IntScanError,
    InvalidBaseError,
    NoDigitsError,
    SourceSpan,
)
from intscan.enums import ParseStatus
from intscan.kinds import IntegerKind

__all__ = ["ParseConfig", "ParseResult"]


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Validated arguments of one parse call.

    Type errors are programming mistakes and raise immediately. A base
    outside {0} and [2, 36] is accepted here and reported by the engine as
    ParseStatus.INVALID_CONFIGURATION.

    Attributes:
        base: 0 for auto-detection, or an explicit base
        kind: Target integer kind
    """

    base: int
    kind: IntegerKind

    def __post_init__(self) -> None:
        """Validate argument types.

        Raises:
            TypeError: If base is not an int or kind is not an IntegerKind
        """
        if not isinstance(self.base, int) or isinstance(self.base, bool):
            msg = f"base must be int, got {type(self.base).__name__}"
            raise TypeError(msg)
        if not isinstance(self.kind, IntegerKind):
            msg = f"kind must be IntegerKind, got {type(self.kind).__name__}"
            raise TypeError(msg)

    @property
    def has_valid_base(self) -> bool:
        """True for base 0 (auto-detect) or 2 through 36."""
        return self.base == AUTO_BASE or MIN_BASE <= self.base <= MAX_BASE


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of one parse.

    Invariants:
        - status OUT_OF_RANGE: value is kind.max_value, or kind.min_value
          when a signed kind was parsed with a leading '-'
        - status INVALID_CONFIGURATION or NO_DIGITS_CONSUMED: value is 0 and
          consumed_count is 0
        - cursor.pos == start position + consumed_count

    Attributes:
        value: Converted value, always within kind's range
        consumed_count: Characters consumed, through the last valid digit
        status: Outcome classification
        cursor: Position of the first unconsumed character
        base: Base requested by the caller (0 if auto-detected)
        kind: Target integer kind

    Example:
        >>> from intscan import parse_integer
        >>> result = parse_integer("  -0777", base=0)
        >>> result.value, result.consumed_count, result.status
        (-511, 7, <ParseStatus.OK: 'ok'>)
    """

    value: int
    consumed_count: int
    status: ParseStatus
    cursor: Cursor
    base: int
    kind: IntegerKind

    @property
    def ok(self) -> bool:
        """True if status is OK."""
        return self.status is ParseStatus.OK

    @property
    def end(self) -> int:
        """Absolute offset of the first unconsumed character (C's endptr)."""
        return self.cursor.pos

    @property
    def start(self) -> int:
        """Absolute offset where the parse began."""
        return self.cursor.pos - self.consumed_count

    @property
    def text(self) -> str:
        """Consumed text without leading whitespace."""
        return self.cursor.source[self.start : self.end].lstrip()

    @property
    def diagnostic(self) -> Diagnostic | None:
        """Structured diagnostic for a failed status (None if OK)."""
        match self.status:
            case ParseStatus.OK:
                return None
            case ParseStatus.INVALID_CONFIGURATION:
                return ErrorTemplate.invalid_base(self.base)
            case ParseStatus.NO_DIGITS_CONSUMED:
                remaining = self.cursor.source[self.start :]
                return ErrorTemplate.no_digits(remaining, self.base, self._span())
            case ParseStatus.OUT_OF_RANGE:
                return ErrorTemplate.out_of_range(
                    self.text, self.kind.name, self.value, self._span()
                )

    @property
    def error(self) -> IntScanError | None:
        """Exception describing a failed status (None if OK). Not raised."""
        diagnostic = self.diagnostic
        if diagnostic is None:
            return None
        input_value = self.cursor.source[self.start :]
        match self.status:
            case ParseStatus.INVALID_CONFIGURATION:
                return InvalidBaseError(diagnostic, input_value=input_value)
            case ParseStatus.OUT_OF_RANGE:
                return IntegerRangeError(
                    diagnostic, input_value=input_value, clamped_value=self.value
                )
            case _:
                return NoDigitsError(diagnostic, input_value=input_value)

    def unwrap(self) -> int:
        """Return value if OK, otherwise raise the matching IntScanError.

        Raises:
            InvalidBaseError: Status INVALID_CONFIGURATION
            NoDigitsError: Status NO_DIGITS_CONSUMED
            IntegerRangeError: Status OUT_OF_RANGE
        """
        error = self.error
        if error is not None:
            raise error
        return self.value

    def _span(self) -> SourceSpan:
        line, column = Cursor(self.cursor.source, self.start).compute_line_col()
        return SourceSpan(start=self.start, end=self.end, line=line, column=column)
