"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (caller passed a bad argument)
        2000-2999: Input errors (text could not be converted as requested)
    """

    # Configuration errors (1000-1999)
    INVALID_BASE = 1001

    # Input errors (2000-2999)
    NO_DIGITS = 2001
    OUT_OF_RANGE = 2002
    TRAILING_CHARACTERS = 2003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Input location for error reporting.

    Note:
        Offsets count characters for str input and bytes for bytes input
        (bytes are decoded as Latin-1, one character per byte).

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Input location (None when the input was never inspected)
        hint: Suggestion for fixing the error
        input_value: The text that was being converted (may be truncated)
        base: Base requested by the caller
        kind_name: Name of the target integer kind
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    input_value: str | None = None
    base: int | None = None
    kind_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[OUT_OF_RANGE]: Value '99999999999' does not fit in uint32; clamped to 4294967295
              --> line 1, column 1
              = kind: uint32
              = help: Use a wider integer kind or check the input

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
