"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

# Longest input excerpt embedded in a message; longer inputs are elided.
_MAX_EXCERPT = 40


def _excerpt(value: str) -> str:
    if len(value) > _MAX_EXCERPT:
        return value[:_MAX_EXCERPT] + "..."
    return value


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent across the engine, the libc
    entry points and the whole-string conversion helpers.
    """

    @staticmethod
    def invalid_base(base: int) -> Diagnostic:
        """Base argument is neither 0 nor in [2, 36].

        Args:
            base: The rejected base

        Returns:
            Diagnostic for INVALID_BASE
        """
        msg = f"Invalid base {base}: expected 0 or an integer from 2 to 36"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BASE,
            message=msg,
            span=None,
            hint="Pass base=0 to detect the base from a 0/0x prefix",
            base=base,
        )

    @staticmethod
    def no_digits(input_value: str, base: int, span: SourceSpan | None = None) -> Diagnostic:
        """No digit valid for the base was found.

        Args:
            input_value: The text that was scanned
            base: The requested base (0 for auto-detection)
            span: Location where scanning began

        Returns:
            Diagnostic for NO_DIGITS
        """
        excerpt = _excerpt(input_value)
        base_desc = "auto-detected base" if base == 0 else f"base {base}"
        msg = f"No digits found in '{excerpt}' for {base_desc}"
        return Diagnostic(
            code=DiagnosticCode.NO_DIGITS,
            message=msg,
            span=span,
            hint="The number may start with whitespace and a sign, then digits",
            input_value=excerpt,
            base=base,
        )

    @staticmethod
    def out_of_range(
        input_value: str,
        kind_name: str,
        clamped: int,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Converted magnitude does not fit the target kind.

        Args:
            input_value: The text that was scanned
            kind_name: Name of the target integer kind
            clamped: Boundary value substituted for the result
            span: Location of the number in the input

        Returns:
            Diagnostic for OUT_OF_RANGE
        """
        excerpt = _excerpt(input_value)
        msg = f"Value '{excerpt}' does not fit in {kind_name}; clamped to {clamped}"
        return Diagnostic(
            code=DiagnosticCode.OUT_OF_RANGE,
            message=msg,
            span=span,
            hint="Use a wider integer kind or check the input",
            input_value=excerpt,
            kind_name=kind_name,
        )

    @staticmethod
    def trailing_characters(
        input_value: str,
        position: int,
        span: SourceSpan | None = None,
    ) -> Diagnostic:
        """Characters remain after the converted number.

        Args:
            input_value: The full text
            position: Offset of the first unconsumed character
            span: Location of the unconsumed tail

        Returns:
            Diagnostic for TRAILING_CHARACTERS
        """
        excerpt = _excerpt(input_value)
        tail = _excerpt(input_value[position:])
        msg = f"Unexpected characters '{tail}' at position {position} in '{excerpt}'"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_CHARACTERS,
            message=msg,
            span=span,
            hint="Remove the trailing text or use parse_integer() to read a prefix",
            input_value=excerpt,
        )
