"""intscan exception hierarchy with structured diagnostics.

The parser engine never raises these for malformed input; it reports a
ParseStatus instead. Exceptions are built on demand by ParseResult.error,
raised by ParseResult.unwrap(), and collected by the conversion helpers.

Hierarchy:
    IntScanError (base)
    ├─ InvalidBaseError (also ValueError)
    ├─ NoDigitsError (also ValueError)
    ├─ TrailingCharactersError (also ValueError)
    └─ IntegerRangeError (also OverflowError)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "IntScanError",
    "IntegerRangeError",
    "InvalidBaseError",
    "NoDigitsError",
    "TrailingCharactersError",
]


class IntScanError(Exception):
    """Base exception for all intscan errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        input_value: The text that failed to convert
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize IntScanError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text that failed to convert
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)
        self.input_value = input_value


class InvalidBaseError(IntScanError, ValueError):
    """Base argument outside {0} and [2, 36].

    A caller mistake rather than malformed input; the text is not scanned.
    """


class NoDigitsError(IntScanError, ValueError):
    """No digit valid for the effective base was found."""


class TrailingCharactersError(IntScanError, ValueError):
    """Whole-string conversion found text after the number.

    Attributes:
        position: Offset of the first unconsumed character
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        position: int = 0,
    ) -> None:
        super().__init__(message, input_value=input_value)
        self.position = position


class IntegerRangeError(IntScanError, OverflowError):
    """Converted magnitude does not fit the requested kind.

    Attributes:
        clamped_value: Boundary value the engine substituted for the result
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        clamped_value: int = 0,
    ) -> None:
        super().__init__(message, input_value=input_value)
        self.clamped_value = clamped_value
