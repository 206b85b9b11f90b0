"""Diagnostic system for intscan errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    IntegerRangeError,
    IntScanError,
    InvalidBaseError,
    NoDigitsError,
    TrailingCharactersError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IntScanError",
    "IntegerRangeError",
    "InvalidBaseError",
    "NoDigitsError",
    "OutputFormat",
    "SourceSpan",
    "TrailingCharactersError",
]
