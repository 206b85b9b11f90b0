"""intscan - C-compatible textual integer conversion.

Converts text to fixed-width integers with the exact semantics of the C
strtol() family: whitespace skipping, optional sign, base detection from a
0/0x prefix, digits up to base 36, and saturation on overflow. One engine
serves every width and signedness through IntegerKind descriptors.

Public API:
    parse_integer - Convert an integer prefix, returns ParseResult
    IntegerParser - Parser bound to one IntegerKind and overflow strategy
    to_int - Whole-string conversion returning (value, errors)
    IntegerKind - Width/signedness descriptor (INT8 .. UINT64, C aliases)
    ParseStatus - OK, INVALID_CONFIGURATION, NO_DIGITS_CONSUMED, OUT_OF_RANGE

Exceptions:
    IntScanError - Base exception class
    InvalidBaseError - Base outside {0} and [2, 36]
    NoDigitsError - No digit found
    IntegerRangeError - Value does not fit the kind
    TrailingCharactersError - Text after the number (to_int only)

Submodules:
    intscan.libc - strtol/strtoul/... entry points returning (value, end)
    intscan.errstate - errno side channel (EINVAL, ERANGE)
    intscan.kinds - Standard kinds and C type aliases
    intscan.diagnostics - Diagnostic codes, templates and formatting
"""

from .convert import to_int
from .cursor import Cursor
from .diagnostics import (
    IntegerRangeError,
    IntScanError,
    InvalidBaseError,
    NoDigitsError,
    TrailingCharactersError,
)
from .engine import IntegerParser, get_parser, parse_integer
from .enums import OverflowStrategy, ParseStatus
from .kinds import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerKind,
    kind_by_name,
)
from .result import ParseConfig, ParseResult

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("intscan")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "Cursor",
    "IntScanError",
    "IntegerKind",
    "IntegerParser",
    "IntegerRangeError",
    "InvalidBaseError",
    "NoDigitsError",
    "OverflowStrategy",
    "ParseConfig",
    "ParseResult",
    "ParseStatus",
    "TrailingCharactersError",
    "__version__",
    "get_parser",
    "kind_by_name",
    "parse_integer",
    "to_int",
]
