"""C-compatible entry points.

Thin per-kind wrappers around a shared IntegerParser. Each returns the pair
C code gets from strtol(): the converted value and the end offset (what
*endptr would point at), and reports failures through errno.

    >>> from intscan.errstate import clear_errno, get_errno
    >>> clear_errno()
    >>> strtoul("-1", 10)
    (18446744073709551615, 2)
    >>> strtol("  42abc", 10)
    (42, 4)
    >>> strtol("12", 1), get_errno() == EINVAL
    ((0, 0), True)

Kinds follow the LP64 data model: long, long long and intmax_t are 64-bit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import Protocol

from intscan.cursor import CursorInput
from intscan.engine import get_parser
from intscan.errstate import EINVAL, ERANGE
from intscan.kinds import (
    INT8,
    INT16,
    INT32,
    INT64,
    INTMAX,
    LONG,
    LONGLONG,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINTMAX,
    ULONG,
    ULONGLONG,
    IntegerKind,
)

__all__ = [
    "EINVAL",
    "ERANGE",
    "strtoi8",
    "strtoi16",
    "strtoi32",
    "strtoi64",
    "strtoimax",
    "strtol",
    "strtoll",
    "strtou8",
    "strtou16",
    "strtou32",
    "strtou64",
    "strtoul",
    "strtoull",
    "strtoumax",
]


class StrtoiFunction(Protocol):
    """Signature shared by every entry point in this module."""

    def __call__(self, text: CursorInput, base: int = 10) -> tuple[int, int]: ...


def _entry_point(name: str, kind: IntegerKind, c_type: str) -> StrtoiFunction:
    parser = get_parser(kind)

    def strtoi(text: CursorInput, base: int = 10) -> tuple[int, int]:
        result = parser.parse(text, base)
        return result.value, result.end

    strtoi.__name__ = name
    strtoi.__qualname__ = name
    strtoi.__doc__ = (
        f"Convert the start of text to {c_type} ({kind.name}).\n\n"
        "Returns:\n"
        "    (value, end) where end is the offset of the first unconsumed\n"
        "    character, or the start offset if no digits were converted\n\n"
        "Side Effects:\n"
        "    errno = EINVAL for an invalid base, ERANGE for a clamped value\n"
    )
    return strtoi


strtol = _entry_point("strtol", LONG, "long")
strtoul = _entry_point("strtoul", ULONG, "unsigned long")
strtoll = _entry_point("strtoll", LONGLONG, "long long")
strtoull = _entry_point("strtoull", ULONGLONG, "unsigned long long")
strtoimax = _entry_point("strtoimax", INTMAX, "intmax_t")
strtoumax = _entry_point("strtoumax", UINTMAX, "uintmax_t")

strtoi8 = _entry_point("strtoi8", INT8, "int8_t")
strtoi16 = _entry_point("strtoi16", INT16, "int16_t")
strtoi32 = _entry_point("strtoi32", INT32, "int32_t")
strtoi64 = _entry_point("strtoi64", INT64, "int64_t")
strtou8 = _entry_point("strtou8", UINT8, "uint8_t")
strtou16 = _entry_point("strtou16", UINT16, "uint16_t")
strtou32 = _entry_point("strtou32", UINT32, "uint32_t")
strtou64 = _entry_point("strtou64", UINT64, "uint64_t")
