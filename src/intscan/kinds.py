"""Integer kind descriptors.

An IntegerKind describes one concrete fixed-width representation (bit width
plus signedness). The parser engine is generic over this descriptor: each
IntegerParser binds one kind, so the algorithm body is shared by every
width instead of being duplicated.

Standard kinds:
    INT8 .. INT64, UINT8 .. UINT64

C type aliases (LP64 data model):
    SHORT/USHORT = 16-bit, INT/UINT = 32-bit,
    LONG/ULONG, LONGLONG/ULONGLONG, INTMAX/UINTMAX = 64-bit

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INTMAX",
    "KINDS",
    "LONG",
    "LONGLONG",
    "SHORT",
    "UINT",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINTMAX",
    "ULONG",
    "ULONGLONG",
    "USHORT",
    "IntegerKind",
    "kind_by_name",
]


@dataclass(frozen=True, slots=True)
class IntegerKind:
    """Fixed-width integer representation.

    Attributes:
        name: Display name used in diagnostics and logs (e.g. "uint32")
        bits: Width in bits (>= 1)
        signed: True for two's complement, False for unsigned

    Example:
        >>> kind = IntegerKind("int16", 16, signed=True)
        >>> kind.min_value, kind.max_value
        (-32768, 32767)
        >>> kind.unsigned.max_value
        65535
        >>> kind.wrap(40000)
        -25536
    """

    name: str
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        """Validate the width.

        Raises:
            TypeError: If bits is not an int
            ValueError: If bits is less than 1
        """
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            msg = f"IntegerKind.bits must be int, got {type(self.bits).__name__}"
            raise TypeError(msg)
        if self.bits < 1:
            msg = f"IntegerKind.bits must be >= 1, got {self.bits}"
            raise ValueError(msg)

    @property
    def modulus(self) -> int:
        """Number of distinct values, 2 ** bits."""
        return 1 << self.bits

    @property
    def min_value(self) -> int:
        """Smallest representable value."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Largest representable value."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    @property
    def unsigned(self) -> IntegerKind:
        """Unsigned counterpart of the same width (self if already unsigned)."""
        if not self.signed:
            return self
        return IntegerKind(f"u{self.name}", self.bits, signed=False)

    def contains(self, value: int) -> bool:
        """True if value is representable without clamping or wrapping."""
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce value modulo 2 ** bits into this kind's range.

        Mirrors C conversion to an integer type of this width.
        """
        value %= self.modulus
        if self.signed and value > self.max_value:
            value -= self.modulus
        return value

    def clamp(self, value: int) -> int:
        """Saturate value to [min_value, max_value]."""
        return max(self.min_value, min(self.max_value, value))

    def __str__(self) -> str:
        return self.name


INT8 = IntegerKind("int8", 8, signed=True)
INT16 = IntegerKind("int16", 16, signed=True)
INT32 = IntegerKind("int32", 32, signed=True)
INT64 = IntegerKind("int64", 64, signed=True)
UINT8 = IntegerKind("uint8", 8, signed=False)
UINT16 = IntegerKind("uint16", 16, signed=False)
UINT32 = IntegerKind("uint32", 32, signed=False)
UINT64 = IntegerKind("uint64", 64, signed=False)

# C types under LP64 (Linux, macOS, BSD on 64-bit targets)
SHORT = INT16
USHORT = UINT16
INT = INT32
UINT = UINT32
LONG = INT64
ULONG = UINT64
LONGLONG = INT64
ULONGLONG = UINT64
INTMAX = INT64
UINTMAX = UINT64

KINDS: Mapping[str, IntegerKind] = MappingProxyType({
    "int8": INT8,
    "int16": INT16,
    "int32": INT32,
    "int64": INT64,
    "uint8": UINT8,
    "uint16": UINT16,
    "uint32": UINT32,
    "uint64": UINT64,
    "short": SHORT,
    "ushort": USHORT,
    "int": INT,
    "uint": UINT,
    "long": LONG,
    "ulong": ULONG,
    "longlong": LONGLONG,
    "ulonglong": ULONGLONG,
    "intmax": INTMAX,
    "uintmax": UINTMAX,
})
"""Standard kinds and C aliases by lowercase name."""


def kind_by_name(name: str) -> IntegerKind:
    """Look up a standard kind by name (case-insensitive).

    Raises:
        ValueError: If name is not a known kind
    """
    try:
        return KINDS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(KINDS))
        msg = f"Unknown integer kind '{name}' (known: {known})"
        raise ValueError(msg) from None
