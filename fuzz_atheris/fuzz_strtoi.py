#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: strtoi - Integer Parser Engine
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# CRITICAL: DO NOT REMOVE THIS HEADER - REQUIRED FOR PLUGIN DISCOVERY
# FUZZ_PLUGIN_HEADER_END
"""Integer Parser Engine Fuzzer (Atheris).

Targets: intscan.engine (IntegerParser.parse), intscan.convert (to_int)

Differential oracle: every converted prefix is re-read with Python's int()
and the expected clamped or wrapped value is compared against the engine's
result for the target kind. Structural invariants are checked on every
input: value within the kind's range, consumed count within the input, and
errno consistent with the status.

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

# --- Dependency Checks ---
_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for the dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

if _atheris_mod is None:
    print("ERROR: atheris is required: uv sync --group atheris", file=sys.stderr)
    sys.exit(1)

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- Domain Metrics ---


@dataclass
class StrtoiMetrics:
    """Outcome counters for the integer fuzzer."""

    iterations: int = 0
    status_counts: dict[str, int] = field(default_factory=dict)
    pattern_coverage: dict[str, int] = field(default_factory=dict)


class StrtoiFuzzError(Exception):
    """Raised when the engine disagrees with the oracle or breaks an invariant."""


# --- Constants ---

_PATTERN_WEIGHTS: Sequence[tuple[str, int]] = (
    # Valid
    ("decimal", 8),
    ("signed", 7),
    ("hex_prefix", 7),
    ("octal_prefix", 6),
    ("explicit_base", 8),
    # Edge cases
    ("boundary", 8),
    ("dangling_prefix", 5),
    ("whitespace", 5),
    ("unicode_lookalikes", 5),
    ("very_long", 4),
    # Invalid
    ("malformed", 5),
    ("raw_text", 10),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

_metrics = StrtoiMetrics()

# --- Suppress logging and instrument imports ---
logging.getLogger("intscan").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["intscan"]):
    from intscan.convert import to_int
    from intscan.engine import IntegerParser
    from intscan.enums import OverflowStrategy, ParseStatus
    from intscan.errstate import EINVAL, ERANGE, clear_errno, get_errno
    from intscan.kinds import INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64

_KINDS = (INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64)

_PARSERS = tuple(
    IntegerParser(kind, strategy) for kind in _KINDS for strategy in OverflowStrategy
)


# --- Input Generation ---


def _render(value: int, base: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    out: list[str] = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        out.append(digits[digit])
    return sign + "".join(reversed(out))


def _generate_input(  # noqa: PLR0911
    fdp: atheris.FuzzedDataProvider,
    pattern_name: str,
    parser: IntegerParser,
) -> tuple[str, int]:
    """Generate (text, base) for a given pattern."""
    kind = parser.kind

    match pattern_name:
        case "decimal":
            return str(fdp.ConsumeIntInRange(0, 10**12)), 10

        case "signed":
            sign = fdp.PickValueInList(["+", "-"])
            return f"{sign}{fdp.ConsumeIntInRange(0, 10**20)}", 10

        case "hex_prefix":
            prefix = fdp.PickValueInList(["0x", "0X", "-0x", "+0X"])
            return f"{prefix}{fdp.ConsumeIntInRange(0, 2**70):x}", fdp.PickValueInList([0, 16])

        case "octal_prefix":
            return f"0{fdp.ConsumeIntInRange(0, 2**66):o}", 0

        case "explicit_base":
            base = fdp.ConsumeIntInRange(2, 36)
            return _render(fdp.ConsumeIntInRange(-(2**66), 2**66), base), base

        case "boundary":
            edge = fdp.PickValueInList([kind.min_value, kind.max_value])
            base = fdp.PickValueInList([2, 8, 10, 16, 36])
            return _render(edge + fdp.ConsumeIntInRange(-2, 2), base), base

        case "dangling_prefix":
            return fdp.PickValueInList(["0x", " -0x", "0xg", "+0X ", "0x-1"]), 0

        case "whitespace":
            spaces = "".join(fdp.PickValueInList(list("\t\n\v\f\r ")) for _ in range(4))
            return f"{spaces}{fdp.ConsumeIntInRange(-999, 999)}{spaces}", 0

        case "unicode_lookalikes":
            return fdp.PickValueInList(
                ["\u00a012", "\uff11\uff12", "\u0663", "1\u200b2", "\u212a", "\u0131"]
            ), 36

        case "very_long":
            return "9" * fdp.ConsumeIntInRange(20, 2000), 10

        case "malformed":
            text = fdp.PickValueInList(["", "+", "-", "+-1", "--1", "0x0x1", "1_000", "x"])
            return text, fdp.ConsumeIntInRange(-2, 40)

        case _:
            return fdp.ConsumeUnicode(fdp.ConsumeIntInRange(0, 64)), fdp.ConsumeIntInRange(
                -2, 40
            )


# --- Oracle ---


def _oracle_base(text: str, base: int) -> int:
    if base != 0:
        return base
    unsigned = text.lstrip("+-")
    if unsigned[:2] in ("0x", "0X"):
        return 16
    return 8 if unsigned.startswith("0") else 10


def _check(parser: IntegerParser, text: str, base: int) -> None:
    kind = parser.kind
    clear_errno()
    result = parser.parse(text, base)
    _metrics.status_counts[result.status.value] = (
        _metrics.status_counts.get(result.status.value, 0) + 1
    )

    if not kind.contains(result.value):
        msg = f"{parser!r}: value {result.value} outside range for {text!r}"
        raise StrtoiFuzzError(msg)
    if not 0 <= result.consumed_count <= len(text):
        msg = f"{parser!r}: consumed {result.consumed_count} for {text!r}"
        raise StrtoiFuzzError(msg)

    match result.status:
        case ParseStatus.INVALID_CONFIGURATION:
            if get_errno() != EINVAL or result.consumed_count:
                msg = f"{parser!r}: bad invalid-base result for base {base}"
                raise StrtoiFuzzError(msg)
            return
        case ParseStatus.NO_DIGITS_CONSUMED:
            if result.value or result.consumed_count:
                msg = f"{parser!r}: no-digits result carries data for {text!r}"
                raise StrtoiFuzzError(msg)
            return
        case _:
            pass

    # Differential check: int() on the consumed text
    consumed = result.text
    magnitude = abs(int(consumed, _oracle_base(consumed, base)))
    negative = consumed.startswith("-")
    if kind.signed:
        exact = -magnitude if negative else magnitude
        expected = kind.clamp(exact)
        clamped = expected != exact
    else:
        clamped = magnitude > kind.max_value
        expected = kind.max_value if clamped else kind.wrap(-magnitude if negative else magnitude)

    if result.value != expected:
        msg = f"{parser!r}: {text!r} base {base} gave {result.value}, expected {expected}"
        raise StrtoiFuzzError(msg)
    if clamped != (result.status is ParseStatus.OUT_OF_RANGE):
        msg = f"{parser!r}: status {result.status} disagrees with oracle for {text!r}"
        raise StrtoiFuzzError(msg)
    if clamped and get_errno() != ERANGE:
        msg = f"{parser!r}: ERANGE not set for {text!r}"
        raise StrtoiFuzzError(msg)


# --- Main Entry Point ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: differential check of one generated input."""
    _metrics.iterations += 1
    fdp = atheris.FuzzedDataProvider(data)

    # Round-robin pattern selection (immune to coverage-guided bias)
    pattern_name = _PATTERN_SCHEDULE[_metrics.iterations % len(_PATTERN_SCHEDULE)]
    _metrics.pattern_coverage[pattern_name] = _metrics.pattern_coverage.get(pattern_name, 0) + 1

    parser = _PARSERS[fdp.ConsumeIntInRange(0, len(_PARSERS) - 1)]
    text, base = _generate_input(fdp, pattern_name, parser)

    _check(parser, text, base)

    # bytes input is the Latin-1 view of the same text
    encoded = text.encode("latin-1", errors="replace")
    from_bytes = parser.parse(encoded, base)
    from_text = parser.parse(encoded.decode("latin-1"), base)
    if (from_bytes.value, from_bytes.consumed_count) != (from_text.value, from_text.consumed_count):
        msg = f"{parser!r}: bytes and text disagree for {encoded!r}"
        raise StrtoiFuzzError(msg)

    # Whole-string conversion reports, never raises
    value, errors = to_int(text, base, parser.kind)
    if (value is None) == (not errors):
        msg = f"to_int({text!r}) returned {value!r} with {len(errors)} errors"
        raise StrtoiFuzzError(msg)


def main() -> None:
    """Run the integer parser fuzzer with CLI support."""
    arg_parser = argparse.ArgumentParser(
        description="Integer parser fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = arg_parser.parse_known_args()

    # Inject -rss_limit_mb default if not already specified
    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    # Reconstruct sys.argv for Atheris
    sys.argv = [sys.argv[0], *remaining]

    print("Integer Parser Engine Fuzzer (Atheris)")
    print("Target:   intscan.engine (IntegerParser.parse)")
    print(f"Parsers:  {len(_PARSERS)}")
    print(f"Patterns: {len(_PATTERN_WEIGHTS)} ({len(_PATTERN_SCHEDULE)} weighted slots)")

    atheris.Setup(sys.argv, test_one_input)
    try:
        atheris.Fuzz()
    finally:
        print(f"Iterations: {_metrics.iterations}")
        print(f"Statuses:   {_metrics.status_counts}")


if __name__ == "__main__":
    main()
