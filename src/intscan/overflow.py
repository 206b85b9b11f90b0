"""Overflow detection for the digit accumulation loop.

Two interchangeable strategies answer one question: does value * base + digit
still fit the target kind?

- CutoffDetector precomputes, once per parse, the largest value that may
  still be multiplied (cutoff) and the largest digit allowed on top of it
  (cutlim). The comparison happens BEFORE the multiply-add, so the check
  itself never produces an out-of-range intermediate.
- CheckedDetector performs the multiply and the add in the kind's unsigned
  modular arithmetic and reports whether either step wrapped. It is only
  used for unsigned kinds: a signed negative range is one larger than the
  positive one, which an unsigned wrap test cannot express.

The strategy is resolved once, when an IntegerParser is created. A parse
never switches strategies midway.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from intscan.constants import DEFAULT_OVERFLOW_STRATEGY, OVERFLOW_STRATEGY_ENV
from intscan.enums import OverflowStrategy

if TYPE_CHECKING:
    from intscan.kinds import IntegerKind

__all__ = [
    "CheckedDetector",
    "CutoffDetector",
    "OverflowDetector",
    "default_strategy",
    "make_detector",
    "resolve_strategy",
]

logger = logging.getLogger(__name__)


class OverflowDetector(Protocol):
    """Accumulate-and-check capability shared by both strategies."""

    def step(self, value: int, digit: int) -> int | None:
        """Return value * base + digit, or None if the result would not fit."""
        ...


@dataclass(frozen=True, slots=True)
class CutoffDetector:
    """Cutoff/cutlim comparison before each multiply-add.

    Attributes:
        base: Effective base
        cutoff: Largest accumulator value that may be multiplied by base
        cutlim: Largest digit that may be added when value == cutoff

    Example:
        >>> from intscan.kinds import INT8
        >>> detector = CutoffDetector.for_parse(INT8, 10, negative=True)
        >>> detector.cutoff, detector.cutlim
        (12, 8)
        >>> detector.step(12, 8)
        128
        >>> detector.step(12, 9) is None
        True
    """

    base: int
    cutoff: int
    cutlim: int

    @classmethod
    def for_parse(cls, kind: IntegerKind, base: int, *, negative: bool) -> CutoffDetector:
        """Precompute cutoff and cutlim for one parse.

        A negative parse into a signed kind may reach |min|, one more than max.
        Unsigned kinds always accumulate up to max; the sign is applied later
        by modular negation.
        """
        limit = -kind.min_value if kind.signed and negative else kind.max_value
        cutoff, cutlim = divmod(limit, base)
        return cls(base=base, cutoff=cutoff, cutlim=cutlim)

    def step(self, value: int, digit: int) -> int | None:
        if value > self.cutoff or (value == self.cutoff and digit > self.cutlim):
            return None
        return value * self.base + digit


@dataclass(frozen=True, slots=True)
class CheckedDetector:
    """Wrap-reporting multiply and add in unsigned modular arithmetic.

    Attributes:
        base: Effective base
        modulus: 2 ** bits of the target kind

    Example:
        >>> from intscan.kinds import UINT8
        >>> detector = CheckedDetector.for_parse(UINT8, 10)
        >>> detector.step(25, 5)
        255
        >>> detector.step(25, 6) is None
        True
    """

    base: int
    modulus: int

    @classmethod
    def for_parse(cls, kind: IntegerKind, base: int) -> CheckedDetector:
        """Bind the base and width for one parse.

        Raises:
            ValueError: If kind is signed
        """
        if kind.signed:
            msg = f"Checked overflow detection requires an unsigned kind, got {kind.name}"
            raise ValueError(msg)
        return cls(base=base, modulus=kind.modulus)

    def step(self, value: int, digit: int) -> int | None:
        product, wrapped_mul = self._wrapping(value * self.base)
        total, wrapped_add = self._wrapping(product + digit)
        if wrapped_mul or wrapped_add:
            return None
        return total

    def _wrapping(self, result: int) -> tuple[int, bool]:
        return result % self.modulus, result >= self.modulus


def resolve_strategy(
    kind: IntegerKind,
    requested: OverflowStrategy | str | None = None,
) -> OverflowStrategy:
    """Pick the strategy a parser for kind will use.

    Args:
        kind: Target integer kind
        requested: Explicit strategy (name or member), or None for the default

    Returns:
        requested (or the default), except that signed kinds always get CUTOFF

    Raises:
        ValueError: If requested names an unknown strategy
    """
    strategy = default_strategy() if requested is None else OverflowStrategy(requested)
    if strategy is OverflowStrategy.CHECKED and kind.signed:
        return OverflowStrategy.CUTOFF
    return strategy


def make_detector(
    strategy: OverflowStrategy,
    kind: IntegerKind,
    base: int,
    *,
    negative: bool,
) -> OverflowDetector:
    """Instantiate the detector for one parse."""
    match strategy:
        case OverflowStrategy.CHECKED:
            return CheckedDetector.for_parse(kind, base)
        case OverflowStrategy.CUTOFF:
            return CutoffDetector.for_parse(kind, base, negative=negative)


def _load_default_strategy() -> OverflowStrategy:
    override = os.environ.get(OVERFLOW_STRATEGY_ENV)
    if override:
        try:
            return OverflowStrategy(override.strip().lower())
        except ValueError:
            logger.warning(
                "Ignoring %s=%r: expected one of %s",
                OVERFLOW_STRATEGY_ENV,
                override,
                ", ".join(s.value for s in OverflowStrategy),
            )
    return OverflowStrategy(DEFAULT_OVERFLOW_STRATEGY)


_DEFAULT_STRATEGY: OverflowStrategy = _load_default_strategy()


def default_strategy() -> OverflowStrategy:
    """Process-wide default strategy (fixed at import time)."""
    return _DEFAULT_STRATEGY
