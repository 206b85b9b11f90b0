"""Parser engine: text to fixed-width integer.

One algorithm body, bound to a width kind per IntegerParser instance:

    1. Reject a base outside {0} and [2, 36] without reading the input
    2. Skip C-locale whitespace
    3. Consume an optional '+' or '-'
    4. Detect the base from a '0' / '0x' prefix (base 0), or skip a '0x'
       prefix when base is 16
    5. Accumulate digits, asking the overflow detector before each step
    6. Apply the sign and clamp on overflow

The scan is a single forward pass with no backtracking, except that a '0x'
prefix with no hex digit after it is reported as the number 0, consuming
only the '0'.

Thread Safety:
    IntegerParser is immutable after construction and parse() keeps all
    state in locals, so one instance may be shared by any number of threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging

from intscan.classify import digit_value, is_space
from intscan.constants import AUTO_BASE
from intscan.cursor import Cursor, CursorInput
from intscan.enums import OverflowStrategy, ParseStatus
from intscan.errstate import EINVAL, ERANGE, set_errno
from intscan.kinds import INT64, IntegerKind
from intscan.overflow import make_detector, resolve_strategy
from intscan.result import ParseConfig, ParseResult

__all__ = ["IntegerParser", "get_parser", "parse_integer"]

logger = logging.getLogger(__name__)

_HEX_BASE = 16
_OCTAL_BASE = 8
_DECIMAL_BASE = 10


class IntegerParser:
    """strtol-style parser bound to one integer kind.

    The kind and the overflow strategy are fixed at construction, the
    analogue of compiling the C template once per integer type.

    Args:
        kind: Target integer kind
        strategy: Overflow strategy, or None for the process default.
            CHECKED is silently replaced by CUTOFF for signed kinds.

    Raises:
        TypeError: If kind is not an IntegerKind
        ValueError: If strategy names an unknown strategy

    Example:
        >>> from intscan.kinds import UINT32
        >>> parser = IntegerParser(UINT32)
        >>> result = parser.parse("99999999999999999999")
        >>> result.status, result.value
        (<ParseStatus.OUT_OF_RANGE: 'out_of_range'>, 4294967295)
    """

    __slots__ = ("_kind", "_strategy")

    def __init__(
        self,
        kind: IntegerKind,
        strategy: OverflowStrategy | str | None = None,
    ) -> None:
        if not isinstance(kind, IntegerKind):
            msg = f"kind must be IntegerKind, got {type(kind).__name__}"
            raise TypeError(msg)
        self._kind = kind
        self._strategy = resolve_strategy(kind, strategy)
        logger.debug(
            "IntegerParser for %s using %s overflow detection", kind.name, self._strategy
        )

    @property
    def kind(self) -> IntegerKind:
        """Target integer kind."""
        return self._kind

    @property
    def strategy(self) -> OverflowStrategy:
        """Resolved overflow strategy."""
        return self._strategy

    def __repr__(self) -> str:
        return f"IntegerParser(kind={self._kind.name!r}, strategy={self._strategy.value!r})"

    def parse(self, data: CursorInput, base: int = _DECIMAL_BASE) -> ParseResult:
        """Convert the integer at the start of data.

        Args:
            data: str, bytes (Latin-1 view) or a Cursor to start from
            base: 0 to detect from the prefix, or 2 through 36

        Returns:
            ParseResult; never raises for malformed text or a bad base value

        Raises:
            TypeError: If data or base has the wrong type

        Side Effects:
            Sets errno to EINVAL (invalid base) or ERANGE (clamped result).
        """
        kind = self._kind
        config = ParseConfig(base, kind)
        start = Cursor.of(data)

        if not config.has_valid_base:
            logger.debug("Rejected base %d for %s", base, kind.name)
            set_errno(EINVAL)
            return ParseResult(0, 0, ParseStatus.INVALID_CONFIGURATION, start, base, kind)

        cursor = start
        while is_space(cursor.peek()):
            cursor = cursor.advance()

        negative = False
        match cursor.peek():
            case "-":
                negative = True
                cursor = cursor.advance()
            case "+":
                cursor = cursor.advance()

        # Reported end when no digit follows; moves past the '0' of a '0x' prefix
        fallback = start
        effective_base = base
        if cursor.peek() == "0":
            if cursor.peek(1) in ("x", "X") and base in (AUTO_BASE, _HEX_BASE):
                effective_base = _HEX_BASE
                fallback = cursor.advance()
                cursor = cursor.advance(2)
            elif base == AUTO_BASE:
                effective_base = _OCTAL_BASE
        elif base == AUTO_BASE:
            effective_base = _DECIMAL_BASE

        detector = make_detector(self._strategy, kind, effective_base, negative=negative)
        value = 0
        any_digits = False
        overflow = False
        while (digit := digit_value(cursor.peek(), effective_base)) < effective_base:
            # After an overflow the scan continues only to find the end
            if not overflow:
                stepped = detector.step(value, digit)
                if stepped is None:
                    overflow = True
                else:
                    value = stepped
            any_digits = True
            cursor = cursor.advance()

        if not any_digits:
            consumed = fallback.pos - start.pos
            # A dangling '0x' still converted its '0'
            status = ParseStatus.OK if consumed else ParseStatus.NO_DIGITS_CONSUMED
            return ParseResult(0, consumed, status, fallback, base, kind)

        if overflow:
            value = kind.min_value if negative and kind.signed else kind.max_value
            logger.debug(
                "Clamped %r to %s boundary %d",
                start.slice_to(cursor.pos),
                kind.name,
                value,
            )
            set_errno(ERANGE)
            status = ParseStatus.OUT_OF_RANGE
        else:
            if negative:
                # Unsigned kinds negate modulo 2**bits, as C does for strtoul("-1")
                value = kind.wrap(-value)
            status = ParseStatus.OK

        return ParseResult(value, cursor.pos - start.pos, status, cursor, base, kind)

    __call__ = parse


@functools.lru_cache(maxsize=64)
def get_parser(
    kind: IntegerKind,
    strategy: OverflowStrategy | str | None = None,
) -> IntegerParser:
    """Get a shared IntegerParser for kind.

    Thread-safe via lru_cache internal locking; parsers are immutable.
    """
    return IntegerParser(kind, strategy)


def parse_integer(
    data: CursorInput,
    base: int = _DECIMAL_BASE,
    kind: IntegerKind = INT64,
    *,
    strategy: OverflowStrategy | str | None = None,
) -> ParseResult:
    """Convert the integer at the start of data into kind.

    Args:
        data: str, bytes (Latin-1 view) or a Cursor to start from
        base: 0 to detect from a 0/0x prefix, or 2 through 36
        kind: Target integer kind (default: INT64)
        strategy: Overflow strategy override (default: process default)

    Returns:
        ParseResult with value, consumed_count and status

    Example:
        >>> parse_integer("0x1A", base=0).value
        26
        >>> parse_integer("abc").status
        <ParseStatus.NO_DIGITS_CONSUMED: 'no_digits_consumed'>
        >>> parse_integer("12", base=37).status
        <ParseStatus.INVALID_CONFIGURATION: 'invalid_configuration'>
    """
    return get_parser(kind, strategy).parse(data, base)
