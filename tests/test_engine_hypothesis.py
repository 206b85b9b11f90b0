"""Property-based tests for the parser engine.

Properties:
    - Canonical renderings of in-range values convert back exactly
    - Leading whitespace and an explicit '+' never change the value
    - Out-of-range literals clamp to the crossed boundary
    - Results agree with int() on text int() accepts
    - consumed_count and cursor position stay consistent
"""

from __future__ import annotations

import string

from hypothesis import assume, event, given
from hypothesis import strategies as st

from intscan.engine import IntegerParser, parse_integer
from intscan.enums import OverflowStrategy, ParseStatus
from intscan.kinds import INT64, UINT64, IntegerKind
from tests.strategies import (
    bases,
    canonical_literals,
    integer_kinds,
    invalid_bases,
    out_of_range_literals,
    render,
    whitespace_runs,
)


class TestRoundTrip:
    """render() then parse() is the identity on in-range values."""

    @given(literal=canonical_literals())
    def test_canonical_literal(self, literal: tuple[str, int, int, IntegerKind]) -> None:
        text, value, base, kind = literal
        result = parse_integer(text, base, kind)

        assert result.status is ParseStatus.OK
        assert result.value == value
        assert result.consumed_count == len(text)

    @given(literal=canonical_literals(), strategy=st.sampled_from(list(OverflowStrategy)))
    def test_strategy_does_not_change_result(
        self,
        literal: tuple[str, int, int, IntegerKind],
        strategy: OverflowStrategy,
    ) -> None:
        text, _, base, kind = literal
        event(f"strategy={strategy.value}")

        expected = IntegerParser(kind, OverflowStrategy.CUTOFF).parse(text, base)
        actual = IntegerParser(kind, strategy).parse(text, base)

        assert (actual.value, actual.consumed_count) == (expected.value, expected.consumed_count)

    @given(literal=canonical_literals(), padding=whitespace_runs(min_size=1))
    def test_leading_whitespace_is_ignored(
        self,
        literal: tuple[str, int, int, IntegerKind],
        padding: str,
    ) -> None:
        text, value, base, kind = literal
        result = parse_integer(padding + text, base, kind)

        assert result.status is ParseStatus.OK
        assert result.value == value
        assert result.consumed_count == len(padding) + len(text)

    @given(literal=canonical_literals())
    def test_explicit_plus_is_ignored(self, literal: tuple[str, int, int, IntegerKind]) -> None:
        text, value, base, kind = literal
        assume(not text.startswith("-"))
        result = parse_integer("+" + text, base, kind)

        assert result.status is ParseStatus.OK
        assert result.value == value

    @given(
        literal=out_of_range_literals(),
        padding=whitespace_runs(),
        plus=st.booleans(),
    )
    def test_padding_keeps_out_of_range_status(
        self,
        literal: tuple[str, int, IntegerKind],
        padding: str,
        plus: bool,
    ) -> None:
        """Whitespace and '+' change neither value nor status of a clamped parse."""
        text, base, kind = literal
        event(f"plus={plus}")
        prefixed = "+" + text if plus and not text.startswith("-") else text
        bare = parse_integer(text, base, kind)
        padded = parse_integer(padding + prefixed, base, kind)

        assert padded.status is bare.status is ParseStatus.OUT_OF_RANGE
        assert padded.value == bare.value


class TestOverflowProperties:
    """Clamping behaviour on out-of-range literals."""

    @given(literal=out_of_range_literals())
    def test_clamps_to_crossed_boundary(self, literal: tuple[str, int, IntegerKind]) -> None:
        text, base, kind = literal
        result = parse_integer(text, base, kind)

        assert result.status is ParseStatus.OUT_OF_RANGE
        expected = kind.min_value if text.startswith("-") else kind.max_value
        assert result.value == expected
        assert result.consumed_count == len(text)


class TestAgreementWithInt:
    """Agreement with Python's int() where both accept the text."""

    @given(
        value=st.integers(-(2**80), 2**80),
        base=bases(),
        kind=st.sampled_from([INT64, UINT64]),
    )
    def test_matches_clamped_int(self, value: int, base: int, kind: IntegerKind) -> None:
        text = render(value, base)
        result = parse_integer(text, base, kind)

        if kind.signed:
            expected = kind.clamp(value)
        elif abs(value) > kind.max_value:
            expected = kind.max_value
        else:
            expected = kind.wrap(value)
        event(f"in_range={result.ok}")
        assert result.value == expected

    @given(
        digits=st.text(alphabet=string.hexdigits, min_size=1, max_size=15),
        sign=st.sampled_from(["", "+", "-"]),
    )
    def test_hex_prefix_matches_int_base_zero(self, digits: str, sign: str) -> None:
        """'0x' literals agree with int(text, 0)."""
        text = f"{sign}0x{digits}"

        assert parse_integer(text, 0).value == int(text, 0)


class TestPositionConsistency:
    """consumed_count and cursor agree on arbitrary input."""

    @given(text=st.text(max_size=30), base=st.one_of(st.just(0), bases()))
    def test_cursor_matches_consumed(self, text: str, base: int) -> None:
        result = parse_integer(text, base)
        event(f"status={result.status.value}")

        assert result.cursor.pos == result.consumed_count
        assert 0 <= result.consumed_count <= len(text)
        assert result.kind.contains(result.value)
        if result.status is ParseStatus.NO_DIGITS_CONSUMED:
            assert result.consumed_count == 0
            assert result.value == 0

    @given(text=st.text(max_size=30), base=invalid_bases())
    def test_invalid_base_never_consumes(self, text: str, base: int) -> None:
        result = parse_integer(text, base)

        assert result.status is ParseStatus.INVALID_CONFIGURATION
        assert result.consumed_count == 0

    @given(kind=integer_kinds(), data=st.binary(max_size=24))
    def test_bytes_match_latin1_text(self, kind: IntegerKind, data: bytes) -> None:
        """bytes input behaves exactly like its Latin-1 decoding."""
        from_bytes = parse_integer(data, 0, kind)
        from_text = parse_integer(data.decode("latin-1"), 0, kind)

        assert (from_bytes.value, from_bytes.consumed_count, from_bytes.status) == (
            from_text.value,
            from_text.consumed_count,
            from_text.status,
        )
