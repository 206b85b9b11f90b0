"""Tests for the parser engine.

Covers base detection, prefix handling, sign handling, whitespace skipping,
consumed-count reporting, overflow clamping and the errno side channel.
"""

from __future__ import annotations

import logging

import pytest

from intscan.cursor import Cursor
from intscan.engine import IntegerParser, get_parser, parse_integer
from intscan.enums import OverflowStrategy, ParseStatus
from intscan.errstate import EINVAL, ERANGE, get_errno, set_errno
from intscan.kinds import INT8, INT32, INT64, UINT8, UINT32, UINT64

# ============================================================================
# BASIC CONVERSION
# ============================================================================


class TestBasicConversion:
    """Well-formed numbers in explicit and detected bases."""

    @pytest.mark.parametrize(
        ("text", "base", "value", "consumed"),
        [
            ("0", 10, 0, 1),
            ("42", 10, 42, 2),
            ("+42", 10, 42, 3),
            ("-42", 10, -42, 3),
            ("101", 2, 5, 3),
            ("777", 8, 511, 3),
            ("ff", 16, 255, 2),
            ("FF", 16, 255, 2),
            ("zz", 36, 1295, 2),
            ("Zz", 36, 1295, 2),
            ("0x1A", 0, 26, 4),
            ("0X1a", 0, 26, 4),
            ("0x1A", 16, 26, 4),
            ("017", 0, 15, 3),
            ("17", 0, 17, 2),
            ("0", 0, 0, 1),
            ("00", 0, 0, 2),
        ],
    )
    def test_value_and_consumed(self, text: str, base: int, value: int, consumed: int) -> None:
        result = parse_integer(text, base)

        assert result.status is ParseStatus.OK
        assert result.value == value
        assert result.consumed_count == consumed

    def test_whitespace_and_octal_prefix(self) -> None:
        """'  -0777' in base 0 is octal; consumed includes the whitespace."""
        result = parse_integer("  -0777", 0)

        assert (result.value, result.consumed_count, result.status) == (-511, 7, ParseStatus.OK)

    def test_stops_at_first_invalid_character(self) -> None:
        result = parse_integer("123abc", 10)

        assert result.value == 123
        assert result.consumed_count == 3
        assert result.cursor.peek() == "a"

    def test_digit_outside_base_ends_number(self) -> None:
        """'8' is not an octal digit."""
        result = parse_integer("0789", 0)

        assert result.value == 7
        assert result.consumed_count == 2

    def test_base_36_consumes_letters_after_digits(self) -> None:
        assert parse_integer("12abc", 36).value == int("12abc", 36)

    @pytest.mark.parametrize("space", ["\t", "\n", "\v", "\f", "\r", " "])
    def test_every_c_space_is_skipped(self, space: str) -> None:
        result = parse_integer(space * 3 + "9", 10)

        assert result.value == 9
        assert result.consumed_count == 4

    @pytest.mark.parametrize("text", ["\u00a09", "\u20029", "\u30009"])
    def test_unicode_spaces_are_not_skipped(self, text: str) -> None:
        assert parse_integer(text, 10).status is ParseStatus.NO_DIGITS_CONSUMED

    def test_fullwidth_digits_are_not_digits(self) -> None:
        assert parse_integer("\uff11\uff12", 10).status is ParseStatus.NO_DIGITS_CONSUMED


# ============================================================================
# HEX PREFIX
# ============================================================================


class TestHexPrefix:
    """'0x' handling in bases 0 and 16."""

    @pytest.mark.parametrize("base", [0, 16])
    def test_dangling_prefix_converts_the_zero(self, base: int) -> None:
        """'0x' without a hex digit is the number 0 ending at the 'x'."""
        result = parse_integer("0x", base)

        assert result.status is ParseStatus.OK
        assert result.value == 0
        assert result.consumed_count == 1
        assert result.cursor.peek() == "x"

    def test_dangling_prefix_with_sign_and_space(self) -> None:
        result = parse_integer(" -0xg", 0)

        assert (result.value, result.consumed_count, result.status) == (0, 3, ParseStatus.OK)

    def test_prefix_not_recognized_in_base_10(self) -> None:
        result = parse_integer("0x1A", 10)

        assert result.value == 0
        assert result.consumed_count == 1

    def test_x_is_a_digit_in_base_36(self) -> None:
        """In base 36 'x' is digit 33, so '0x1' is a plain number."""
        assert parse_integer("0x1", 36).value == 33 * 36 + 1

    def test_prefix_only_after_sign(self) -> None:
        """The prefix follows the sign; '+-0x1' has no digits."""
        assert parse_integer("-0x10", 0).value == -16
        assert parse_integer("+-0x10", 0).status is ParseStatus.NO_DIGITS_CONSUMED

    def test_prefix_then_invalid_digit_in_base_16(self) -> None:
        result = parse_integer("0xz", 16)

        assert result.value == 0
        assert result.consumed_count == 1


# ============================================================================
# NO DIGITS
# ============================================================================


class TestNoDigits:
    """Input without a convertible number."""

    @pytest.mark.parametrize("text", ["", "abc", "   ", "+", "-", "  +", "+ 1", "--1", "x1"])
    def test_no_digits_consumed(self, text: str) -> None:
        result = parse_integer(text, 10)

        assert result.status is ParseStatus.NO_DIGITS_CONSUMED
        assert result.value == 0
        assert result.consumed_count == 0
        assert result.cursor.pos == 0

    def test_no_digits_does_not_set_errno(self) -> None:
        """C leaves errno alone when nothing was converted."""
        parse_integer("abc", 10)

        assert get_errno() == 0

    def test_digit_invalid_for_base(self) -> None:
        assert parse_integer("9", 8).status is ParseStatus.NO_DIGITS_CONSUMED
        assert parse_integer("2", 2).status is ParseStatus.NO_DIGITS_CONSUMED


# ============================================================================
# INVALID BASE
# ============================================================================


class TestInvalidBase:
    """Bases outside {0} and [2, 36]."""

    @pytest.mark.parametrize("base", [1, 37, -1, 100])
    def test_invalid_configuration(self, base: int) -> None:
        result = parse_integer("123", base)

        assert result.status is ParseStatus.INVALID_CONFIGURATION
        assert result.value == 0
        assert result.consumed_count == 0
        assert get_errno() == EINVAL

    def test_input_not_inspected(self) -> None:
        """The cursor is returned unchanged, even past leading whitespace."""
        start = Cursor("   12", 1)
        result = parse_integer(start, 1)

        assert result.cursor is start

    @pytest.mark.parametrize("base", [10.0, "10", True, None])
    def test_non_int_base_raises(self, base: object) -> None:
        with pytest.raises(TypeError, match="base must be int"):
            parse_integer("1", base)  # type: ignore[arg-type]

    def test_non_text_input_raises(self) -> None:
        with pytest.raises(TypeError, match="Expected str, bytes or Cursor"):
            parse_integer(12, 10)  # type: ignore[arg-type]


# ============================================================================
# SIGN HANDLING
# ============================================================================


class TestSign:
    """Negative numbers for signed and unsigned kinds."""

    def test_unsigned_negation_wraps(self) -> None:
        """strtoul('-1') is ULONG_MAX."""
        result = parse_integer("-1", 10, UINT64)

        assert result.status is ParseStatus.OK
        assert result.value == UINT64.max_value

    def test_unsigned_negation_of_max_is_one(self) -> None:
        result = parse_integer("-4294967295", 10, UINT32)

        assert result.value == 1
        assert result.ok

    def test_negative_zero(self) -> None:
        assert parse_integer("-0", 10, UINT8).value == 0
        assert parse_integer("-0", 10, INT8).value == 0

    def test_signed_minimum_is_reachable(self) -> None:
        """The negative range is one larger than the positive one."""
        result = parse_integer("-128", 10, INT8)

        assert result.ok
        assert result.value == -128


# ============================================================================
# OVERFLOW
# ============================================================================


class TestOverflow:
    """Clamping and ERANGE."""

    def test_unsigned_clamps_to_max(self) -> None:
        result = parse_integer("99999999999999999999", 10, UINT32)

        assert result.status is ParseStatus.OUT_OF_RANGE
        assert result.value == UINT32.max_value
        assert result.consumed_count == 20
        assert get_errno() == ERANGE

    def test_unsigned_negative_overflow_clamps_to_max(self) -> None:
        """A magnitude too large for the kind clamps to max even with '-'."""
        result = parse_integer("-256", 10, UINT8)

        assert result.status is ParseStatus.OUT_OF_RANGE
        assert result.value == 255

    def test_signed_clamps_by_sign(self) -> None:
        assert parse_integer("128", 10, INT8).value == 127
        assert parse_integer("-129", 10, INT8).value == -128

    def test_scan_continues_past_overflow(self) -> None:
        """All digits are consumed even after the value stopped changing."""
        result = parse_integer("300000x", 10, UINT8)

        assert result.consumed_count == 6
        assert result.cursor.peek() == "x"

    def test_success_does_not_clear_errno(self) -> None:
        set_errno(ERANGE)
        parse_integer("1", 10)

        assert get_errno() == ERANGE

    def test_clamp_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="intscan.engine"):
            parse_integer("256", 10, UINT8)

        assert "Clamped '256' to uint8 boundary 255" in caplog.text

    @pytest.mark.parametrize("strategy", list(OverflowStrategy))
    def test_strategies_agree_for_unsigned(self, strategy: OverflowStrategy) -> None:
        parser = IntegerParser(UINT64, strategy)

        assert parser.parse("18446744073709551615").ok
        assert parser.parse("18446744073709551616").status is ParseStatus.OUT_OF_RANGE


# ============================================================================
# INPUT FORMS
# ============================================================================


class TestInputForms:
    """str, bytes and Cursor inputs."""

    def test_bytes(self) -> None:
        result = parse_integer(b"  0x7f!", 0)

        assert result.value == 127
        assert result.consumed_count == 6

    def test_high_latin1_byte_is_not_a_digit(self) -> None:
        assert parse_integer(b"\xb2", 10).status is ParseStatus.NO_DIGITS_CONSUMED

    def test_cursor_mid_string(self) -> None:
        """Parsing from an offset reports consumed relative to that offset."""
        result = parse_integer(Cursor("id=  42;", 3), 10)

        assert result.value == 42
        assert result.consumed_count == 4
        assert result.start == 3
        assert result.end == 7

    def test_no_digits_from_offset_returns_start(self) -> None:
        start = Cursor("a; b", 2)
        result = parse_integer(start, 10)

        assert result.cursor.pos == 2

    def test_chained_parses(self) -> None:
        """The result cursor feeds the next parse."""
        first = parse_integer("10 20 30", 10)
        second = parse_integer(first.cursor, 10)
        third = parse_integer(second.cursor, 10)

        assert [first.value, second.value, third.value] == [10, 20, 30]
        assert third.cursor.is_eof


# ============================================================================
# PARSER OBJECTS
# ============================================================================


class TestIntegerParser:
    """IntegerParser construction and sharing."""

    def test_signed_kind_never_uses_checked(self) -> None:
        assert IntegerParser(INT32, "checked").strategy is OverflowStrategy.CUTOFF

    def test_repr(self) -> None:
        parser = IntegerParser(UINT8, "cutoff")

        assert repr(parser) == "IntegerParser(kind='uint8', strategy='cutoff')"

    def test_callable(self) -> None:
        assert IntegerParser(INT64)("7").value == 7

    def test_rejects_non_kind(self) -> None:
        with pytest.raises(TypeError, match="kind must be IntegerKind"):
            IntegerParser("int32")  # type: ignore[arg-type]

    def test_get_parser_is_cached(self) -> None:
        assert get_parser(INT32) is get_parser(INT32)
        assert get_parser(UINT32, "cutoff") is not get_parser(UINT32, "checked")

    def test_kind_property(self) -> None:
        assert IntegerParser(UINT32).kind is UINT32
