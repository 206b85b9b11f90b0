"""Quickstart example for intscan.

This example demonstrates reading integers from text with strtol()
semantics: prefix conversion, base detection, fixed-width kinds, overflow
clamping and the errno side channel.

Note: parse_integer() never raises for malformed text. Check result.status
(or call result.unwrap()) in production code.
"""

from intscan import UINT8, UINT32, Cursor, ParseStatus, parse_integer, to_int
from intscan.errstate import ERANGE, clear_errno, get_errno
from intscan.libc import strtol, strtoul

# Example 1: Prefix conversion
print("=" * 50)
print("Example 1: Prefix Conversion")
print("=" * 50)

result = parse_integer("  -42 apples")
print(result.value, result.consumed_count, result.status)
# Output: -42 5 ok

# Example 2: Base detection
print("\n" + "=" * 50)
print("Example 2: Base Detection (base=0)")
print("=" * 50)

for text in ["0x1A", "0777", "123", "0x"]:
    result = parse_integer(text, base=0)
    print(f"{text!r:8} -> {result.value} (consumed {result.consumed_count})")
# Output:
# '0x1A'   -> 26 (consumed 4)
# '0777'   -> 511 (consumed 4)
# '123'    -> 123 (consumed 3)
# '0x'     -> 0 (consumed 1)

# Example 3: Overflow clamps and sets errno
print("\n" + "=" * 50)
print("Example 3: Overflow")
print("=" * 50)

clear_errno()
result = parse_integer("99999999999999999999", kind=UINT32)
print(result.value, result.status is ParseStatus.OUT_OF_RANGE, get_errno() == ERANGE)
# Output: 4294967295 True True

# Example 4: Walking a list of numbers with a cursor
print("\n" + "=" * 50)
print("Example 4: Chained Parsing")
print("=" * 50)

cursor = Cursor.of("10 0x20 -30 end")
values = []
while (result := parse_integer(cursor, base=0)).ok:
    values.append(result.value)
    cursor = result.cursor
print(values, "stopped at", repr(cursor.source[cursor.pos :]))
# Output: [10, 32, -30] stopped at ' end'

# Example 5: Whole-string conversion
print("\n" + "=" * 50)
print("Example 5: to_int()")
print("=" * 50)

value, errors = to_int("300", kind=UINT8)
print(value, errors[0].diagnostic.format_error() if errors else "")
# Output:
# None error[OUT_OF_RANGE]: Value '300' does not fit in uint8; clamped to 255
#   --> line 1, column 1
#   = kind: uint8
#   = help: Use a wider integer kind or check the input

# Example 6: C-style entry points
print("\n" + "=" * 50)
print("Example 6: libc Entry Points")
print("=" * 50)

print(strtol("  42abc", 10))
print(strtoul("-1", 10))
# Output:
# (42, 4)
# (18446744073709551615, 2)
