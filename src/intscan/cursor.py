"""Immutable cursor over the text being converted.

Implements the immutable cursor pattern used by the parser engine.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - End of input is a state (is_eof); peek() returns None past the end
    - Every advance() returns a NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for diagnostics)

Input Types:
    - str: Used as-is
    - bytes / bytearray: Decoded as Latin-1, so every byte maps to exactly
      one character and offsets equal byte offsets (the C char* view)
    - Cursor: Parsing starts at the cursor's position
"""

from dataclasses import dataclass
from typing import TypeAlias

__all__ = ["Cursor", "CursorInput"]

CursorInput: TypeAlias = "str | bytes | bytearray | Cursor"
"""Anything the parser engine accepts as its input sequence."""


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("0x1A", 0)
        >>> cursor.current
        '0'
        >>> cursor.advance(2).current
        '1'
        >>> cursor.peek(4) is None
        True
    """

    source: str
    pos: int = 0

    @classmethod
    def of(cls, data: CursorInput) -> "Cursor":
        """Build a cursor at the start of data, or return data if already a Cursor.

        Raises:
            TypeError: If data is not str, bytes, bytearray or Cursor
        """
        match data:
            case Cursor():
                return data
            case str():
                return cls(data, 0)
            case bytes() | bytearray():
                return cls(bytes(data).decode("latin-1"), 0)
            case _:
                msg = f"Expected str, bytes or Cursor, got {type(data).__name__}"
                raise TypeError(msg)

    @property
    def is_eof(self) -> bool:
        """True once position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of input at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond end of input

        Note:
            None plays the role of C's NUL terminator: it is never a space,
            a sign or a digit, so every scanning loop stops on it.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to the end)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only used for diagnostics.

        Example:
            >>> Cursor("12\\n34", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)
