"""Last-error side channel (errno convention).

C callers of strtol() inspect errno after the call: EINVAL for a bad base,
ERANGE for a clamped result. The parser engine reports the same conditions
here in addition to ParseResult.status, so code ported from C can keep its
"clear errno, call, check errno" shape.

Semantics follow C:
    - Only failures write the channel; success never clears it
    - Callers clear it (set_errno(0) / clear_errno()) before a call

Thread Safety:
    Backed by a ContextVar, so every thread and asyncio task observes its own
    value. Concurrent parses never see each other's errors.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import errno as _errno
from contextvars import ContextVar

__all__ = [
    "EINVAL",
    "ERANGE",
    "clear_errno",
    "get_errno",
    "set_errno",
]

EINVAL: int = _errno.EINVAL
ERANGE: int = _errno.ERANGE

_last_error: ContextVar[int] = ContextVar("intscan_errno", default=0)


def get_errno() -> int:
    """Return the last error code recorded in the current context (0 if none)."""
    return _last_error.get()


def set_errno(code: int) -> None:
    """Record an error code in the current context.

    Raises:
        ValueError: If code is negative
    """
    if code < 0:
        msg = f"errno must be >= 0, got {code}"
        raise ValueError(msg)
    _last_error.set(code)


def clear_errno() -> None:
    """Reset the current context's error code to 0."""
    _last_error.set(0)
