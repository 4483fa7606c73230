from __future__ import annotations

from typing import Final

# Bounds of the fixed-width integers backing `Money`
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1
U64_MAX: Final[int] = 2**64 - 1
U8_MAX: Final[int] = 2**8 - 1


def is_plain_int(value: object) -> bool:
    """Check that $value is an `int`, but not a `bool`.

    `bool` is a subclass of `int` in Python, but `True` is never a sensible amount of dollars or cents.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def fits_i64(value: int) -> bool:
    """Return True if $value fits into a signed 64-bit integer."""
    return I64_MIN <= value <= I64_MAX


def fits_u64(value: int) -> bool:
    """Return True if $value fits into an unsigned 64-bit integer."""
    return 0 <= value <= U64_MAX


def fits_u8(value: int) -> bool:
    """Return True if $value fits into an unsigned 8-bit integer."""
    return 0 <= value <= U8_MAX
