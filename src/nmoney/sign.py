from __future__ import annotations

from enum import Enum


class Sign(Enum):
    """Sign of a monetary amount.

    The value of each member is the multiplier applied to the magnitude when
    projecting a `Money` to its total number of cents.
    """

    POSITIVE = 1
    NEGATIVE = -1

    @classmethod
    def of(cls, number: int) -> Sign:
        """Return NEGATIVE for $number < 0, otherwise POSITIVE."""
        return cls.NEGATIVE if number < 0 else cls.POSITIVE

    def flipped(self) -> Sign:
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE
