from __future__ import annotations

import logging

from nmoney.errors import CentsError, MoneyOverflowError
from nmoney.options import DisplayOptions
from nmoney.sign import Sign
from nmoney.utils.numeric_tools import I64_MAX, I64_MIN, U64_MAX, fits_i64, fits_u64, is_plain_int

logger = logging.getLogger(__name__)


class Money:
    """Exact amount of dollars and cents with a sign.

    $dollars and $cents are absolute values; $sign tells whether the whole amount is
    positive or negative. A zero amount is always positive (there is no negative zero).

    Addition, subtraction and ordering are computed on the total number of cents, which
    must fit into a signed 64-bit integer (see `as_cents`).

    Each instance owns its `DisplayOptions`, which control how `str()` renders the amount.
    Options are not part of equality.
    """

    __slots__ = ("_dollars", "_cents", "_sign", "_options")

    def __init__(self, dollars: int = 0, cents: int = 0, sign: Sign = Sign.POSITIVE):
        """Initialize Money from its absolute $dollars and $cents and a $sign.

        Args:
            dollars: Absolute number of dollars, in range [0, 2**64 - 1].
            cents: Absolute number of cents, in range [0, 99].
            sign: Sign of the whole amount. Ignored for a zero amount.

        Raises:
            CentsError: If $cents is not in range [0, 99].
            ValueError: If $dollars is negative or exceeds 2**64 - 1.
            TypeError: If arguments have wrong types.
        """
        # Raise: arguments must have expected types
        if not is_plain_int(dollars):
            raise TypeError(f"$dollars must be an int, but provided value is: {dollars!r}")
        if not is_plain_int(cents):
            raise TypeError(f"$cents must be an int, but provided value is: {cents!r}")
        if not isinstance(sign, Sign):
            raise TypeError(f"$sign must be a Sign instance, but provided value is: {sign!r}")

        # Raise: cents must be in range [0, 99]
        if not 0 <= cents < 100:
            raise CentsError(f"$cents must be in range [0, 99], but provided value is: {cents}")

        # Raise: dollars must fit into unsigned 64-bit integer
        if not fits_u64(dollars):
            raise ValueError(f"$dollars must be in range [0, {U64_MAX}], but provided value is: {dollars}")

        self._dollars = dollars
        self._cents = cents
        # Prevents negative zero
        self._sign = Sign.POSITIVE if dollars == 0 and cents == 0 else sign
        self._options = DisplayOptions()

    # region Properties

    @property
    def dollars(self) -> int:
        """Get the absolute number of dollars."""
        return self._dollars

    @property
    def cents(self) -> int:
        """Get the absolute number of cents (0-99)."""
        return self._cents

    @property
    def sign(self) -> Sign:
        """Get the sign."""
        return self._sign

    @property
    def is_positive(self) -> bool:
        """Check if the amount is positive (zero included)."""
        return self._sign is Sign.POSITIVE

    @property
    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self._dollars == 0 and self._cents == 0

    @property
    def options(self) -> DisplayOptions:
        """Get the display options of this instance.

        The returned object is the live record, so changes made through it affect how this
        instance is rendered, e.g. `money.options.set_symbol("£")`.
        """
        return self._options

    # endregion

    # region Conversions

    def as_cents(self) -> int:
        """Return the amount as a total number of cents.

        Returns:
            int: Signed total of cents, e.g. -525 for "-$5.25".

        Raises:
            MoneyOverflowError: If the total does not fit into a signed 64-bit integer.
        """
        result = self._sign.value * (self._dollars * 100 + self._cents)

        # Raise: total must fit into signed 64-bit integer
        if not fits_i64(result):
            raise MoneyOverflowError(f"Total cents of {self!r} is out of range [{I64_MIN}, {I64_MAX}]: {result}")

        return result

    @classmethod
    def from_cents(cls, cents: int) -> Money:
        """Create Money from a total number of cents.

        Args:
            cents: Signed total of cents, e.g. -525 for "-$5.25".

        Returns:
            Money: New instance with default display options.

        Raises:
            MoneyOverflowError: If $cents does not fit into a signed 64-bit integer.
            TypeError: If $cents is not an int.
        """
        if not is_plain_int(cents):
            raise TypeError(f"$cents must be an int, but provided value is: {cents!r}")

        # Raise: total must fit into signed 64-bit integer
        if not fits_i64(cents):
            raise MoneyOverflowError(f"$cents must be in range [{I64_MIN}, {I64_MAX}], but provided value is: {cents}")

        dollars, rest = divmod(abs(cents), 100)
        return cls(dollars, rest, Sign.of(cents))

    @classmethod
    def from_str(cls, text: str) -> Money:
        """Parse Money from text like "5.34", "-$5.34" or "(£5.34)".

        See `nmoney.codec.parse_money` for details.

        Raises:
            StringError: If $text is not a valid money string.
        """
        from nmoney.codec import parse_money

        return parse_money(text)

    parse = from_str

    # endregion

    # region Options

    @staticmethod
    def copy_options(dest: Money, src: Money) -> None:
        """Replace all display options of $dest with the options of $src.

        The numeric value of $dest is not changed.
        """
        if not isinstance(dest, Money) or not isinstance(src, Money):
            raise TypeError(f"$dest and $src must be Money instances, but provided values are: {dest!r}, {src!r}")
        dest._options.update_from(src._options)

    def copy(self) -> Money:
        """Return an independent copy, display options included."""
        result = Money(self._dollars, self._cents, self._sign)
        result._options.update_from(self._options)
        return result

    def __copy__(self) -> Money:
        return self.copy()

    def __deepcopy__(self, memo) -> Money:
        return self.copy()

    # endregion

    def clamp(self, lower: Money | None = None, upper: Money | None = None) -> Money:
        """Return a new Money with value clamped into [$lower, $upper].

        Display options of the result are copied from $self.

        Args:
            lower: Optional lower bound. If None, there is no lower bound.
            upper: Optional upper bound. If None, there is no upper bound.

        Returns:
            Money: New instance with value clamped into the requested range.

        Raises:
            ValueError: If both bounds are provided and $lower > $upper.
        """
        for bound in (lower, upper):
            if bound is not None and not isinstance(bound, Money):
                raise TypeError(f"Cannot call `clamp` because bound {bound!r} is not a Money instance")

        # Raise: ensure the requested range is not inverted
        if lower is not None and upper is not None and lower > upper:
            raise ValueError(f"Cannot call `clamp` because $lower ({lower}) > $upper ({upper})")

        value = self
        if lower is not None and value < lower:
            value = lower
        if upper is not None and value > upper:
            value = upper

        result = Money(value._dollars, value._cents, value._sign)
        result._options.update_from(self._options)
        return result

    # region Arithmetic operations

    @staticmethod
    def _checked_total(total: int, operation: str) -> Money:
        # Overflowing money arithmetic is a data error; never wrap around
        if not fits_i64(total):
            logger.error(f"Money overflow in `{operation}`: result {total} is out of range [{I64_MIN}, {I64_MAX}]")
            raise MoneyOverflowError(f"Result of `{operation}` is out of range [{I64_MIN}, {I64_MAX}]: {total}")
        return Money.from_cents(total)

    def __add__(self, other):
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self._checked_total(self.as_cents() + other.as_cents(), "__add__")

    def __radd__(self, other):
        """Support `sum()`, which starts from int 0."""
        if is_plain_int(other) and other == 0:
            return Money.from_cents(self.as_cents())
        return NotImplemented

    def __sub__(self, other):
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self._checked_total(self.as_cents() - other.as_cents(), "__sub__")

    def __neg__(self):
        # Negated zero stays positive
        result = Money(self._dollars, self._cents, self._sign.flipped())
        result._options.update_from(self._options)
        return result

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        result = Money(self._dollars, self._cents, Sign.POSITIVE)
        result._options.update_from(self._options)
        return result

    # endregion

    # region Comparison operators

    def __eq__(self, other) -> bool:
        """Check equality of dollars, cents and sign. Display options are ignored."""
        if not isinstance(other, Money):
            return False
        return (self._dollars, self._cents, self._sign) == (other._dollars, other._cents, other._sign)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.as_cents() < other.as_cents()

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.as_cents() <= other.as_cents()

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.as_cents() > other.as_cents()

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.as_cents() >= other.as_cents()

    def __hash__(self) -> int:
        """Hash based on dollars, cents and sign."""
        return hash((self._dollars, self._cents, self._sign))

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '$12.29', '-$12.29' or '($12.29)' based on display options."""
        from nmoney.codec import format_money

        return format_money(self)

    def __repr__(self) -> str:
        """Return string like "Money('-$12.29')"."""
        sign = "-" if self.is_negative else ""
        return f"{self.__class__.__name__}('{sign}{self._dollars}.{self._cents:02d}')"

    # endregion
