"""Text codec for `Money`.

Parses and renders the display grammar::

    money       := sign_prefix? symbol? digits "." two_digits sign_suffix?
    sign_prefix := "-" | "("
    sign_suffix := ")"            (only together with "(" prefix)
    symbol      := any single character that is not an ASCII digit

Rendering is controlled by the `DisplayOptions` carried by each `Money`.
"""

from __future__ import annotations

import logging

from nmoney.errors import StringError
from nmoney.money import Money
from nmoney.options import NegativeView
from nmoney.sign import Sign
from nmoney.utils.numeric_tools import fits_u64, fits_u8

logger = logging.getLogger(__name__)


def _is_ascii_digits(text: str) -> bool:
    # `str.isdigit` also accepts non-ASCII digits like '²' or '٣'
    return bool(text) and text.isascii() and text.isdigit()


def _fail(text: str, reason: str) -> StringError:
    logger.debug(f"Cannot parse $text {text!r} as Money: {reason}")
    return StringError(f"Invalid money string with $text = {text!r}: {reason}")


def parse_money(text: str) -> Money:
    """Parse $text into a `Money`.

    Parsed formatting details are stored in the options of the result:
    parentheses set `NegativeView.PAREN`, a leading symbol is kept and shown,
    and text without a symbol hides the default '$' symbol.

    Args:
        text: Text like "5.34", "$5.34", "-$5.34" or "(£5.34)".

    Returns:
        Money: Parsed value.

    Raises:
        TypeError: If $text is not a string.
        StringError: If $text does not follow the money grammar.
    """
    if not isinstance(text, str):
        raise TypeError(f"$text must be a string, but provided value is: {text!r}")

    rest = text
    sign = Sign.POSITIVE
    is_paren = False

    # Sign prefix
    if rest.startswith("-"):
        sign = Sign.NEGATIVE
        rest = rest[1:]
    elif rest.startswith("("):
        # Raise: opening parenthesis needs a closing one
        if len(rest) < 2 or not rest.endswith(")"):
            raise _fail(text, "unbalanced parenthesis")
        sign = Sign.NEGATIVE
        is_paren = True
        rest = rest[1:-1]

    if not rest:
        raise _fail(text, "no amount")

    # Currency symbol
    symbol = None
    if not ("0" <= rest[0] <= "9"):
        # Raise: a second sign marker is not a symbol
        if rest[0] in "-(":
            raise _fail(text, f"unexpected {rest[0]!r} after sign")
        symbol = rest[0]
        rest = rest[1:]

    parts = rest.split(".")
    if len(parts) != 2:
        raise _fail(text, "expected exactly one '.' separator")

    dollars_part, cents_part = parts
    if not _is_ascii_digits(dollars_part):
        raise _fail(text, f"dollars part {dollars_part!r} is not a number")
    if not _is_ascii_digits(cents_part):
        raise _fail(text, f"cents part {cents_part!r} is not a number")

    dollars = int(dollars_part)
    cents = int(cents_part)
    if not fits_u64(dollars):
        raise _fail(text, f"dollars part {dollars_part!r} is out of range")
    if not fits_u8(cents) or cents >= 100:
        raise _fail(text, f"cents part {cents_part!r} is out of range")

    result = Money(dollars, cents, sign)

    if is_paren:
        result.options.set_negative_view(NegativeView.PAREN)

    if symbol is not None:
        result.options.set_symbol(symbol)
        result.options.set_show_symbol(True)
    else:
        result.options.set_show_symbol(False)

    return result


def format_money(money: Money) -> str:
    """Render $money as text according to its display options.

    Examples:
        >>> format_money(Money(12, 29))
        '$12.29'
        >>> format_money(Money(12, 29, Sign.NEGATIVE))
        '-$12.29'
    """
    options = money.options
    result = f"{money.dollars}.{money.cents:02d}"

    if options.show_symbol:
        result = options.symbol + result

    if money.is_negative:
        # NegativeView.HIDE renders no sign at all
        if options.negative_view is NegativeView.MINUS:
            result = "-" + result
        elif options.negative_view is NegativeView.PAREN:
            result = f"({result})"

    return result
