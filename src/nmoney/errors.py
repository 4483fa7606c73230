class MoneyError(ValueError):
    """Base class for all errors raised by `nmoney`."""


class CentsError(MoneyError):
    """Raised when a `Money` is built with $cents outside [0, 99]."""


class StringError(MoneyError):
    """Raised when text cannot be parsed into a `Money`."""


class MoneyOverflowError(MoneyError, OverflowError):
    """Raised when a total-cents value does not fit into a signed 64-bit integer."""
