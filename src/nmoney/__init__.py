__version__ = "0.1.0"

from nmoney.errors import CentsError, MoneyError, MoneyOverflowError, StringError
from nmoney.sign import Sign
from nmoney.options import DisplayOptions, NegativeView
from nmoney.money import Money
from nmoney.codec import format_money, parse_money
from nmoney.config import load_display_options

__all__ = [
    "CentsError",
    "DisplayOptions",
    "Money",
    "MoneyError",
    "MoneyOverflowError",
    "NegativeView",
    "Sign",
    "StringError",
    "format_money",
    "load_display_options",
    "parse_money",
]
