from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class NegativeView(Enum):
    """How the sign of a negative amount is rendered.

    Members:
        MINUS: Leading minus sign, e.g. "-$5.25".
        PAREN: Whole string wrapped in parentheses, e.g. "($5.25)".
        HIDE: Sign is not rendered at all, e.g. "$5.25".
    """

    MINUS = "MINUS"
    PAREN = "PAREN"
    HIDE = "HIDE"


DEFAULT_SYMBOL = "$"
DEFAULT_SHOW_SYMBOL = True
DEFAULT_NEGATIVE_VIEW = NegativeView.MINUS


def is_valid_symbol(symbol: object) -> bool:
    """Return True if $symbol can be used as a currency symbol.

    A valid symbol is exactly one character that is not an ASCII digit.
    """
    if not isinstance(symbol, str) or len(symbol) != 1:
        return False
    return not ("0" <= symbol <= "9")


class DisplayOptions:
    """Formatting configuration carried by each `Money` instance.

    Attributes:
        symbol (str): Single character used as the currency marker. Never an ASCII digit.
        show_symbol (bool): Whether $symbol is rendered.
        negative_view (NegativeView): How a negative sign is rendered.
    """

    __slots__ = ("_symbol", "_show_symbol", "_negative_view")

    def __init__(self) -> None:
        self._symbol = DEFAULT_SYMBOL
        self._show_symbol = DEFAULT_SHOW_SYMBOL
        self._negative_view = DEFAULT_NEGATIVE_VIEW

    @property
    def symbol(self) -> str:
        """Get the currency symbol in use."""
        return self._symbol

    @property
    def show_symbol(self) -> bool:
        """Get whether the currency symbol is rendered."""
        return self._show_symbol

    @property
    def negative_view(self) -> NegativeView:
        """Get the negative-view setting in use."""
        return self._negative_view

    def set_symbol(self, symbol: str) -> bool:
        """Set the currency symbol to use. Default: '$'.

        ASCII digits (and anything that is not a single character) are rejected:
        the current symbol stays unchanged and False is returned.

        Args:
            symbol: The new currency symbol.

        Returns:
            bool: True if the symbol was accepted, False otherwise.
        """
        if not is_valid_symbol(symbol):
            logger.debug(f"Rejected currency symbol $symbol {symbol!r}; keeping '{self._symbol}'")
            return False

        self._symbol = symbol
        return True

    def set_show_symbol(self, show_symbol: bool) -> None:
        """Set whether the currency symbol is rendered. Default: True."""
        if not isinstance(show_symbol, bool):
            raise TypeError(f"$show_symbol must be a bool, but provided value is: {show_symbol!r}")
        self._show_symbol = show_symbol

    def set_negative_view(self, negative_view: NegativeView) -> None:
        """Set how negative amounts are rendered. Default: NegativeView.MINUS."""
        if not isinstance(negative_view, NegativeView):
            raise TypeError(f"$negative_view must be a NegativeView instance, but provided value is: {negative_view!r}")
        self._negative_view = negative_view

    def update_from(self, other: DisplayOptions) -> None:
        """Overwrite all settings of this record with the settings of $other."""
        if not isinstance(other, DisplayOptions):
            raise TypeError(f"$other must be a DisplayOptions instance, but provided value is: {other!r}")
        self._symbol = other._symbol
        self._show_symbol = other._show_symbol
        self._negative_view = other._negative_view

    def copy(self) -> DisplayOptions:
        result = DisplayOptions()
        result.update_from(self)
        return result

    def __copy__(self) -> DisplayOptions:
        return self.copy()

    def __deepcopy__(self, memo) -> DisplayOptions:
        return self.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, DisplayOptions):
            return False
        return (self._symbol, self._show_symbol, self._negative_view) == (other._symbol, other._show_symbol, other._negative_view)

    # Mutable record, so no hashing
    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(symbol='{self._symbol}', show_symbol={self._show_symbol}, negative_view={self._negative_view.name})"
