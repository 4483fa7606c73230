from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import dotenv_values, find_dotenv

from nmoney.options import DisplayOptions, NegativeView

logger = logging.getLogger(__name__)

ENV_SYMBOL = "NMONEY_SYMBOL"
ENV_SHOW_SYMBOL = "NMONEY_SHOW_SYMBOL"
ENV_NEGATIVE_VIEW = "NMONEY_NEGATIVE_VIEW"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(raw: str) -> bool | None:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def load_display_options(env_file: str | Path | None = None) -> DisplayOptions:
    """Build `DisplayOptions` from environment variables.

    Variables are read from $env_file (or from a `.env` file found by searching upwards
    from the current working directory when $env_file is None) and from the process
    environment, which takes precedence over the file.

    Recognized variables:
        NMONEY_SYMBOL: Single non-digit character, e.g. "£".
        NMONEY_SHOW_SYMBOL: "1/true/yes/on" or "0/false/no/off".
        NMONEY_NEGATIVE_VIEW: "MINUS", "PAREN" or "HIDE" (case-insensitive).

    Invalid values are logged and replaced with defaults.

    Args:
        env_file: Optional path to a dotenv file.

    Returns:
        DisplayOptions: New options record.
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)

    # Process environment wins over the file; the process environment itself is not modified
    env = {**(dotenv_values(env_file) if env_file else {}), **os.environ}

    result = DisplayOptions()

    symbol = env.get(ENV_SYMBOL)
    if symbol is not None and not result.set_symbol(symbol):
        logger.warning(f"Ignoring invalid {ENV_SYMBOL}={symbol!r}; using '{result.symbol}'")

    raw_show_symbol = env.get(ENV_SHOW_SYMBOL)
    if raw_show_symbol is not None:
        show_symbol = _parse_bool(raw_show_symbol)
        if show_symbol is None:
            logger.warning(f"Ignoring invalid {ENV_SHOW_SYMBOL}={raw_show_symbol!r}; using {result.show_symbol}")
        else:
            result.set_show_symbol(show_symbol)

    raw_negative_view = env.get(ENV_NEGATIVE_VIEW)
    if raw_negative_view is not None:
        try:
            result.set_negative_view(NegativeView[raw_negative_view.strip().upper()])
        except KeyError:
            logger.warning(f"Ignoring invalid {ENV_NEGATIVE_VIEW}={raw_negative_view!r}; using {result.negative_view.name}")

    logger.debug(f"Loaded display options from environment: {result!r}")
    return result
