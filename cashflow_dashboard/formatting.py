"""
Locale-aware display formatters for cashflow-dashboard.

Both formatters sit on the render path, so they never raise: anything
that cannot be read as a number comes back as the invalid placeholder
(``"-"`` by default). Numeric strings such as ``"12345"`` are accepted;
see ``values.coerce_number`` for the exact coercion rules.

Output follows the id-ID conventions unless a config says otherwise:

  format_number(1234567)     -> "1.234.567"
  format_currency(1234567)   -> "Rp 1.234.567"
  format_currency(-98765)    -> "-Rp 98.765"
  format_currency(None)      -> "-"

Values are rounded half away from zero to whole units, matching how
browser currency formatting rounds (1234.5 -> 1.235, -0.5 -> -1).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from cashflow_dashboard.config import DEFAULT_CONFIG, DisplayConfig, LocaleConfig
from cashflow_dashboard.values import coerce_number

_ONE = Decimal(1)
_INFINITY_TEXT = "∞"


def _resolve_locale(config: DisplayConfig | LocaleConfig | None) -> LocaleConfig:
    if config is None:
        return DEFAULT_CONFIG.locale
    if isinstance(config, DisplayConfig):
        return config.locale
    return config


def _round_to_int(number: int | float) -> int:
    """Round half away from zero to a whole number."""
    if isinstance(number, int):
        return number
    if number.is_integer():
        return int(number)
    # A float with a fractional part is below 2**52, well within the
    # default decimal precision.
    return int(Decimal(number).quantize(_ONE, rounding=ROUND_HALF_UP))


def _render_magnitude(number: int | float, locale: LocaleConfig) -> tuple[str, bool]:
    """Return (grouped digits of |number|, is_negative).

    A value that rounds to zero is never negative, so ``-0.2`` renders
    as ``"0"`` rather than ``"-0"``.
    """
    if math.isinf(number):
        return _INFINITY_TEXT, number < 0
    rounded = _round_to_int(number)
    digits = f"{abs(rounded):,}".replace(",", locale.group_separator)
    return digits, rounded < 0


def format_number(
    value: Any, config: DisplayConfig | LocaleConfig | None = None
) -> str:
    """Format a raw value as a grouped whole number, e.g. ``"1.000"``.

    Args:
        value: Any raw cell value.
        config: Optional display or locale config; id-ID defaults otherwise.

    Returns:
        The grouped digits with a leading ``-`` for negatives, or the
        invalid placeholder when no number can be read from *value*.
    """
    locale = _resolve_locale(config)
    number = coerce_number(value)
    if number is None:
        return locale.invalid_placeholder

    digits, negative = _render_magnitude(number, locale)
    return f"-{digits}" if negative else digits


def format_currency(
    value: Any, config: DisplayConfig | LocaleConfig | None = None
) -> str:
    """Format a raw value as a whole-unit currency amount, e.g. ``"Rp 1.235"``.

    Uses the same invalid-input rule as ``format_number``. The sign of a
    negative amount is placed per ``LocaleConfig.negative_sign``:
    ``"-Rp 98.765"`` (default) or ``"Rp -98.765"``.
    """
    locale = _resolve_locale(config)
    number = coerce_number(value)
    if number is None:
        return locale.invalid_placeholder

    digits, negative = _render_magnitude(number, locale)
    prefix = f"{locale.currency_symbol}{locale.symbol_spacing}"
    if not negative:
        return f"{prefix}{digits}"
    if locale.negative_sign == "before_symbol":
        return f"-{prefix}{digits}"
    return f"{prefix}-{digits}"
