"""
Unit tests for display formatters (cashflow_dashboard.formatting).

Tests id-ID grouping, currency rendering, rounding, sign handling, the
invalid placeholder, and config overrides.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from cashflow_dashboard.config import DisplayConfig, LocaleConfig
from cashflow_dashboard.formatting import format_currency, format_number

_GROUPED_RE = re.compile(r"^\d{1,3}(\.\d{3})*$")


class TestFormatNumber:
    """Tests for format_number()."""

    # -----------------------------------------------------------------
    # Invalid inputs
    # -----------------------------------------------------------------

    @pytest.mark.parametrize(
        "value", [None, float("nan"), "abc", "12.34xyz", "١٢٣", Decimal("NaN")]
    )
    def test_invalid_returns_placeholder(self, value):
        assert format_number(value) == "-"

    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, object()])
    def test_never_raises_for_odd_types(self, value):
        assert format_number(value) == "-"

    # -----------------------------------------------------------------
    # Grouping
    # -----------------------------------------------------------------

    def test_thousands_grouping(self):
        assert format_number(1000) == "1.000"
        assert format_number(1234567) == "1.234.567"

    def test_small_values_ungrouped(self):
        assert format_number(0) == "0"
        assert format_number(999) == "999"

    def test_numeric_strings_accepted(self):
        assert format_number("12345") == "12.345"
        assert format_number(" 1e3 ") == "1.000"

    def test_numpy_values(self):
        assert format_number(np.int64(1234567)) == "1.234.567"

    def test_wrapped_numbers_accepted(self):
        """Booleans and number wrappers coerce like plain numbers."""
        assert format_number(Decimal("1234")) == "1.234"
        assert format_number(Decimal("1234.5")) == "1.235"
        assert format_number(Fraction(5, 1)) == "5"
        assert format_number(True) == "1"
        assert format_number(False) == "0"

    def test_large_int_exact(self):
        assert format_number(10**21) == "1.000.000.000.000.000.000.000"

    @pytest.mark.parametrize("value", [0, 7, 1000, 98765.4, 1e15, 123456789])
    def test_only_digits_and_separator(self, value):
        assert _GROUPED_RE.match(format_number(value))

    # -----------------------------------------------------------------
    # Rounding and sign
    # -----------------------------------------------------------------

    def test_rounds_to_whole_number(self):
        assert format_number(1234.4) == "1.234"
        assert format_number(1234.5) == "1.235"

    def test_negative_values(self):
        assert format_number(-1234) == "-1.234"
        assert format_number(-1234.5) == "-1.235"

    def test_negative_rounding_to_zero_has_no_sign(self):
        assert format_number(-0.2) == "0"
        assert format_number(-0.0) == "0"

    def test_infinity(self):
        assert format_number(math.inf) == "∞"
        assert format_number("-Infinity") == "-∞"

    # -----------------------------------------------------------------
    # Config
    # -----------------------------------------------------------------

    def test_custom_group_separator(self):
        locale = LocaleConfig(group_separator=",")
        assert format_number(1234567, locale) == "1,234,567"

    def test_custom_placeholder(self):
        config = DisplayConfig(locale=LocaleConfig(invalid_placeholder="n/a"))
        assert format_number(None, config) == "n/a"


class TestFormatCurrency:
    """Tests for format_currency()."""

    @pytest.mark.parametrize("value", [None, float("nan"), "abc"])
    def test_invalid_returns_placeholder(self, value):
        assert format_currency(value) == "-"

    def test_positive_integer(self):
        assert format_currency(1234567) == "Rp 1.234.567"

    def test_zero(self):
        assert format_currency(0) == "Rp 0"

    def test_numeric_string(self):
        assert format_currency("1234") == "Rp 1.234"

    def test_rounding(self):
        assert format_currency(1234.9) == "Rp 1.235"
        assert format_currency(1234.4) == "Rp 1.234"
        assert format_currency(0.5) == "Rp 1"

    def test_negative_sign_before_symbol_by_default(self):
        assert format_currency(-98765) == "-Rp 98.765"

    def test_negative_sign_after_symbol(self):
        locale = LocaleConfig(negative_sign="after_symbol")
        assert format_currency(-98765, locale) == "Rp -98.765"

    def test_negative_keeps_digits_and_grouping(self):
        compact = format_currency(-98765).replace(" ", "")
        assert re.match(r"^-?Rp-?\d{1,3}(\.\d{3})*$", compact)

    def test_small_negative_renders_zero(self):
        assert format_currency(-0.4) == "Rp 0"

    def test_custom_symbol_and_spacing(self):
        locale = LocaleConfig(currency_symbol="IDR", symbol_spacing=" ")
        assert format_currency(2500, locale) == "IDR 2.500"

    def test_never_raises_for_odd_types(self):
        assert format_currency([1]) == "-"
        assert format_currency(object()) == "-"

    def test_wrapped_numbers_accepted(self):
        assert format_currency(Fraction(5, 1)) == "Rp 5"
        assert format_currency(Decimal("-98765")) == "-Rp 98.765"
        assert format_currency(True) == "Rp 1"
