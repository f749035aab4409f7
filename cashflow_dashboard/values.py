"""
Raw cell value canonicalization for cashflow-dashboard.

Sheet cells arrive untyped: real numbers, numeric-looking text, ``None``
for blanks, and occasionally anything else a spreadsheet export produced.
Every rule that inspects a cell goes through ``canonicalize()`` first,
which sorts the value into one of four tagged variants:

- ``Absent``:  ``None`` (blank cell, missing position in a short row).
- ``Invalid``: NaN, containers, dates and other objects -- nothing a
  number can be read from.
- ``Numeric``: a genuine ``int``/``float`` or numpy integer/floating scalar,
  or a *boxed* one: a ``bool``, ``Decimal``, ``Fraction`` or other
  ``numbers.Real`` wrapper that holds a number without being one.
- ``Text``:    a string, not yet interpreted.

Two rules are built on top of that single step and deliberately differ:

- the *strict* gate (``classify.is_numeric_value``) accepts only finite,
  unboxed ``Numeric`` values;
- the *lenient* coercion (``coerce_number``, used by the formatters) also
  unboxes wrapped numbers and reads numbers out of ``Text`` the way a
  browser's ``Number(value)`` does.
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

import numpy as np


@dataclass(frozen=True)
class Absent:
    """No value at all (``None``)."""


@dataclass(frozen=True)
class Invalid:
    """A value that cannot be read as a number or as text."""


@dataclass(frozen=True)
class Numeric:
    """A real number. ``int`` precision is kept; NaN never gets here.

    ``boxed`` marks a number read out of a wrapper type (``bool``,
    ``Decimal``, ``Fraction``); only lenient coercion accepts those.
    """

    value: int | float
    boxed: bool = False


@dataclass(frozen=True)
class Text:
    """A string cell, uninterpreted."""

    value: str


CanonicalValue = Union[Absent, Invalid, Numeric, Text]

# Decimal literal with optional sign, fraction and exponent, or Infinity.
# Python's float() alone is too permissive ("nan", "1_000", "inf").
_DECIMAL_LITERAL_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)

# Unsigned hex / octal / binary integer literal
_RADIX_LITERAL_RE = re.compile(
    r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII
)


def _unbox(value: Decimal | numbers.Real) -> int | float | None:
    """Read the number held by a wrapper type, or ``None`` for NaN."""
    if isinstance(value, Decimal):
        if value.is_nan():
            return None
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, numbers.Rational) and value.denominator == 1:
        return int(value.numerator)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return None if math.isnan(number) else number


def canonicalize(value: Any) -> CanonicalValue:
    """Sort a raw cell value into its tagged variant.

    ``bool`` is checked before ``int`` because it subclasses it; a
    checkbox cell holds a 0/1 but is not a quantity, so it is boxed.
    """
    if value is None:
        return Absent()
    if isinstance(value, (bool, np.bool_)):
        return Numeric(int(value), boxed=True)
    if isinstance(value, (int, np.integer)):
        return Numeric(int(value))
    if isinstance(value, (float, np.floating)):
        number = float(value)
        if math.isnan(number):
            return Invalid()
        return Numeric(number)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (Decimal, numbers.Real)):
        unboxed = _unbox(value)
        if unboxed is None:
            return Invalid()
        return Numeric(unboxed, boxed=True)
    return Invalid()


def parse_numeric_text(text: str) -> int | float | None:
    """Read a number from a string, or return ``None`` if it is not one.

    Surrounding whitespace is ignored and a blank string reads as ``0``.
    Trailing garbage (``"12.34xyz"``) and thousands separators
    (``"1,000"``) are rejected rather than partially parsed.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    if _RADIX_LITERAL_RE.fullmatch(stripped):
        return int(stripped, 0)
    if _DECIMAL_LITERAL_RE.fullmatch(stripped):
        if stripped.endswith("Infinity"):
            return -math.inf if stripped.startswith("-") else math.inf
        return float(stripped)
    return None


def coerce_number(value: Any) -> int | float | None:
    """Leniently coerce a raw value to a number.

    Returns ``None`` when no number can be read (absent, invalid, or
    non-numeric text). Infinities are returned as-is.
    """
    canonical = canonicalize(value)
    if isinstance(canonical, Numeric):
        return canonical.value
    if isinstance(canonical, Text):
        return parse_numeric_text(canonical.value)
    return None
