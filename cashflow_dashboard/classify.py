"""
Column and value classification heuristics for cashflow-dashboard.

The dashboard decides how to draw a column from two signals:

- its *name*: Indonesian/English date-ish headers such as ``Tanggal``,
  ``Date Created`` or ``Bulan 3`` mark a time axis;
- its *values*: a column whose cells are all real numbers can be summed
  and charted.

``is_numeric_value`` is a strict type gate, narrower than the lenient
coercion used by the formatters: ``"123"`` formats fine but is not a
numeric value.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from cashflow_dashboard.values import Absent, CanonicalValue, Numeric, canonicalize

ColumnKind = Literal["date", "numeric", "text"]

# "bulan" followed by a month/period number, e.g. "Bulan 1", "BULAN10"
_BULAN_NUMBER_RE = re.compile(r"bulan\s*\d+", re.IGNORECASE | re.ASCII)

_DATE_KEYWORDS = ("tanggal", "date")


def _is_finite_number(canonical: CanonicalValue) -> bool:
    return (
        isinstance(canonical, Numeric)
        and not canonical.boxed
        and math.isfinite(canonical.value)
    )


def is_numeric_value(value: Any) -> bool:
    """Return True only for a finite, genuinely numeric value.

    Numeric strings, ``None``, NaN, infinities, booleans and wrapper
    objects such as ``Decimal`` are all rejected.
    """
    return _is_finite_number(canonicalize(value))


def is_date_column(name: Any) -> bool:
    """Return True if a column name denotes a date/time column.

    Matches (case-insensitively) names containing ``tanggal`` or ``date``,
    or ``bulan`` followed by a number. A bare ``Bulan`` does not match.
    """
    if not isinstance(name, str):
        return False
    lowered = name.lower()
    if any(keyword in lowered for keyword in _DATE_KEYWORDS):
        return True
    return _BULAN_NUMBER_RE.search(name) is not None


def column_kind(name: Any, values: Iterable[Any]) -> ColumnKind:
    """Classify one column by its name, then by its values.

    A column is ``"numeric"`` when it has at least one value and every
    non-absent value passes ``is_numeric_value``.
    """
    if is_date_column(name):
        return "date"

    seen_value = False
    for value in values:
        canonical = canonicalize(value)
        if isinstance(canonical, Absent):
            continue
        if not _is_finite_number(canonical):
            return "text"
        seen_value = True
    return "numeric" if seen_value else "text"


def classify_columns(records: Iterable[Mapping[str, Any]]) -> dict[str, ColumnKind]:
    """Classify every column appearing in a list of records.

    Columns are reported in first-seen order. A record missing a column
    counts as an absent value for it.
    """
    records = list(records)
    columns: dict[str, None] = {}
    for record in records:
        for key in record:
            columns.setdefault(key, None)

    return {
        name: column_kind(name, (record.get(name) for record in records))
        for name in columns
    }
