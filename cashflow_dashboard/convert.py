"""
Compact sheet to record conversion for cashflow-dashboard.

Sheet data reaches the dashboard in a compact, column-header-once form::

    {
        "Kas Masuk": {
            "headers": ["Tanggal", "Keterangan", "Jumlah"],
            "data": [["2024-01-02", "Penjualan", 1500000], ...],
        },
        "Ringkasan": [...],          # already structured, left alone
    }

``convert_to_objects()`` expands every compact sheet into a list of
per-row records keyed by header. Any other sheet value is passed through
unchanged, on the assumption the caller knows what to do with it.

Positional rules for one row:
  - header *i* maps to row value *i*;
  - a short row fills the missing headers with ``None`` (the key is
    still present);
  - a long row's extra values are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from cashflow_dashboard.exceptions import SheetShapeError

logger = logging.getLogger(__name__)

Record = dict[str, Any]


def _is_row_sequence(value: Any) -> bool:
    """True for list-like values; strings and bytes don't count as rows."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_compact_sheet(value: Any) -> bool:
    """Return True if *value* has the ``{"headers": [...], "data": [...]}`` shape."""
    if not isinstance(value, Mapping):
        return False
    return _is_row_sequence(value.get("headers")) and _is_row_sequence(value.get("data"))


def row_to_record(headers: Sequence[str], row: Sequence[Any]) -> Record:
    """Zip one row against the headers.

    Iterates over header positions only, so extra row values are never
    read. Positions past the end of the row map to ``None``. When a
    header repeats, the later position wins.
    """
    row_length = len(row)
    record: Record = {}
    for i in range(len(headers)):
        record[headers[i]] = row[i] if i < row_length else None
    return record


def convert_sheet(name: str, sheet: Mapping[str, Any]) -> list[Record]:
    """Convert one compact sheet into a list of records, preserving row order.

    Raises:
        SheetShapeError: If a row is not a sequence of cell values.
    """
    headers = list(sheet["headers"])
    records: list[Record] = []
    for index, row in enumerate(sheet["data"]):
        if not _is_row_sequence(row):
            raise SheetShapeError(
                f"Sheet '{name}': row {index} must be a sequence of values, "
                f"got {type(row).__name__}"
            )
        records.append(row_to_record(headers, row))
    return records


def convert_to_objects(sheets: Mapping[str, Any]) -> dict[str, Any]:
    """Expand every compact sheet in a sheet collection into records.

    Args:
        sheets: Mapping of sheet name -> compact sheet or any other value.

    Returns:
        A new dict with exactly the same keys, in the same order. Compact
        sheets become ``list[Record]``; everything else is passed through
        as the same object. The input is not mutated.

    Raises:
        SheetShapeError: If *sheets* is not a mapping, or a compact sheet
            contains a row that is not a sequence.
    """
    if not isinstance(sheets, Mapping):
        raise SheetShapeError(
            f"Sheet collection must be a mapping of sheet name -> sheet, "
            f"got {type(sheets).__name__}"
        )

    result: dict[str, Any] = {}
    for name, sheet in sheets.items():
        if is_compact_sheet(sheet):
            result[name] = convert_sheet(name, sheet)
            logger.debug(
                "Converted sheet '%s': %d row(s) x %d header(s)",
                name,
                len(result[name]),
                len(sheet["headers"]),
            )
        else:
            result[name] = sheet
            logger.debug(
                "Sheet '%s' is not compact (%s), passing through",
                name,
                type(sheet).__name__,
            )
    return result
