"""
pandas bridge for converted sheets.

Chart and summary code downstream of the dashboard works on DataFrames.
These helpers build them from compact sheets using the same positional
rules as ``convert.row_to_record`` so both views of a sheet agree.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pandas as pd

from cashflow_dashboard.convert import convert_sheet, is_compact_sheet
from cashflow_dashboard.exceptions import SheetShapeError

logger = logging.getLogger(__name__)


def sheet_to_frame(sheet: Mapping[str, Any], name: str = "sheet") -> pd.DataFrame:
    """Build a DataFrame from one compact sheet.

    Columns follow header order (a repeated header appears once). Short
    rows leave missing cells as ``NaN``/``None``; long rows are truncated.

    Raises:
        SheetShapeError: If *sheet* is not a compact sheet or has a bad row.
    """
    if not is_compact_sheet(sheet):
        raise SheetShapeError(
            f"Sheet '{name}' is not a compact sheet with 'headers' and 'data'"
        )
    columns = list(dict.fromkeys(sheet["headers"]))
    records = convert_sheet(name, sheet)
    return pd.DataFrame.from_records(records, columns=columns)


def sheets_to_frames(sheets: Mapping[str, Any]) -> dict[str, pd.DataFrame]:
    """Build one DataFrame per compact sheet, skipping passthrough sheets.

    Raises:
        SheetShapeError: If *sheets* is not a mapping.
    """
    if not isinstance(sheets, Mapping):
        raise SheetShapeError(
            f"Sheet collection must be a mapping, got {type(sheets).__name__}"
        )

    frames: dict[str, pd.DataFrame] = {}
    for name, sheet in sheets.items():
        if not is_compact_sheet(sheet):
            logger.debug("Sheet '%s' has no headers/data, no frame built", name)
            continue
        frames[name] = sheet_to_frame(sheet, name=name)
    logger.debug("Built %d frame(s) from %d sheet(s)", len(frames), len(sheets))
    return frames
