"""
cashflow-dashboard: data shaping and display formatting for a cashflow dashboard.

Public API surface:

- ``convert_to_objects(sheets)`` -- expand compact ``{headers, data}``
  sheets into per-row records; other sheets pass through.
- ``is_numeric_value(value)`` / ``is_date_column(name)`` -- column and
  value classification heuristics.
- ``format_number(value)`` / ``format_currency(value)`` -- id-ID display
  formatting; unusable values render as ``"-"`` and never raise.

Supporting helpers (``classify_columns``, ``sheets_to_frames``,
``load_config``) are re-exported for convenience.
"""

from __future__ import annotations

from cashflow_dashboard.classify import (
    ColumnKind,
    classify_columns,
    column_kind,
    is_date_column,
    is_numeric_value,
)
from cashflow_dashboard.config import (
    DEFAULT_CONFIG,
    DisplayConfig,
    LocaleConfig,
    load_config,
    save_config,
)
from cashflow_dashboard.convert import convert_to_objects, is_compact_sheet
from cashflow_dashboard.exceptions import (
    CashflowDashboardError,
    ConfigValidationError,
    SheetShapeError,
)
from cashflow_dashboard.formatting import format_currency, format_number
from cashflow_dashboard.frames import sheet_to_frame, sheets_to_frames

__all__ = [
    "convert_to_objects",
    "is_compact_sheet",
    "is_numeric_value",
    "is_date_column",
    "column_kind",
    "classify_columns",
    "ColumnKind",
    "format_number",
    "format_currency",
    "sheet_to_frame",
    "sheets_to_frames",
    "DisplayConfig",
    "LocaleConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    "CashflowDashboardError",
    "SheetShapeError",
    "ConfigValidationError",
]
