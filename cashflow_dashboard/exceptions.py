"""
Custom exception hierarchy for cashflow-dashboard.

Only structural problems raise. Bad *values* never do: the formatters
degrade them to the ``"-"`` placeholder so the render path keeps going.
"""


class CashflowDashboardError(Exception):
    """Base exception for all cashflow-dashboard errors."""


class SheetShapeError(CashflowDashboardError):
    """Raised when sheet input is structurally unusable.

    This happens if:
    - The sheet collection itself is not a mapping.
    - A row inside a compact sheet is not a sequence of cell values.

    Sheets that merely lack ``headers``/``data`` are not errors; they are
    passed through untouched.
    """


class ConfigValidationError(CashflowDashboardError):
    """Raised when dashboard.yaml is empty or cannot be interpreted."""
