"""
Shared test fixtures for cashflow-dashboard tests.

Sample sheets mimic what the dashboard receives from its data loader:
compact ``{headers, data}`` sheets plus an already-structured summary.
"""

from __future__ import annotations

import pytest

CASH_IN_HEADERS = ["Tanggal", "Keterangan", "Jumlah"]
CASH_IN_ROWS = [
    ["2024-01-02", "Penjualan drone", 1500000],
    ["2024-01-15", "Jasa penyemprotan", 750000.5],
    ["2024-01-20", "Sewa alat"],
]


@pytest.fixture
def compact_sheets() -> dict:
    """A sheet collection with two compact sheets and one passthrough value."""
    return {
        "Kas Masuk": {
            "headers": list(CASH_IN_HEADERS),
            "data": [list(row) for row in CASH_IN_ROWS],
        },
        "Bulanan": {
            "headers": ["Bulan 1", "Bulan 2", "Total"],
            "data": [[100, 200, 300], [None, 50, 50]],
        },
        "Ringkasan": [{"label": "Saldo", "value": 2250000}],
    }


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (convert -> classify -> format)",
    )
