"""
Demo script: convert a sample sheet collection and print it as the dashboard would.

Usage:
    uv run python scripts/render_sample.py                      # id-ID defaults
    uv run python scripts/render_sample.py --config dashboard.yaml

Compact sheets are expanded into records, each column is classified, and
numeric columns are rendered as currency. Passthrough sheets are listed
but not rendered.
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

SAMPLE_SHEETS = {
    "Kas Masuk": {
        "headers": ["Tanggal", "Keterangan", "Jumlah"],
        "data": [
            ["2024-01-02", "Penjualan drone", 1500000],
            ["2024-01-15", "Jasa penyemprotan", 750000.5],
            ["2024-01-20", "Sewa alat"],
        ],
    },
    "Kas Keluar": {
        "headers": ["Tanggal", "Keterangan", "Jumlah"],
        "data": [
            ["2024-01-05", "Suku cadang", -325000],
            ["2024-01-18", "Bahan bakar", "87500"],
        ],
    },
    "Catatan": "Data per Januari 2024",
}

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.DEBUG if "--verbose" in sys.argv else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("render_sample")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import cashflow_dashboard as cd

    config = cd.DEFAULT_CONFIG
    if "--config" in sys.argv:
        config = cd.load_config(sys.argv[sys.argv.index("--config") + 1])

    sheets = cd.convert_to_objects(SAMPLE_SHEETS)

    for name, records in sheets.items():
        if not cd.is_compact_sheet(SAMPLE_SHEETS[name]):
            log.info("Sheet '%s': passthrough (%s)", name, type(records).__name__)
            continue

        kinds = cd.classify_columns(records)
        log.info("=" * 70)
        log.info("Sheet '%s': %d row(s), columns=%s", name, len(records), kinds)
        for record in records:
            cells = []
            for column, value in record.items():
                if kinds[column] == "numeric":
                    cells.append(cd.format_currency(value, config))
                else:
                    cells.append("-" if value is None else str(value))
            log.info("  %s", " | ".join(cells))

    log.info("Done.")


if __name__ == "__main__":
    main()
