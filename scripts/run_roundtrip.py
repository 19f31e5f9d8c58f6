"""
Demo script: export a sample grid in both delimiter modes and read it back.

Usage:
    uv run python scripts/run_roundtrip.py              # writes under outputs/
    uv run python scripts/run_roundtrip.py --lf         # LF instead of CRLF

Each mode gets its own file under outputs/.  The script logs the byte
layout of every file and checks that the grid survives the round trip.
"""

from __future__ import annotations

import logging
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_roundtrip")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _sample_grid() -> list[list[object]]:
    """A small grid touching every cell kind and every reserved character."""
    from gridcsv import ErrorCode

    return [
        ["name", "amount", "booked", "paid", "note"],
        ["Müller GmbH", Decimal("1234567890.123456789"), date(2024, 3, 7), True,
         "line one\r\nline two"],
        ["C:\\data\\in", 0.1, date(1999, 12, 31), False, "tab\there"],
        ["marker \\^ literal", 1e21, None, None, ErrorCode.DIV0],
        ["short row"],
    ]


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import gridcsv
    from gridcsv.config import CodecConfig

    terminator = "lf" if "--lf" in sys.argv else "crlf"
    grid = gridcsv.grid_from_values(_sample_grid())

    for mode, suffix in ((gridcsv.DelimiterMode.TAB, "tsv"), (gridcsv.DelimiterMode.CSV, "csv")):
        path = OUTPUT_ROOT / f"sample.{suffix}"
        config = CodecConfig(mode=mode, line_terminator=terminator)
        doc = gridcsv.Document(path, config)

        log.info("=" * 70)
        log.info("Mode: %s -> %s", mode.value, path)
        log.info("=" * 70)

        doc.write(grid)
        info = doc.describe()
        log.info(
            "  %d rows x %d cols, %s bytes, bom=%s, terminator=%s",
            info.rows, info.columns, f"{info.size_bytes:,}", info.has_bom,
            info.line_terminator,
        )

        rows = doc.read()
        for row in rows:
            log.info("  %r", row)

    log.info("All modes processed.")


if __name__ == "__main__":
    main()
