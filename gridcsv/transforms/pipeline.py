"""
Encode pipeline orchestrator for gridcsv.

Runs the export-side steps over a grid of typed cells.  The order is:

1. **Padding**: Pad short rows with ``EmptyCell`` (ragged-grid repair).
2. **ValueFormatter**: Canonical text for every cell.
3. **EscapeCodec**: Escape line breaks, tabs (TAB mode) and the marker.
4. **RowSerializer**: Join the fields of each row with the delimiter.

The pipeline receives the full ``CodecConfig`` so each step sees the mode,
marker and comma policy.  It does not touch any byte sink; that is the
job of ``export.write_document``.

Returns an ``EncodeResult`` with the lines plus the shape statistics the
caller logs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gridcsv.cells import EMPTY, DelimiterMode, Grid
from gridcsv.config import CodecConfig
from gridcsv.export import serialize_row
from gridcsv.transforms.escape import EscapeCodec
from gridcsv.transforms.padding import pad_rows
from gridcsv.transforms.values import format_cell

logger = logging.getLogger(__name__)


@dataclass
class EncodeResult:
    """Output of the encode pipeline.

    Attributes:
        lines: One serialized line per grid row, without terminators.
        n_rows: Number of rows.
        n_columns: Width of the (padded) grid.
        padded_rows: Rows that were shorter than the widest row.
        raw_delimiter_fields: CSV fields written with an unescaped comma.
            Such fields do not read back intact.
    """

    lines: list[str] = field(default_factory=list)
    n_rows: int = 0
    n_columns: int = 0
    padded_rows: int = 0
    raw_delimiter_fields: int = 0


class GridEncoder:
    """Turns a grid of ``CellValue`` into serialized lines.

    The encoder is **stateless** between calls: each ``run()`` processes
    its grid independently.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()
        self.codec = EscapeCodec(
            self.config.mode,
            self.config.escape_marker,
            self.config.escape_csv_delimiter,
        )

    def run(self, grid: Grid) -> EncodeResult:
        """Run all steps and return the serialized lines.

        Raises:
            TypeError: If a cell is not a ``CellValue``.
        """
        mode = self.config.mode

        # -- Step 1: Padding ----------------------------------------------
        padded = pad_rows(grid, EMPTY)
        if padded.padded_rows:
            logger.warning(
                "Ragged grid: padded %d row(s) to %d column(s)",
                padded.padded_rows,
                padded.width,
            )

        # -- Steps 2-4: format, escape, join -------------------------------
        logger.debug(
            "Encoding %d row(s) x %d column(s) (%s mode)",
            len(padded.rows), padded.width, mode.value,
        )
        check_commas = mode is DelimiterMode.CSV and not self.codec.escape_delimiter
        raw_delimiter_fields = 0
        lines: list[str] = []
        for row in padded.rows:
            fields: list[str] = []
            for cell in row:
                text = self.codec.escape(format_cell(cell, mode))
                if check_commas and "," in text:
                    raw_delimiter_fields += 1
                fields.append(text)
            lines.append(serialize_row(fields, mode))

        if raw_delimiter_fields:
            logger.warning(
                "%d CSV field(s) contain a raw comma and will split on re-import; "
                "set escape_csv_delimiter=True or use TAB mode to keep them intact",
                raw_delimiter_fields,
            )

        return EncodeResult(
            lines=lines,
            n_rows=len(lines),
            n_columns=padded.width,
            padded_rows=padded.padded_rows,
            raw_delimiter_fields=raw_delimiter_fields,
        )
