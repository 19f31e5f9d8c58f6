"""
Internal orchestration for gridcsv.

Connects ``CodecConfig`` with the encode pipeline, the writer and the
reader so that the module-level functions in ``__init__.py`` and the
``Document`` handle share one export sequence and one import sequence.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging

from gridcsv.cells import Grid
from gridcsv.config import CodecConfig
from gridcsv.export import Sink, encode_lines, write_document
from gridcsv.reader import Source, decode_document, read_document
from gridcsv.transforms.pipeline import GridEncoder

logger = logging.getLogger(__name__)


def encode_grid(grid: Grid, config: CodecConfig) -> bytes:
    """Encode *grid* to an in-memory UTF-8 document."""
    result = GridEncoder(config).run(grid)
    return encode_lines(result.lines, config.newline)


def run_export(grid: Grid, sink: Sink, config: CodecConfig) -> int:
    """Encode *grid* and write it to *sink*.

    Steps:
      1. Run the encode pipeline (pad -> format -> escape -> join).
      2. Stream the lines to the sink as UTF-8 without a BOM.

    Returns:
        Number of bytes written.
    """
    result = GridEncoder(config).run(grid)
    written = write_document(result.lines, sink, config.newline)
    logger.info(
        "Export complete: %d row(s) x %d column(s), %d bytes (%s mode)",
        result.n_rows,
        result.n_columns,
        written,
        config.mode.value,
    )
    return written


def decode_bytes(data: bytes, config: CodecConfig) -> list[list[str]]:
    return decode_document(
        data,
        config.mode,
        escape_marker=config.escape_marker,
        escape_delimiter=config.escape_csv_delimiter,
    )


def run_import(source: Source, config: CodecConfig) -> list[list[str]]:
    """Read and decode *source* into a grid of strings."""
    return read_document(
        source,
        config.mode,
        escape_marker=config.escape_marker,
        escape_delimiter=config.escape_csv_delimiter,
    )
