"""
gridcsv: lossless CSV / TSV export and import for spreadsheet grids.

Writes a grid of typed cell values as UTF-8 delimited text (never with a
byte-order mark) keeping full numeric precision, ISO dates, and a
reversible escape for line breaks and tabs inside fields; reads such files
back into a grid of strings.

Public API surface:

- ``write(grid, dest, ...)`` -- export a grid to a path or binary stream.
- ``read(source, ...)`` -- import a path, binary stream or bytes.
- ``encode(grid, ...)`` / ``decode(data, ...)`` -- the same, in memory.
- ``open(path, ...)`` -- returns a ``Document`` handle bound to a path and
  its ``CodecConfig``.

When ``mode`` is omitted for a path, it follows the extension (``.csv`` ->
CSV, ``.tsv``/``.tab``/``.txt`` -> TAB).  Streams and in-memory data
default to CSV.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gridcsv._pipeline import decode_bytes, encode_grid, run_export, run_import
from gridcsv.cells import (
    BooleanCell,
    CellValue,
    DateCell,
    DelimiterMode,
    EmptyCell,
    ErrorCell,
    ErrorCode,
    Grid,
    NumberCell,
    TextCell,
    grid_from_values,
    to_cell,
)
from gridcsv.config import CodecConfig, config_for_path, load_config
from gridcsv.document import Document, DocumentInfo
from gridcsv.export import Sink
from gridcsv.reader import Source

__all__ = [
    "open",
    "write",
    "read",
    "encode",
    "decode",
    "Document",
    "DocumentInfo",
    "CodecConfig",
    "DelimiterMode",
    "CellValue",
    "EmptyCell",
    "TextCell",
    "NumberCell",
    "DateCell",
    "BooleanCell",
    "ErrorCell",
    "ErrorCode",
    "to_cell",
    "grid_from_values",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _resolve_config(
    target: object,
    mode: DelimiterMode | str | None,
    config: CodecConfig | None,
) -> CodecConfig:
    """Pick the config for one call.

    An explicit *config* wins; *mode*, when also given, overrides its mode.
    Without a config, paths derive the mode from their extension and
    everything else defaults to CSV.
    """
    if config is not None:
        if mode is not None:
            config = config.model_copy(update={"mode": DelimiterMode(mode)})
        return config
    if isinstance(target, (str, Path)):
        return config_for_path(target, mode)
    return CodecConfig(mode=DelimiterMode(mode or DelimiterMode.CSV))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def open(
    path: str | Path,
    mode: DelimiterMode | str | None = None,
    config_path: str | Path | None = None,
) -> Document:
    """Return a ``Document`` handle for *path*.

    Args:
        path: The CSV/TSV file (it need not exist yet).
        mode: Explicit delimiter mode; overrides both the extension and a
            loaded config.
        config_path: Optional YAML config (see ``gridcsv.config``).  When
            given, marker, terminator and comma policy come from it.

    Returns:
        A ``Document`` bound to *path*.

    Raises:
        UnknownFormatError: If neither *mode* nor *config_path* is given and
            the extension is not recognised.

    Examples::

        doc = gridcsv.open("out/report.tsv")
        doc.write([[gridcsv.TextCell("a\\tb"), gridcsv.NumberCell(1)]])
        rows = doc.read()
    """
    if config_path is not None:
        logger.info("open() -- loading config from %s", config_path)
        config = _resolve_config(path, mode, load_config(config_path))
    else:
        config = _resolve_config(path, mode, None)
    return Document(path, config)


def write(
    grid: Grid,
    dest: Sink,
    mode: DelimiterMode | str | None = None,
    config: CodecConfig | None = None,
) -> int:
    """Export *grid* to *dest* (a path or a binary stream).

    Short rows are padded with empty cells.  An existing file is
    overwritten; on failure it is left partially written.

    Returns:
        Number of bytes written.

    Raises:
        ExportError: If the destination cannot be written.
        UnknownFormatError: If the mode cannot be derived from *dest*.
    """
    cfg = _resolve_config(dest, mode, config)
    return run_export(grid, dest, cfg)


def read(
    source: Source,
    mode: DelimiterMode | str | None = None,
    config: CodecConfig | None = None,
) -> list[list[str]]:
    """Import *source* (a path, binary stream or bytes) as a grid of strings.

    Raises:
        SourceReadError: If the source cannot be read.
        InvalidEncodingError: If the bytes are not valid UTF-8.
        MalformedEscapeError: If a field holds a broken escape sequence.
    """
    cfg = _resolve_config(source, mode, config)
    return run_import(source, cfg)


def encode(
    grid: Grid,
    mode: DelimiterMode | str | None = None,
    config: CodecConfig | None = None,
) -> bytes:
    """Encode *grid* into UTF-8 document bytes (no BOM)."""
    return encode_grid(grid, _resolve_config(None, mode, config))


def decode(
    data: bytes,
    mode: DelimiterMode | str | None = None,
    config: CodecConfig | None = None,
) -> list[list[str]]:
    """Decode document bytes (BOM optional) into a grid of strings."""
    return decode_bytes(data, _resolve_config(None, mode, config))
