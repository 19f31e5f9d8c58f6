"""
Document handle for gridcsv.

The ``Document`` class is a **handle object** that binds a file path to
the ``CodecConfig`` used for it.  It replaces any notion of an implicit
"current document": every export and import goes through an explicit
handle (or the explicit arguments of the module-level functions).

It unifies the **write side** (``write()``) and the **read side**
(``read()``, ``read_frame()``, ``describe()``) so the same settings are
used in both directions of a round trip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from gridcsv._pipeline import decode_bytes, run_export, run_import
from gridcsv.cells import Grid
from gridcsv.config import CodecConfig
from gridcsv.detect import sniff_line_terminator
from gridcsv.exceptions import SourceReadError
from gridcsv.frame import grid_to_dataframe
from gridcsv.reader import strip_bom

logger = logging.getLogger(__name__)


@dataclass
class DocumentInfo:
    """Snapshot of a document on disk, returned by ``Document.describe()``.

    Attributes:
        path: Path of the document.
        mode: Delimiter mode from the handle's config.
        rows: Number of rows.
        columns: Width of the grid.
        size_bytes: File size.
        has_bom: Whether the file starts with a UTF-8 BOM (never true for
            files written by this library).
        line_terminator: ``"lf"`` / ``"crlf"`` as found in the file, or
            ``None`` for a file without line breaks.
    """

    path: str
    mode: str
    rows: int
    columns: int
    size_bytes: int
    has_bom: bool
    line_terminator: str | None


class Document:
    """Handle for one delimited document.

    Attributes:
        path: Location of the document.
        config: The ``CodecConfig`` used to write and read it.
    """

    def __init__(self, path: str | Path, config: CodecConfig) -> None:
        self.path = Path(path)
        self.config = config

    def __repr__(self) -> str:
        return (
            f"Document(path={str(self.path)!r}, mode={self.config.mode.value!r}, "
            f"line_terminator={self.config.line_terminator!r})"
        )

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    # -- Write side ---------------------------------------------------------

    def write(self, grid: Grid) -> int:
        """Encode *grid* and overwrite the document with it.

        Returns:
            Number of bytes written.

        Raises:
            ExportError: If the file cannot be written.
        """
        return run_export(grid, self.path, self.config)

    # -- Read side ----------------------------------------------------------

    def read(self) -> list[list[str]]:
        """Read the document back into a grid of strings."""
        return run_import(self.path, self.config)

    def read_frame(self, header: bool = True) -> pd.DataFrame:
        """Read the document into a string-typed DataFrame."""
        return grid_to_dataframe(self.read(), header=header)

    def describe(self) -> DocumentInfo:
        """Decode the document and summarise its shape and byte layout.

        Raises:
            SourceReadError: If the file cannot be read.
            DecodeError: If the content cannot be decoded.
        """
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            raise SourceReadError(f"Failed to read {self.path}: {exc}") from exc
        rows = decode_bytes(data, self.config)
        _, has_bom = strip_bom(data)
        return DocumentInfo(
            path=str(self.path),
            mode=self.config.mode.value,
            rows=len(rows),
            columns=len(rows[0]) if rows else 0,
            size_bytes=len(data),
            has_bom=has_bom,
            line_terminator=sniff_line_terminator(data),
        )
