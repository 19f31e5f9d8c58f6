"""
Value formatter for gridcsv.

Converts one ``CellValue`` into its canonical text form.  Escaping of
reserved characters is **not** done here; ``escape.py`` runs afterwards.

Canonical forms:
  - Empty   -> ``""``
  - Text    -> unchanged
  - Number  -> exact positional decimal (see ``numbers.format_number``)
  - Date    -> ``YYYY-MM-DD``, independent of locale
  - Boolean -> ``TRUE`` / ``FALSE``
  - Error   -> the error token, e.g. ``#DIV/0!``
"""

from __future__ import annotations

from datetime import date

from gridcsv.cells import (
    BooleanCell,
    CellValue,
    DateCell,
    DelimiterMode,
    EmptyCell,
    ErrorCell,
    NumberCell,
    TextCell,
)
from gridcsv.transforms.numbers import format_number

TRUE_TOKEN = "TRUE"
FALSE_TOKEN = "FALSE"


def format_date(value: date) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_cell(cell: CellValue, mode: DelimiterMode) -> str:
    """Return the canonical text of *cell*.

    Formatting is the same in both delimiter modes; *mode* is accepted so
    the formatter shares the signature of the other per-field steps.

    Raises:
        TypeError: If *cell* is not a ``CellValue``.
    """
    if isinstance(cell, TextCell):
        return cell.text
    if isinstance(cell, NumberCell):
        return format_number(cell.value)
    if isinstance(cell, EmptyCell):
        return ""
    if isinstance(cell, DateCell):
        return format_date(cell.value)
    if isinstance(cell, BooleanCell):
        return TRUE_TOKEN if cell.value else FALSE_TOKEN
    if isinstance(cell, ErrorCell):
        return cell.code.value
    raise TypeError(f"Not a cell value: {cell!r}")
