"""
pandas bridge for gridcsv.

A ``pandas.DataFrame`` is the usual in-memory stand-in for a live sheet
outside the spreadsheet host.  These helpers convert between a DataFrame
and the codec's grid types:

- ``grid_from_dataframe`` -> typed ``CellValue`` grid ready for export.
  Missing values (NaN, NaT, ``pd.NA``, ``None``) become empty cells,
  timestamps become dates (time of day dropped), numpy scalars are
  unwrapped to their Python equivalents first.
- ``grid_to_dataframe`` -> string-typed DataFrame from an imported grid.
  No numeric/date coercion is attempted; that stays with the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np
import pandas as pd

from gridcsv.cells import EMPTY, CellValue, TextCell, to_cell

logger = logging.getLogger(__name__)


def _frame_value_to_cell(value: Any) -> CellValue:
    if value is None or (
        not isinstance(value, str) and pd.api.types.is_scalar(value) and pd.isna(value)
    ):
        return EMPTY
    if isinstance(value, pd.Timestamp):
        return to_cell(value.to_pydatetime())
    if isinstance(value, np.datetime64):
        return to_cell(pd.Timestamp(value).to_pydatetime())
    if isinstance(value, np.generic):
        value = value.item()
    return to_cell(value)


def grid_from_dataframe(
    df: pd.DataFrame,
    include_header: bool = True,
) -> list[list[CellValue]]:
    """Convert *df* into a grid of ``CellValue``.

    Args:
        df: Source DataFrame.  The index is not exported.
        include_header: If True, the first row holds the column names as
            text cells.

    Returns:
        Row-major grid.

    Raises:
        TypeError: If a column holds values ``to_cell()`` cannot convert.
    """
    grid: list[list[CellValue]] = []
    if include_header:
        grid.append([TextCell(str(col)) for col in df.columns])
    for record in df.itertuples(index=False, name=None):
        grid.append([_frame_value_to_cell(v) for v in record])
    logger.debug(
        "Converted DataFrame (%d rows, %d cols) to grid", len(df), len(df.columns)
    )
    return grid


def grid_to_dataframe(
    rows: Sequence[Sequence[str]],
    header: bool = True,
) -> pd.DataFrame:
    """Build a string-typed DataFrame from an imported grid.

    Args:
        rows: Rectangular grid of strings, e.g. from ``gridcsv.read``.
        header: If True, the first row supplies the column names.

    Returns:
        DataFrame whose cells are all ``str``.
    """
    if not rows:
        return pd.DataFrame()
    if header:
        columns = list(rows[0])
        data = [list(r) for r in rows[1:]]
    else:
        columns = list(range(len(rows[0])))
        data = [list(r) for r in rows]
    return pd.DataFrame(data, columns=columns, dtype=object)
