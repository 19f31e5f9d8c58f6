"""
Ragged-grid repair for gridcsv.

Grids read out of a live sheet are not always rectangular: trailing blank
cells are often omitted, so some rows come out shorter than others.  The
shape difference carries no meaning, so instead of failing the export the
short rows are padded with a filler value (``EmptyCell`` on the way out,
``""`` on the way in) up to the width of the widest row.

Returns the padded rows plus the number of rows that were touched, which
the pipeline logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class PadResult(Generic[T]):
    """Result of the padding step."""
    rows: list[list[T]]
    width: int
    padded_rows: int


def pad_rows(rows: Sequence[Sequence[T]], filler: T) -> PadResult[T]:
    """Pad every row to the width of the widest row.

    Rows are copied into new lists; the input is never mutated.

    Args:
        rows: Row-major values.
        filler: Value appended to short rows.

    Returns:
        PadResult with rectangular rows, the common width, and how many
        rows needed padding.
    """
    width = max((len(row) for row in rows), default=0)
    padded: list[list[T]] = []
    padded_rows = 0
    for row in rows:
        new_row = list(row)
        missing = width - len(new_row)
        if missing:
            new_row.extend([filler] * missing)
            padded_rows += 1
        padded.append(new_row)
    return PadResult(rows=padded, width=width, padded_rows=padded_rows)
