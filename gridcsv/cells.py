"""
Cell value model for gridcsv.

A grid handed to the exporter is a sequence of rows, each a sequence of
``CellValue`` objects.  ``CellValue`` is a closed tagged union of small
frozen dataclasses, one per kind of value a spreadsheet cell can hold:

- ``EmptyCell``            -- a blank cell.
- ``TextCell(text)``       -- any string, reserved characters included.
- ``NumberCell(value)``    -- an exact ``decimal.Decimal``.
- ``DateCell(value)``      -- a calendar date, no time of day.
- ``BooleanCell(value)``   -- TRUE / FALSE.
- ``ErrorCell(code)``      -- a spreadsheet error such as ``#DIV/0!``.

Numbers are stored as ``Decimal`` so that every digit the host supplied is
kept; floats are converted through their shortest round-trip ``repr`` (the
same digits the host displays at full precision), never through the exact
binary expansion.

``to_cell()`` coerces plain Python values into this model.  It is the seam
where a host adapter (or ``gridcsv.frame``) hands over live cell values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Sequence, Union


class DelimiterMode(str, Enum):
    """Field separator used for a whole document."""

    CSV = "csv"
    TAB = "tab"

    @property
    def delimiter(self) -> str:
        return "," if self is DelimiterMode.CSV else "\t"


class ErrorCode(str, Enum):
    """Spreadsheet error classes and their textual tokens."""

    NULL = "#NULL!"
    DIV0 = "#DIV/0!"
    VALUE = "#VALUE!"
    REF = "#REF!"
    NAME = "#NAME?"
    NUM = "#NUM!"
    NA = "#N/A"
    GETTING_DATA = "#GETTING_DATA"
    SPILL = "#SPILL!"
    CONNECT = "#CONNECT!"
    BLOCKED = "#BLOCKED!"
    UNKNOWN = "#UNKNOWN!"
    FIELD = "#FIELD!"
    CALC = "#CALC!"

    @classmethod
    def from_cverr(cls, number: int) -> ErrorCode:
        """Map a host CVErr number (e.g. 2007) to its error class.

        Raises:
            ValueError: If *number* is not a known CVErr code.
        """
        try:
            return _CVERR_CODES[number]
        except KeyError:
            raise ValueError(f"Unknown CVErr code: {number}") from None


_CVERR_CODES: dict[int, ErrorCode] = {
    2000: ErrorCode.NULL,
    2007: ErrorCode.DIV0,
    2015: ErrorCode.VALUE,
    2023: ErrorCode.REF,
    2029: ErrorCode.NAME,
    2036: ErrorCode.NUM,
    2042: ErrorCode.NA,
    2043: ErrorCode.GETTING_DATA,
    2045: ErrorCode.SPILL,
    2046: ErrorCode.CONNECT,
    2047: ErrorCode.BLOCKED,
    2048: ErrorCode.UNKNOWN,
    2049: ErrorCode.FIELD,
    2050: ErrorCode.CALC,
}


@dataclass(frozen=True)
class EmptyCell:
    """A blank cell."""


@dataclass(frozen=True)
class TextCell:
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"TextCell expects str, got {type(self.text).__name__}")


@dataclass(frozen=True)
class NumberCell:
    """A numeric cell holding an exact decimal value.

    Accepts ``Decimal``, ``int``, ``float`` or a numeric ``str`` and stores
    a ``Decimal``.  Non-finite values are rejected: a spreadsheet has no
    representation for them other than an error cell.
    """

    value: Decimal

    def __post_init__(self) -> None:
        raw = self.value
        if isinstance(raw, bool):
            raise TypeError("NumberCell does not accept bool; use BooleanCell")
        if isinstance(raw, float):
            # float.__repr__ also covers float subclasses such as numpy.float64
            value = Decimal(float.__repr__(raw))
        elif isinstance(raw, (int, str)):
            value = Decimal(raw)
        elif isinstance(raw, Decimal):
            value = raw
        else:
            raise TypeError(f"NumberCell expects a number, got {type(raw).__name__}")
        if not value.is_finite():
            raise ValueError(f"NumberCell value must be finite, got {raw!r}")
        object.__setattr__(self, "value", value)


@dataclass(frozen=True)
class DateCell:
    """A calendar date.  A ``datetime`` is refused: drop the time first."""

    value: date

    def __post_init__(self) -> None:
        if isinstance(self.value, datetime) or not isinstance(self.value, date):
            raise TypeError(
                f"DateCell expects a datetime.date without time, got {self.value!r}"
            )


@dataclass(frozen=True)
class BooleanCell:
    value: bool


@dataclass(frozen=True)
class ErrorCell:
    code: ErrorCode


CellValue = Union[EmptyCell, TextCell, NumberCell, DateCell, BooleanCell, ErrorCell]

Grid = Sequence[Sequence[CellValue]]

EMPTY = EmptyCell()

_CELL_TYPES = (EmptyCell, TextCell, NumberCell, DateCell, BooleanCell, ErrorCell)


def to_cell(value: Any) -> CellValue:
    """Coerce a plain Python value into a ``CellValue``.

    Mapping:
      - ``None`` and NaN -> ``EmptyCell``
      - ``str`` -> ``TextCell``
      - ``bool`` -> ``BooleanCell`` (checked before ``int``)
      - ``int`` / ``float`` / ``Decimal`` -> ``NumberCell``;
        infinities become ``ErrorCell(#NUM!)``
      - ``datetime`` -> ``DateCell`` of its date part
      - ``date`` -> ``DateCell``
      - ``ErrorCode`` -> ``ErrorCell``
      - an existing ``CellValue`` is returned unchanged

    Raises:
        TypeError: For any other type.
    """
    if isinstance(value, _CELL_TYPES):
        return value
    if value is None:
        return EMPTY
    if isinstance(value, ErrorCode):
        return ErrorCell(value)
    if isinstance(value, str):
        return TextCell(value)
    if isinstance(value, bool):
        return BooleanCell(value)
    if isinstance(value, float):
        if math.isnan(value):
            return EMPTY
        if math.isinf(value):
            return ErrorCell(ErrorCode.NUM)
        return NumberCell(value)
    if isinstance(value, Decimal):
        if value.is_nan():
            return EMPTY
        if value.is_infinite():
            return ErrorCell(ErrorCode.NUM)
        return NumberCell(value)
    if isinstance(value, int):
        return NumberCell(value)
    if isinstance(value, datetime):
        return DateCell(value.date())
    if isinstance(value, date):
        return DateCell(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a cell value")


def grid_from_values(rows: Sequence[Sequence[Any]]) -> list[list[CellValue]]:
    """Apply ``to_cell()`` to every value of a row-major list of lists."""
    return [[to_cell(v) for v in row] for row in rows]
