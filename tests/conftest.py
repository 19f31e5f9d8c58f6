"""
Shared test fixtures for gridcsv tests.

All tests build their grids in memory and write files only under
``tmp_path``; no input files are required.
"""

from datetime import date
from decimal import Decimal

import pytest

from gridcsv.cells import (
    BooleanCell,
    DateCell,
    EmptyCell,
    ErrorCell,
    ErrorCode,
    NumberCell,
    TextCell,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def mixed_grid():
    """A 3x5 grid with every cell kind and the reserved characters.

    Contains no raw commas so it round-trips in CSV mode too.
    """
    return [
        [TextCell("name"), TextCell("amount"), TextCell("booked"),
         TextCell("paid"), TextCell("note")],
        [TextCell("Müller"), NumberCell(Decimal("123456789012345.678")),
         DateCell(date(2024, 3, 7)), BooleanCell(True),
         TextCell("first\r\nsecond")],
        [TextCell("C:\\data\\\\share"), NumberCell(Decimal("-0.000001")),
         EmptyCell(), BooleanCell(False), ErrorCell(ErrorCode.NA)],
    ]


@pytest.fixture()
def mixed_grid_text():
    """The canonical text ``mixed_grid`` reads back as."""
    return [
        ["name", "amount", "booked", "paid", "note"],
        ["Müller", "123456789012345.678", "2024-03-07", "TRUE", "first\r\nsecond"],
        ["C:\\data\\\\share", "-0.000001", "", "FALSE", "#N/A"],
    ]


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (writes and reads real files)",
    )
