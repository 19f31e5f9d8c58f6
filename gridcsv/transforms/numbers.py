"""
Number formatting transform for gridcsv.

Spreadsheet-native text export rounds numbers to the displayed precision
(or to 15 significant digits) and switches to scientific notation for
large and small magnitudes.  Both lose information.  This transform
produces the exact positional decimal text of a ``Decimal``:

1. Format with the ``f`` presentation type, which never uses an exponent
   and never consults the decimal context precision (so nothing rounds).
2. Strip trailing zeros from the fractional part, then a trailing ``.``.
3. Map every zero (including ``-0``) to ``"0"``.

The result is the shortest digit sequence that parses back to a value
equal to the input.
"""

from __future__ import annotations

from decimal import Decimal


def format_number(value: Decimal) -> str:
    """Render *value* as plain decimal text with no exponent.

    Args:
        value: A finite ``Decimal``.

    Returns:
        Text such as ``"123456789012345.678"`` or ``"0.000001"``.

    Raises:
        ValueError: If *value* is NaN or infinite.
    """
    if not value.is_finite():
        raise ValueError(f"Cannot format non-finite number: {value!r}")
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
