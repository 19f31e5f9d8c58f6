"""
Delimiter-mode detection for gridcsv.

The codec never sniffs file *contents* for the delimiter: the caller
decides.  This module offers the usual caller-side decision, based on the
file extension, so paths like ``report.tsv`` need no explicit mode.

  .csv                -> CSV
  .tsv / .tab / .txt  -> TAB

Also provides ``sniff_line_terminator()`` for describing an existing file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gridcsv.cells import DelimiterMode
from gridcsv.exceptions import UnknownFormatError

logger = logging.getLogger(__name__)

_EXTENSION_MODES: dict[str, DelimiterMode] = {
    ".csv": DelimiterMode.CSV,
    ".tsv": DelimiterMode.TAB,
    ".tab": DelimiterMode.TAB,
    ".txt": DelimiterMode.TAB,
}


def detect_mode(path: str | Path) -> DelimiterMode:
    """Return the delimiter mode implied by *path*'s extension.

    Raises:
        UnknownFormatError: If the extension is not one of .csv, .tsv,
            .tab or .txt.
    """
    suffix = Path(path).suffix.lower()
    try:
        mode = _EXTENSION_MODES[suffix]
    except KeyError:
        raise UnknownFormatError(
            f"Cannot derive a delimiter mode from '{path}'. "
            f"Known extensions: {sorted(_EXTENSION_MODES)}; "
            "pass mode='csv' or mode='tab' explicitly."
        ) from None
    logger.debug("Detected mode %s for %s", mode.value, path)
    return mode


def sniff_line_terminator(data: bytes) -> str | None:
    """Return ``"crlf"`` or ``"lf"`` for the first line break in *data*.

    Returns ``None`` when *data* contains no line feed.
    """
    idx = data.find(b"\n")
    if idx < 0:
        return None
    return "crlf" if idx > 0 and data[idx - 1:idx] == b"\r" else "lf"
