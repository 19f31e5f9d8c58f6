"""
Decoder and line reader for gridcsv.

This module is the read-side counterpart to ``export.py``.  It turns a
byte document written by this library back into a rectangular grid of
strings:

1. Drop a leading UTF-8 byte-order mark if there is one.
2. Decode strictly as UTF-8.  There is no fallback to a legacy code page
   and no replacement characters: mis-decoded text is exactly the
   corruption this format exists to avoid, so invalid input fails loudly
   with the byte offset and line.
3. Split into lines on LF or CRLF.  One trailing terminator is ignored;
   empty input yields no rows.
4. Split each line on the mode's delimiter and unescape every field.
5. Pad short rows with ``""`` so the result is rectangular.

Typing fields back into numbers or dates is left to the caller.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import BinaryIO, Union

from gridcsv.cells import DelimiterMode
from gridcsv.exceptions import InvalidEncodingError, MalformedEscapeError, SourceReadError
from gridcsv.transforms.escape import DEFAULT_ESCAPE_MARKER, EscapeCodec
from gridcsv.transforms.padding import pad_rows

logger = logging.getLogger(__name__)

Source = Union[bytes, str, Path, BinaryIO]


def strip_bom(data: bytes) -> tuple[bytes, bool]:
    """Remove a leading UTF-8 BOM.

    Returns:
        ``(data_without_bom, had_bom)``.
    """
    if data.startswith(codecs.BOM_UTF8):
        return data[len(codecs.BOM_UTF8):], True
    return data, False


def _decode_utf8(data: bytes) -> str:
    body, had_bom = strip_bom(data)
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        offset = exc.start + (len(codecs.BOM_UTF8) if had_bom else 0)
        line = data.count(b"\n", 0, offset) + 1
        raise InvalidEncodingError(offset=offset, line=line, reason=exc.reason) from exc


def split_lines(text: str) -> list[str]:
    """Split decoded text into lines on LF or CRLF.

    A single trailing terminator does not start an extra line.
    """
    if not text:
        return []
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def decode_document(
    data: bytes,
    mode: DelimiterMode = DelimiterMode.CSV,
    *,
    escape_marker: str = DEFAULT_ESCAPE_MARKER,
    escape_delimiter: bool = False,
) -> list[list[str]]:
    """Decode an in-memory document into a rectangular grid of strings.

    Args:
        data: The raw bytes, with or without a UTF-8 BOM.
        mode: Delimiter mode the document was written with.
        escape_marker: Marker the document was written with.
        escape_delimiter: Whether commas were escaped (CSV mode only).

    Returns:
        List of rows, each a list of unescaped field strings.

    Raises:
        InvalidEncodingError: If *data* is not valid UTF-8.
        MalformedEscapeError: If a field holds a broken escape sequence.
    """
    mode = DelimiterMode(mode)
    text = _decode_utf8(data)
    codec = EscapeCodec(mode, escape_marker, escape_delimiter)
    delimiter = mode.delimiter

    rows: list[list[str]] = []
    for line_no, line in enumerate(split_lines(text), start=1):
        row: list[str] = []
        for column, field in enumerate(line.split(delimiter)):
            try:
                row.append(codec.unescape(field))
            except MalformedEscapeError as exc:
                raise exc.at(line_no, column) from exc
        rows.append(row)

    padded = pad_rows(rows, "")
    if padded.padded_rows:
        logger.warning(
            "Padded %d short row(s) to %d column(s) while reading",
            padded.padded_rows,
            padded.width,
        )
    logger.debug(
        "Decoded %d row(s) x %d column(s) (%s mode)",
        len(padded.rows), padded.width, mode.value,
    )
    return padded.rows


def _read_bytes(source: Source) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise SourceReadError(f"Failed to read {path}: {exc}") from exc
    try:
        return source.read()
    except OSError as exc:
        raise SourceReadError(f"Failed to read from stream: {exc}") from exc


def read_document(
    source: Source,
    mode: DelimiterMode = DelimiterMode.CSV,
    *,
    escape_marker: str = DEFAULT_ESCAPE_MARKER,
    escape_delimiter: bool = False,
) -> list[list[str]]:
    """Read a document from a path, binary stream or bytes and decode it.

    Raises:
        SourceReadError: If the path or stream cannot be read.
        InvalidEncodingError: If the bytes are not valid UTF-8.
        MalformedEscapeError: If a field holds a broken escape sequence.
    """
    data = _read_bytes(source)
    rows = decode_document(
        data,
        mode,
        escape_marker=escape_marker,
        escape_delimiter=escape_delimiter,
    )
    if isinstance(source, (str, Path)):
        logger.info("Read %s (%d rows)", source, len(rows))
    return rows
