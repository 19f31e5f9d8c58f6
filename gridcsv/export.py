"""
Row serializer and line writer for gridcsv.

Joins already-escaped fields into lines and streams the lines to a byte
sink as UTF-8.

Encoding policy:
- Always UTF-8, regardless of the destination's extension or locale.
- Never a byte-order mark.  The import side tolerates one on input.
- Every line, the last one included, is followed by the terminator.

A destination path is truncated and rewritten.  If a write fails part-way
the file is left as is and ``ExportError`` is raised; the caller must
treat the file as invalid.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Sequence, Union

from gridcsv.cells import DelimiterMode
from gridcsv.exceptions import ExportError

logger = logging.getLogger(__name__)

Sink = Union[str, Path, BinaryIO]


def serialize_row(fields: Sequence[str], mode: DelimiterMode) -> str:
    """Join escaped *fields* with the mode's delimiter."""
    return DelimiterMode(mode).delimiter.join(fields)


def _encode_line(line: str, line_terminator: str) -> bytes:
    try:
        return (line + line_terminator).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ExportError(
            f"Line cannot be encoded as UTF-8 at character {exc.start}: {exc.reason}"
        ) from exc


def encode_lines(lines: Iterable[str], line_terminator: str = "\r\n") -> bytes:
    """Encode *lines* into one in-memory UTF-8 document (no BOM)."""
    return b"".join(_encode_line(line, line_terminator) for line in lines)


def _write_stream(
    lines: Iterable[str], stream: BinaryIO, line_terminator: str
) -> int:
    written = 0
    for line in lines:
        chunk = _encode_line(line, line_terminator)
        stream.write(chunk)
        written += len(chunk)
    return written


def write_document(
    lines: Iterable[str],
    sink: Sink,
    line_terminator: str = "\r\n",
) -> int:
    """Write *lines* to *sink* as a UTF-8 document without a BOM.

    Args:
        lines: Serialized rows (see ``serialize_row``).
        sink: A file path (parent directories are created; an existing file
            is overwritten) or a binary stream opened for writing.
        line_terminator: ``"\\n"`` or ``"\\r\\n"``.

    Returns:
        Number of bytes written.

    Raises:
        ExportError: If the destination cannot be written or a line is not
            encodable as UTF-8.
    """
    if line_terminator not in ("\n", "\r\n"):
        raise ExportError(f"Unsupported line terminator: {line_terminator!r}")

    if isinstance(sink, (str, Path)):
        path = Path(sink)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                written = _write_stream(lines, f, line_terminator)
        except OSError as exc:
            raise ExportError(f"Failed to write {path}: {exc}") from exc
        logger.info("Wrote %s (%d bytes)", path, written)
        return written

    try:
        written = _write_stream(lines, sink, line_terminator)
    except OSError as exc:
        raise ExportError(f"Failed to write to stream: {exc}") from exc
    logger.debug("Wrote %d bytes to stream", written)
    return written
