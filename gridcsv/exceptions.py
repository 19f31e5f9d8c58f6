"""
Custom exception hierarchy for gridcsv.

Callers can catch the specific failure (a corrupt byte stream vs. a broken
escape sequence vs. an unwritable destination) without relying on generic
ValueError/OSError.  Read-side errors carry the position of the offending
byte or field so the caller can point the user at it.

Hierarchy::

    GridCsvError
    ├── UnknownFormatError
    ├── ConfigValidationError
    ├── DecodeError
    │   ├── InvalidEncodingError
    │   └── MalformedEscapeError
    └── DocumentIOError
        ├── ExportError
        └── SourceReadError
"""

from __future__ import annotations


class GridCsvError(Exception):
    """Base exception for all gridcsv errors."""


class UnknownFormatError(GridCsvError):
    """Raised when no delimiter mode can be derived from a path's extension."""


class ConfigValidationError(GridCsvError):
    """Raised when a codec config file is empty or unusable."""


class DecodeError(GridCsvError):
    """Base class for failures while turning bytes back into a grid.

    A decode error aborts the whole read; no partial grid is returned.
    """


class InvalidEncodingError(DecodeError):
    """Raised when the input bytes are not valid UTF-8.

    Attributes:
        offset: Byte offset of the first invalid byte, counted from the
            start of the original input (a leading BOM included).
        line: 1-based line number containing that byte.
        reason: The codec's description of the failure.
    """

    def __init__(self, *, offset: int, line: int, reason: str) -> None:
        super().__init__(
            f"Input is not valid UTF-8 at byte {offset} (line {line}): {reason}"
        )
        self.offset = offset
        self.line = line
        self.reason = reason


class MalformedEscapeError(DecodeError):
    """Raised when an escape marker is not followed by a known designator.

    Attributes:
        field: The raw (still escaped) field text.
        position: Offset of the marker inside *field*.
        designator: The character that followed the marker, or ``None``
            when the marker ends the field.
        line: 1-based line number, when raised from a document read.
        column: 0-based field index, when raised from a document read.
    """

    def __init__(
        self,
        *,
        field: str,
        position: int,
        designator: str | None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        if designator is None:
            what = "escape marker at end of field"
        else:
            what = f"unknown escape designator {designator!r}"
        where = f"offset {position}"
        if line is not None:
            where = f"line {line}, column {column}, {where}"
        super().__init__(f"Malformed escape ({where}): {what} in {field!r}")
        self.field = field
        self.position = position
        self.designator = designator
        self.line = line
        self.column = column

    def at(self, line: int, column: int) -> MalformedEscapeError:
        """Return a copy of this error annotated with its document position."""
        return MalformedEscapeError(
            field=self.field,
            position=self.position,
            designator=self.designator,
            line=line,
            column=column,
        )


class DocumentIOError(GridCsvError):
    """Raised when the byte sink or source is unavailable or fails mid-way.

    After a failed write the destination is in an undefined state and must
    be discarded by the caller.
    """


class ExportError(DocumentIOError):
    """Raised when writing an encoded document fails.

    For example, permission errors, disk full, or text that cannot be
    encoded as UTF-8 (lone surrogates).
    """


class SourceReadError(DocumentIOError):
    """Raised when the source path or stream cannot be read."""
