"""
Escape codec for gridcsv.

Fields may contain characters that would otherwise break the line/field
structure of the output.  They are replaced by *tokens*: the escape marker
followed by a one-character designator.

  ==========================  ==================  =============
  Raw text                    Token               Active in
  ==========================  ==================  =============
  carriage return ``\\r``     marker + ``r``      both modes
  line feed ``\\n``           marker + ``n``      both modes
  tab ``\\t``                 marker + ``t``      TAB mode
  the marker itself           marker + ``^``      both modes
  comma ``,``                 marker + ``c``      CSV mode, opt-in
  ==========================  ==================  =============

A CRLF pair becomes two tokens (``r`` then ``n``), not a combined one.

The default marker is ``\\^``.  A plain backslash is avoided because Windows
paths routinely contain single and doubled backslashes.

Unambiguity: unescaping scans left to right for the marker.  That scan
stays aligned with token boundaries as long as the marker has no proper
border (no proper prefix that is also a suffix); otherwise the tail of a
literal run plus the head of the next token could spell a marker.
``validate_marker()`` enforces this for custom markers.

CSV mode leaves tabs and, unless ``escape_delimiter`` is set, commas
untouched.  That is a deliberate divergence from RFC 4180 quoting: the
output stays byte-compatible with files produced by earlier exports.
"""

from __future__ import annotations

from gridcsv.cells import DelimiterMode
from gridcsv.exceptions import MalformedEscapeError

DEFAULT_ESCAPE_MARKER = "\\^"

MARKER_DESIGNATOR = "^"

_LINE_BREAK_DESIGNATORS = {"\r": "r", "\n": "n"}
_RESERVED_IN_MARKER = ("\r", "\n", "\t", ",")


def validate_marker(marker: str) -> str:
    """Check that *marker* can serve as an unambiguous escape prefix.

    Returns:
        The marker, unchanged.

    Raises:
        ValueError: If the marker is empty, a lone backslash, contains a
            line break / tab / comma, or has a proper border.
    """
    if not marker:
        raise ValueError("Escape marker must not be empty")
    if marker == "\\":
        raise ValueError(
            "Escape marker must not be a single backslash; "
            "it collides with path-like text"
        )
    bad = [c for c in _RESERVED_IN_MARKER if c in marker]
    if bad:
        raise ValueError(f"Escape marker must not contain {bad!r}")
    for k in range(1, len(marker)):
        if marker[:k] == marker[-k:]:
            raise ValueError(
                f"Escape marker {marker!r} overlaps itself "
                f"({marker[:k]!r} is both prefix and suffix)"
            )
    return marker


class EscapeCodec:
    """Escapes and unescapes single fields for one delimiter mode.

    The codec is stateless after construction; one instance serves a
    whole document.

    Args:
        mode: Delimiter mode of the document.
        marker: Escape marker; validated with ``validate_marker()``.
        escape_delimiter: In CSV mode, also escape commas.  Ignored in TAB
            mode, where the delimiter (tab) is always escaped.
    """

    def __init__(
        self,
        mode: DelimiterMode,
        marker: str = DEFAULT_ESCAPE_MARKER,
        escape_delimiter: bool = False,
    ) -> None:
        self.mode = DelimiterMode(mode)
        self.marker = validate_marker(marker)
        self.escape_delimiter = escape_delimiter and self.mode is DelimiterMode.CSV

        designators = dict(_LINE_BREAK_DESIGNATORS)
        if self.mode is DelimiterMode.TAB:
            designators["\t"] = "t"
        elif self.escape_delimiter:
            designators[","] = "c"
        self._designators = designators
        self._raw_by_designator = {d: raw for raw, d in designators.items()}
        self._raw_by_designator[MARKER_DESIGNATOR] = self.marker

    def __repr__(self) -> str:
        return (
            f"EscapeCodec(mode={self.mode.value!r}, marker={self.marker!r}, "
            f"escape_delimiter={self.escape_delimiter})"
        )

    def needs_escape(self, field: str) -> bool:
        return self.marker in field or any(c in field for c in self._designators)

    def escape(self, field: str) -> str:
        """Replace every reserved substring of *field* with its token."""
        if not self.needs_escape(field):
            return field

        marker = self.marker
        out: list[str] = []
        i = 0
        n = len(field)
        while i < n:
            if field.startswith(marker, i):
                out.append(marker + MARKER_DESIGNATOR)
                i += len(marker)
                continue
            ch = field[i]
            designator = self._designators.get(ch)
            out.append(ch if designator is None else marker + designator)
            i += 1
        return "".join(out)

    def unescape(self, field: str) -> str:
        """Reverse ``escape()``.

        Raises:
            MalformedEscapeError: If a marker is followed by an unknown
                designator or ends the field.
        """
        marker = self.marker
        if marker not in field:
            return field

        out: list[str] = []
        i = 0
        while True:
            j = field.find(marker, i)
            if j < 0:
                out.append(field[i:])
                break
            out.append(field[i:j])
            k = j + len(marker)
            if k >= len(field):
                raise MalformedEscapeError(field=field, position=j, designator=None)
            raw = self._raw_by_designator.get(field[k])
            if raw is None:
                raise MalformedEscapeError(
                    field=field, position=j, designator=field[k]
                )
            out.append(raw)
            i = k + 1
        return "".join(out)


def escape_field(field: str, mode: DelimiterMode) -> str:
    """Escape *field* with the default marker."""
    return EscapeCodec(mode).escape(field)


def unescape_field(field: str, mode: DelimiterMode) -> str:
    """Unescape *field* with the default marker."""
    return EscapeCodec(mode).unescape(field)
