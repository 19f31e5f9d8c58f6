"""
Unit tests for the escape codec (gridcsv.transforms.escape).

Tests the documented token sequences, mode-dependent behaviour,
reversibility (including the marker itself), malformed-input detection,
and validation of custom markers.
"""

from __future__ import annotations

import pytest

from gridcsv.cells import DelimiterMode
from gridcsv.exceptions import MalformedEscapeError
from gridcsv.transforms.escape import (
    DEFAULT_ESCAPE_MARKER,
    EscapeCodec,
    escape_field,
    unescape_field,
    validate_marker,
)

M = DEFAULT_ESCAPE_MARKER


class TestEscapeTokens:
    """escape() produces the documented marker tokens."""

    @pytest.mark.parametrize("mode", list(DelimiterMode))
    def test_carriage_return(self, mode):
        assert escape_field("a\rb", mode) == f"a{M}rb"

    @pytest.mark.parametrize("mode", list(DelimiterMode))
    def test_line_feed(self, mode):
        assert escape_field("a\nb", mode) == f"a{M}nb"

    @pytest.mark.parametrize("mode", list(DelimiterMode))
    def test_crlf_is_two_tokens(self, mode):
        assert escape_field("a\r\nb", mode) == f"a{M}r{M}nb"

    def test_tab_in_tab_mode(self):
        assert escape_field("a\tb", DelimiterMode.TAB) == f"a{M}tb"

    def test_tab_left_literal_in_csv_mode(self):
        assert escape_field("a\tb", DelimiterMode.CSV) == "a\tb"

    def test_comma_left_literal_in_csv_mode(self):
        assert escape_field("a,b", DelimiterMode.CSV) == "a,b"

    @pytest.mark.parametrize("mode", list(DelimiterMode))
    def test_marker_self_escaped(self, mode):
        assert escape_field(f"x{M}y", mode) == f"x{M}^y"

    def test_plain_text_untouched(self):
        text = "C:\\Users\\\\share plain text"
        assert escape_field(text, DelimiterMode.TAB) is text

    def test_comma_escape_opt_in(self):
        codec = EscapeCodec(DelimiterMode.CSV, escape_delimiter=True)
        assert codec.escape("a,b") == f"a{M}cb"

    def test_comma_escape_ignored_in_tab_mode(self):
        codec = EscapeCodec(DelimiterMode.TAB, escape_delimiter=True)
        assert codec.escape_delimiter is False
        assert codec.escape("a,b") == "a,b"


class TestReversibility:
    """unescape(escape(x)) == x."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "cr\rlf\ncrlf\r\ntab\t",
            f"marker {M} inside",
            f"{M}{M}",
            f"{M}r looks like a token",
            "\\",
            "trailing backslash\\",
            "backslash before newline\\\n",
            "^^\\^^\\\\^",
            "\r\r\n\n\t\t",
        ],
    )
    @pytest.mark.parametrize("mode", list(DelimiterMode))
    def test_round_trip(self, text, mode):
        codec = EscapeCodec(mode)
        assert codec.unescape(codec.escape(text)) == text

    def test_round_trip_escaped_output_has_no_raw_breaks(self):
        codec = EscapeCodec(DelimiterMode.TAB)
        escaped = codec.escape("a\tb\r\nc")
        assert not any(c in escaped for c in "\t\r\n")

    def test_round_trip_with_comma_escape(self):
        codec = EscapeCodec(DelimiterMode.CSV, escape_delimiter=True)
        text = "1,2\n3"
        assert codec.unescape(codec.escape(text)) == text

    def test_custom_marker_round_trip(self):
        codec = EscapeCodec(DelimiterMode.TAB, marker="~#")
        text = "a~#b\tc~"
        escaped = codec.escape(text)
        assert escaped == "a~#^b~#tc~"
        assert codec.unescape(escaped) == text


class TestMalformedEscape:
    """unescape() rejects broken token sequences."""

    def test_unknown_designator(self):
        with pytest.raises(MalformedEscapeError) as excinfo:
            unescape_field(f"ab{M}x", DelimiterMode.TAB)
        assert excinfo.value.position == 2
        assert excinfo.value.designator == "x"

    def test_marker_at_end(self):
        with pytest.raises(MalformedEscapeError, match="end of field") as excinfo:
            unescape_field(f"ab{M}", DelimiterMode.CSV)
        assert excinfo.value.designator is None

    def test_tab_token_invalid_in_csv_mode(self):
        with pytest.raises(MalformedEscapeError):
            unescape_field(f"{M}t", DelimiterMode.CSV)

    def test_comma_token_invalid_without_opt_in(self):
        with pytest.raises(MalformedEscapeError):
            unescape_field(f"{M}c", DelimiterMode.CSV)

    def test_partial_marker_is_literal(self):
        """A lone backslash is not the marker and passes through."""
        assert unescape_field("a\\b", DelimiterMode.CSV) == "a\\b"


class TestValidateMarker:

    def test_default_is_valid(self):
        assert validate_marker(DEFAULT_ESCAPE_MARKER) == DEFAULT_ESCAPE_MARKER

    @pytest.mark.parametrize(
        "marker, message",
        [
            ("", "empty"),
            ("\\", "single backslash"),
            ("\\\t", "must not contain"),
            ("a,", "must not contain"),
            ("\\\\", "overlaps itself"),
            ("abca", "overlaps itself"),
        ],
    )
    def test_invalid(self, marker, message):
        with pytest.raises(ValueError, match=message):
            validate_marker(marker)

    def test_codec_validates(self):
        with pytest.raises(ValueError):
            EscapeCodec(DelimiterMode.CSV, marker="\\\\\\")
