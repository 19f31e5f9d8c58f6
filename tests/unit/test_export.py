"""
Unit tests for the row serializer and line writer (gridcsv.export).

Tests line assembly, UTF-8 output without BOM, terminators, overwrite
behaviour, and error handling using pytest's tmp_path fixture.
"""

from __future__ import annotations

import io

import pytest

from gridcsv.cells import DelimiterMode
from gridcsv.exceptions import ExportError
from gridcsv.export import encode_lines, serialize_row, write_document


# ---------------------------------------------------------------------------
# serialize_row
# ---------------------------------------------------------------------------

class TestSerializeRow:

    def test_csv(self):
        assert serialize_row(["a", "b", ""], DelimiterMode.CSV) == "a,b,"

    def test_tab(self):
        assert serialize_row(["a", "b", ""], DelimiterMode.TAB) == "a\tb\t"

    def test_single_field(self):
        assert serialize_row(["only"], "tab") == "only"


# ---------------------------------------------------------------------------
# write_document -- files
# ---------------------------------------------------------------------------

class TestWriteDocumentFile:
    """Tests for writing to a path."""

    def test_utf8_without_bom(self, tmp_path):
        path = tmp_path / "out.csv"
        write_document(["Grüße,東京"], path)
        data = path.read_bytes()
        assert not data.startswith(b"\xef\xbb\xbf")
        assert data == "Grüße,東京\r\n".encode("utf-8")

    def test_returns_bytes_written(self, tmp_path):
        path = tmp_path / "out.csv"
        written = write_document(["ab", "c"], path, line_terminator="\n")
        assert written == 5
        assert path.stat().st_size == 5

    def test_lf_terminator(self, tmp_path):
        path = tmp_path / "out.tsv"
        write_document(["a\tb", "c\td"], path, line_terminator="\n")
        assert path.read_bytes() == b"a\tb\nc\td\n"

    def test_crlf_terminator_default(self, tmp_path):
        path = tmp_path / "out.tsv"
        write_document(["a", "b"], path)
        assert path.read_bytes() == b"a\r\nb\r\n"

    def test_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "out.csv"
        path.write_bytes(b"\xef\xbb\xbfold content that is longer\r\n")
        write_document(["new"], path)
        assert path.read_bytes() == b"new\r\n"

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "nested" / "deeper" / "out.csv"
        write_document(["x"], path)
        assert path.exists()

    def test_no_lines_writes_empty_file(self, tmp_path):
        path = tmp_path / "out.csv"
        assert write_document([], path) == 0
        assert path.read_bytes() == b""

    def test_unwritable_destination(self, tmp_path):
        """A directory in place of the file -> ExportError."""
        target = tmp_path / "is_a_dir.csv"
        target.mkdir()
        with pytest.raises(ExportError, match="Failed to write"):
            write_document(["x"], target)

    def test_lone_surrogate_raises(self, tmp_path):
        with pytest.raises(ExportError, match="cannot be encoded"):
            write_document(["bad \ud800 text"], tmp_path / "out.csv")

    def test_unsupported_terminator(self, tmp_path):
        with pytest.raises(ExportError, match="Unsupported line terminator"):
            write_document(["x"], tmp_path / "out.csv", line_terminator="\r")


# ---------------------------------------------------------------------------
# write_document -- streams / in memory
# ---------------------------------------------------------------------------

class TestWriteDocumentStream:

    def test_binary_stream(self):
        buf = io.BytesIO()
        written = write_document(["a,b"], buf, line_terminator="\n")
        assert buf.getvalue() == b"a,b\n"
        assert written == 4

    def test_stream_failure_wrapped(self):
        class _Broken(io.BytesIO):
            def write(self, b):
                raise OSError("disk full")

        with pytest.raises(ExportError, match="disk full"):
            write_document(["a"], _Broken())

    def test_encode_lines(self):
        assert encode_lines(["ä", "b"], "\n") == "ä\nb\n".encode("utf-8")
