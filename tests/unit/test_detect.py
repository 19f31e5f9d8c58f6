"""
Unit tests for delimiter-mode detection (gridcsv.detect).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gridcsv.cells import DelimiterMode
from gridcsv.detect import detect_mode, sniff_line_terminator
from gridcsv.exceptions import UnknownFormatError


class TestDetectMode:

    @pytest.mark.parametrize(
        "path, mode",
        [
            ("report.csv", DelimiterMode.CSV),
            ("REPORT.CSV", DelimiterMode.CSV),
            ("report.tsv", DelimiterMode.TAB),
            ("report.tab", DelimiterMode.TAB),
            ("report.txt", DelimiterMode.TAB),
            (Path("dir.v2") / "report.tsv", DelimiterMode.TAB),
        ],
    )
    def test_known_extensions(self, path, mode):
        assert detect_mode(path) is mode

    @pytest.mark.parametrize("path", ["report.xlsx", "report", "report.csv.bak"])
    def test_unknown_extension(self, path):
        with pytest.raises(UnknownFormatError, match="Cannot derive a delimiter mode"):
            detect_mode(path)


class TestSniffLineTerminator:

    def test_crlf(self):
        assert sniff_line_terminator(b"a\r\nb\r\n") == "crlf"

    def test_lf(self):
        assert sniff_line_terminator(b"a\nb\n") == "lf"

    def test_leading_lf(self):
        assert sniff_line_terminator(b"\n") == "lf"

    def test_none(self):
        assert sniff_line_terminator(b"no breaks") is None
