"""Tests for exception construction and formatting."""

import pytest

from splitmatter.errors import (
    ScanError,
    ScannerReuseError,
    SourceReadError,
    SplitmatterError,
)


class TestScanErrorFormatting:
    def test_message_only(self) -> None:
        err = ScanError("unexpected EOF parsing JSON front matter")
        assert str(err) == "unexpected EOF parsing JSON front matter"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ScanError("bad fence", lineno=3)
        assert str(err) == "3 bad fence"

    def test_with_line_and_column(self) -> None:
        err = ScanError("bad fence", lineno=3, col_offset=7)
        assert str(err) == "3:7 bad fence"

    def test_with_source_file(self) -> None:
        err = ScanError("bad fence", lineno=1, col_offset=1, source_file="a.md")
        assert str(err) == "a.md:1:1 bad fence"

    def test_source_file_without_position(self) -> None:
        assert str(ScanError("bad", source_file="a.md")) == "a.md bad"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            ScanError("x"),
            SourceReadError("a.md", FileNotFoundError(2, "No such file")),
            ScannerReuseError("x"),
        ],
    )
    def test_is_splitmatter_error(self, err: Exception) -> None:
        assert isinstance(err, SplitmatterError)

    def test_source_read_error_keeps_cause(self) -> None:
        cause = PermissionError(13, "Permission denied")
        err = SourceReadError("secret.md", cause)
        assert err.path == "secret.md"
        assert err.cause is cause
        assert "secret.md" in str(err)
