"""Exception classes for splitmatter.

Scanner failures inside a document travel as ERROR items, not exceptions.
These exceptions are raised by the caller-side helpers in
``splitmatter.document`` and by misuse of the scanner itself.
"""

from __future__ import annotations

import os


class SplitmatterError(Exception):
    """Base exception for all splitmatter errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(SplitmatterError):
    """A document could not be split.

    Raised when the item stream carries an ERROR item.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where scanning stopped (1-indexed)
            col_offset: Column where scanning stopped (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class SourceReadError(SplitmatterError):
    """The input could not be read; scanning never started."""

    def __init__(self, path: str | os.PathLike[str], cause: OSError) -> None:
        self.path = os.fspath(path)
        self.cause = cause
        super().__init__(f"failed to read {self.path}: {cause}")


class ScannerReuseError(SplitmatterError):
    """A Scanner was asked to tokenize more than once.

    Scanners are single-use. Create one per document.
    """

    pass
