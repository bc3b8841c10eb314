"""Source location tracking for error messages and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of an item in the scanned input.

    Line and column are 1-indexed. Columns count bytes, matching the
    offsets the scanner works with.

    Examples:
            >>> loc = SourceLocation.from_offset(b"+++\\nA", 4, source_file="a.md")
            >>> str(loc)
            'a.md:2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls,
        data: bytes,
        offset: int,
        end_offset: int | None = None,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute line and column for a byte offset into data.

        Only ``\\n`` starts a new line; a bare ``\\r`` does not.
        """
        lineno = data.count(b"\n", 0, offset) + 1
        line_start = data.rfind(b"\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            end_offset=offset if end_offset is None else end_offset,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location."""
        return cls(lineno=0, col_offset=0)
