"""Item and ItemType definitions for the splitmatter scanner.

The scanner produces a short stream of Item objects: at most one frontmatter
item, one content item, then an EOF marker. A malformed document yields a
single ERROR item instead and nothing after it.

Thread Safety:
Item is frozen (immutable) and safe to share across threads.
ItemType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from splitmatter.location import SourceLocation


class ItemType(Enum):
    """Segment kinds produced by the scanner, in emission order."""

    ERROR = auto()  # value is the diagnostic message

    FRONTMATTER_TOML = auto()  # between +++ fences, fences stripped
    FRONTMATTER_YAML = auto()  # between --- fences, fences stripped
    FRONTMATTER_JSON = auto()  # {...} block, braces included

    CONTENT = auto()  # everything after the frontmatter
    EOF = auto()


FRONTMATTER_TYPES = frozenset(
    {
        ItemType.FRONTMATTER_TOML,
        ItemType.FRONTMATTER_YAML,
        ItemType.FRONTMATTER_JSON,
    }
)

TERMINAL_TYPES = frozenset({ItemType.ERROR, ItemType.EOF})


@dataclass(frozen=True, slots=True)
class Item:
    """A classified span of input produced by the scanner.

    Attributes:
        type: The segment kind (from ItemType enum)
        value: Raw bytes of the span, or the encoded message for ERROR
        offset: Absolute start offset in the input
        end_offset: Absolute end offset in the input
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed, in bytes)
        source_file: Optional source file path

    """

    type: ItemType
    value: bytes
    offset: int
    end_offset: int
    lineno: int = 1
    col: int = 1
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def text(self) -> str:
        """Value decoded as UTF-8 (invalid sequences replaced)."""
        return self.value.decode("utf-8", errors="replace")

    @property
    def is_terminal(self) -> bool:
        """True for ERROR and EOF; nothing follows either."""
        return self.type in TERMINAL_TYPES

    @property
    def is_frontmatter(self) -> bool:
        return self.type in FRONTMATTER_TYPES

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from splitmatter.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.end_offset,
            source_file=self.source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __str__(self) -> str:
        if self.type is ItemType.EOF:
            return "EOF"
        if self.type is ItemType.ERROR:
            return self.text
        text = self.text
        if len(text) > 10:
            return f"{text[:10]!r}..."
        return repr(text)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + b"..."
        return f"Item({self.type.name}, {val!r}, {self.lineno}:{self.col})"
