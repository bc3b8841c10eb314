"""Caller side of the scanner: read a file, consume items, build a Document.

The scanner reports malformed input as an ERROR item; ``split`` turns that
item into a ScanError. Failing to read the input at all is reported as a
SourceReadError before any scanning happens.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from splitmatter.errors import ScanError, SourceReadError
from splitmatter.items import ItemType
from splitmatter.lexer import lex
from splitmatter.utils.logger import get_logger

logger = get_logger(__name__)

_FORMAT_NAMES: dict[ItemType, str] = {
    ItemType.FRONTMATTER_TOML: "toml",
    ItemType.FRONTMATTER_YAML: "yaml",
    ItemType.FRONTMATTER_JSON: "json",
}


@dataclass(frozen=True, slots=True)
class Document:
    """A document split into its frontmatter and content.

    Attributes:
        content: Raw content bytes (the whole input when there is no frontmatter)
        frontmatter: Raw frontmatter bytes, or None
        frontmatter_type: Kind of the frontmatter item, or None
        source_file: Path the document was read from, if any

    """

    content: bytes
    frontmatter: bytes | None = None
    frontmatter_type: ItemType | None = None
    source_file: str | None = None

    @property
    def has_frontmatter(self) -> bool:
        return self.frontmatter_type is not None

    @property
    def format(self) -> str | None:
        """Frontmatter format name: "toml", "yaml", "json" or None."""
        if self.frontmatter_type is None:
            return None
        return _FORMAT_NAMES[self.frontmatter_type]

    @property
    def content_text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def frontmatter_text(self) -> str | None:
        if self.frontmatter is None:
            return None
        return self.frontmatter.decode("utf-8", errors="replace")


def split(source: bytes | str, source_file: str | None = None) -> Document:
    """Split a document into frontmatter and content.

    Args:
        source: Document bytes or text
        source_file: Optional path used in error messages

    Returns:
        The split Document.

    Raises:
        ScanError: If the frontmatter is malformed.

    Example:
        >>> doc = split("---\\ntitle: Hi\\n---\\n# Hello\\n")
        >>> doc.format, doc.frontmatter, doc.content
        ('yaml', b'title: Hi', b'# Hello\\n')
    """
    frontmatter: bytes | None = None
    frontmatter_type: ItemType | None = None
    content = b""

    for item in lex(source, source_file):
        if item.type is ItemType.ERROR:
            raise ScanError(
                item.text,
                lineno=item.lineno,
                col_offset=item.col,
                source_file=item.source_file,
            )
        if item.type is ItemType.EOF:
            break
        if item.is_frontmatter:
            frontmatter = item.value
            frontmatter_type = item.type
        elif item.type is ItemType.CONTENT:
            content = item.value

    logger.debug(
        "split %s: frontmatter=%s, %d content bytes",
        source_file or "<input>",
        _FORMAT_NAMES.get(frontmatter_type, "none"),
        len(content),
    )
    return Document(
        content=content,
        frontmatter=frontmatter,
        frontmatter_type=frontmatter_type,
        source_file=source_file,
    )


def read_source(path: str | os.PathLike[str]) -> bytes:
    """Read a whole file into memory.

    Raises:
        SourceReadError: If the file cannot be opened or read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise SourceReadError(path, exc) from exc


def split_file(path: str | os.PathLike[str]) -> Document:
    """Read and split the file at path."""
    return split(read_source(path), source_file=os.fspath(path))
