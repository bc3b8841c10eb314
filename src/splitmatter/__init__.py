"""
splitmatter: split frontmatter from document content.

Scans a document whose optional header is TOML (``+++``), YAML (``---``)
or a JSON object, and hands back the header and the body as raw bytes.
The header is never decoded; feed it to the TOML/YAML/JSON library of
your choice.

Quick Start:
    >>> from splitmatter import split
    >>> doc = split("+++\\ntitle = 'Hello'\\n+++\\nBody text")
    >>> doc.format
    'toml'
    >>> doc.frontmatter
    b"title = 'Hello'"
    >>> doc.content
    b'Body text'

    >>> # Or walk the raw item stream
    >>> from splitmatter import lex
    >>> [item.type.name for item in lex("plain text")]
    ['CONTENT', 'EOF']
"""

from splitmatter.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from splitmatter.document import Document, read_source, split, split_file
from splitmatter.errors import (
    ScanError,
    ScannerReuseError,
    SourceReadError,
    SplitmatterError,
)
from splitmatter.items import Item, ItemType
from splitmatter.lexer import ItemChannel, Scanner, ScanState, lex
from splitmatter.location import SourceLocation

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Item",
    "ItemChannel",
    "ItemType",
    "ScanConfig",
    "ScanError",
    "ScanState",
    "Scanner",
    "ScannerReuseError",
    "SourceLocation",
    "SourceReadError",
    "SplitmatterError",
    "__version__",
    "get_scan_config",
    "lex",
    "read_source",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "split",
    "split_file",
]
