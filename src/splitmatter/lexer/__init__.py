"""Frontmatter scanner for splitmatter.

A single-pass, rune-oriented state machine that splits a document into an
optional frontmatter item and a content item.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScanState, lex, ItemChannel
├── core.py              # Scanner class (mixin composition + rune navigation)
├── states.py            # ScanState enum, fence constants
├── runes.py             # UTF-8 rune decoding
├── channel.py           # Threaded producer/consumer handoff
└── scanners/            # State-specific scanners
    ├── detect.py        # First-rune format detection
    ├── fence.py         # +++ TOML and --- YAML
    ├── json.py          # {...} JSON
    └── content.py       # Remaining content and EOF

Usage:
    >>> from splitmatter.lexer import lex
    >>> for item in lex('{"draft": true}\\nHello'):
    ...     print(item.type.name, item.value)
FRONTMATTER_JSON b'{"draft": true}'
CONTENT b'Hello'
EOF b''

"""

from splitmatter.lexer.channel import ItemChannel
from splitmatter.lexer.core import Scanner, lex
from splitmatter.lexer.states import ScanState

__all__ = ["ItemChannel", "ScanState", "Scanner", "lex"]
