"""Single-pass frontmatter scanner.

Classifies the document prefix, finds the matching close of the
frontmatter block, and yields a short stream of typed items. The scanner
walks raw bytes one UTF-8 code point at a time.

Thread Safety:
Scanner instances are single-use. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from splitmatter.config import ScanConfig, get_scan_config
from splitmatter.errors import ScannerReuseError
from splitmatter.items import Item, ItemType
from splitmatter.lexer.runes import EOF_RUNE, LINE_BREAKS, decode_rune
from splitmatter.lexer.scanners import (
    ContentScannerMixin,
    DetectScannerMixin,
    FenceScannerMixin,
    JsonScannerMixin,
)
from splitmatter.lexer.states import FENCES, ScanState
from splitmatter.location import SourceLocation
from splitmatter.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    DetectScannerMixin,
    FenceScannerMixin,
    JsonScannerMixin,
    ContentScannerMixin,
):
    """Finite-state scanner splitting frontmatter from content.

    Usage:
            >>> scanner = Scanner(b"+++\\ntitle = 'x'\\n+++\\nBody")
            >>> for item in scanner.tokenize():
            ...     print(item.type.name, item.value)
        FRONTMATTER_TOML b"title = 'x'"
        CONTENT b'Body'
        EOF b''

    Invariants:
        ``0 <= start <= pos <= len(input)``; after every emit
        ``start == pos``. Each input byte lands in exactly one item except
        fences and their adjacent line breaks, which are ignored.

    Thread Safety:
        Scanner instances are single-use. Create one per document.

    """

    __slots__ = (
        "_input",
        "_input_len",  # Cached len(input)
        "_start",  # Start of the pending span
        "_pos",  # Read cursor
        "_width",  # Byte width of the last rune read, for _backup()
        "_state",
        "_source_file",
        "_config",
        "_started",
    )

    def __init__(
        self,
        source: bytes | str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with a document.

        Args:
            source: Document bytes; str is encoded as UTF-8
            source_file: Optional source file path for locations
            config: Scan configuration; defaults to the active context config
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        self._input = bytes(source)
        self._input_len = len(self._input)
        self._start = 0
        self._pos = 0
        self._width = 0
        self._state: ScanState | None = ScanState.DETECT
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()
        self._started = False

    def tokenize(self) -> Iterator[Item]:
        """Run the state machine, yielding items as they are produced.

        Yields:
            Items in input order, ending with EOF or a single ERROR.

        Raises:
            ScannerReuseError: If this scanner was already run.
        """
        if self._started:
            raise ScannerReuseError(
                "Scanner instances are single-use; create a new Scanner per document"
            )
        self._started = True

        while self._state is not None:
            yield from self._dispatch_state()

    def items(self) -> list[Item]:
        """Run to completion and return every item."""
        return list(self.tokenize())

    def _dispatch_state(self) -> Iterator[Item]:
        """Run the scanner for the current state.

        Each scanner sets ``_state`` to its successor, or to None once a
        terminal item has been produced.
        """
        state = self._state
        logger.debug("scanner state %s at offset %d", state.name, self._pos)

        if state is ScanState.DETECT:
            self._state = self._detect_format()
        elif state in FENCES:
            yield from self._scan_fenced_frontmatter(FENCES[state])
        elif state is ScanState.JSON:
            yield from self._scan_json_frontmatter()
        elif state is ScanState.CONTENT:
            yield from self._scan_content()
        elif state is ScanState.DONE:
            yield from self._scan_done()

    # =========================================================================
    # Rune navigation
    # =========================================================================

    def _next(self) -> str:
        """Consume and return the next rune.

        Returns:
            The decoded rune, or EOF_RUNE at end of input.
        """
        r, self._width = decode_rune(self._input, self._pos)
        self._pos += self._width
        return r

    def _backup(self) -> None:
        """Step back over the last rune. Valid once per _next()."""
        self._pos -= self._width

    def _peek(self) -> str:
        """Return the next rune without consuming it."""
        r = self._next()
        self._backup()
        return r

    def _ignore(self) -> None:
        """Drop the pending span without emitting it."""
        self._start = self._pos

    def _has_prefix(self, literal: bytes) -> bool:
        return self._input.startswith(literal, self._pos)

    def _consume_line_break(self) -> bool:
        """Consume one line break: CR, LF, CRLF or LFCR.

        Returns:
            True if anything was consumed.
        """
        first = self._next()
        if first not in LINE_BREAKS:
            self._backup()
            return False
        second = self._next()
        if second == first or second not in LINE_BREAKS:
            self._backup()
        return True

    # =========================================================================
    # Item creation
    # =========================================================================

    def _make_item(
        self, item_type: ItemType, value: bytes, offset: int, end_offset: int
    ) -> Item:
        loc = SourceLocation.from_offset(
            self._input, offset, end_offset, source_file=self._source_file
        )
        return Item(
            type=item_type,
            value=value,
            offset=offset,
            end_offset=end_offset,
            lineno=loc.lineno,
            col=loc.col_offset,
            source_file=self._source_file,
            _location_cache=loc,
        )

    def _emit(self, item_type: ItemType) -> Item:
        """Emit ``input[start:pos]`` and move start up to pos."""
        item = self._make_item(
            item_type, self._input[self._start : self._pos], self._start, self._pos
        )
        self._start = self._pos
        logger.debug("emit %r", item)
        return item

    def _errorf(self, fmt: str, *args: object) -> Item:
        """Build an ERROR item at the cursor and stop the machine."""
        message = fmt % args if args else fmt
        self._state = None
        logger.debug("scan error at offset %d: %s", self._pos, message)
        return self._make_item(
            ItemType.ERROR, message.encode("utf-8"), self._pos, self._pos
        )


def lex(
    source: bytes | str,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Item]:
    """Scan a document, returning the lazy item stream.

    Example:
        >>> [item.type.name for item in lex("no frontmatter")]
        ['CONTENT', 'EOF']
    """
    return Scanner(source, source_file, config).tokenize()
