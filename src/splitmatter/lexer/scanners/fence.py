"""Fenced (TOML/YAML) frontmatter scanner mixin."""

from collections.abc import Iterator

from splitmatter.items import Item, ItemType
from splitmatter.lexer.runes import EOF_RUNE, LINE_BREAKS
from splitmatter.lexer.states import Fence, ScanState


class FenceScannerMixin:
    """Mixin scanning frontmatter between a pair of line fences.

    The opening fence must be exactly the fence character three times. The
    closing fence is only recognized at the start of a line; the line break
    in front of it, the fence itself, and the line break after it are all
    dropped, so the emitted item holds just the body.

    """

    # These will be set by the Scanner class
    _pos: int
    _state: ScanState | None

    def _next(self) -> str:
        """Consume one rune. Implemented by Scanner."""
        raise NotImplementedError

    def _backup(self) -> None:
        """Undo the last _next(). Implemented by Scanner."""
        raise NotImplementedError

    def _ignore(self) -> None:
        """Drop the pending span. Implemented by Scanner."""
        raise NotImplementedError

    def _has_prefix(self, literal: bytes) -> bool:
        """Check for literal at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _consume_line_break(self) -> bool:
        """Consume one line break if present. Implemented by Scanner."""
        raise NotImplementedError

    def _emit(self, item_type: ItemType) -> Item:
        """Emit the pending span. Implemented by Scanner."""
        raise NotImplementedError

    def _errorf(self, fmt: str, *args: object) -> Item:
        """Build an error item and stop. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_fenced_frontmatter(self, fence: Fence) -> Iterator[Item]:
        """Scan a fenced frontmatter block.

        Yields:
            The frontmatter item, or a single ERROR item.
        """
        delimiter = fence.delimiter
        for _ in range(len(delimiter)):
            if self._next() != fence.char:
                yield self._errorf("invalid %s delimiter", fence.name)
                return

        at_line_start = self._consume_line_break()
        self._ignore()

        # An empty body closes on the very next line
        if not (at_line_start and self._has_prefix(delimiter)):
            while True:
                r = self._next()
                if r == EOF_RUNE:
                    yield self._errorf(
                        "EOF looking for end %s front matter delimiter", fence.name
                    )
                    return
                if r not in LINE_BREAKS:
                    continue
                self._backup()
                body_end = self._pos
                self._consume_line_break()
                if self._has_prefix(delimiter):
                    self._pos = body_end
                    break

        item = self._emit(fence.item_type)

        self._consume_line_break()
        self._pos += len(delimiter)
        self._consume_line_break()
        self._ignore()
        self._state = ScanState.CONTENT
        yield item
