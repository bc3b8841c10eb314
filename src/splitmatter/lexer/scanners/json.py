"""JSON object frontmatter scanner mixin."""

from collections.abc import Iterator

from splitmatter.items import Item, ItemType
from splitmatter.lexer.runes import EOF_RUNE
from splitmatter.lexer.states import JSON_CLOSE, JSON_OPEN, ScanState


class JsonScannerMixin:
    """Mixin scanning a brace-balanced JSON object.

    This is a brace counter, not a JSON parser: braces anywhere outside a
    string count toward nesting, a double quote toggles the in-string flag,
    and a backslash swallows the rune after it so an escaped quote cannot
    end a string.

    """

    _state: ScanState | None

    def _next(self) -> str:
        """Consume one rune. Implemented by Scanner."""
        raise NotImplementedError

    def _ignore(self) -> None:
        """Drop the pending span. Implemented by Scanner."""
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

    def _scan_json_frontmatter(self) -> Iterator[Item]:
        """Scan from the opening brace to its matching close.

        Yields:
            FRONTMATTER_JSON with braces included, or a single ERROR item.
        """
        in_quote = False
        depth = 0
        while True:
            r = self._next()
            if r == EOF_RUNE:
                yield self._errorf("unexpected EOF parsing JSON front matter")
                return
            if r == JSON_OPEN:
                if not in_quote:
                    depth += 1
            elif r == JSON_CLOSE:
                if not in_quote:
                    depth -= 1
            elif r == '"':
                in_quote = not in_quote
            elif r == "\\":
                self._next()
            if depth == 0:
                break

        item = self._emit(ItemType.FRONTMATTER_JSON)

        self._consume_line_break()
        self._ignore()
        self._state = ScanState.CONTENT
        yield item
