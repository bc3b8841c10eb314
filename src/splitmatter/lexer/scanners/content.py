"""Content and end-of-input scanner mixin."""

from collections.abc import Iterator

from splitmatter.items import Item, ItemType
from splitmatter.lexer.states import ScanState


class ContentScannerMixin:
    """Mixin emitting the remainder of the input and the end marker."""

    _pos: int
    _input_len: int
    _state: ScanState | None

    def _emit(self, item_type: ItemType) -> Item:
        """Emit the pending span. Implemented by Scanner."""
        raise NotImplementedError

    def _make_item(
        self, item_type: ItemType, value: bytes, offset: int, end_offset: int
    ) -> Item:
        """Create an item with location. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_content(self) -> Iterator[Item]:
        """Emit everything after the frontmatter as one item.

        The content item is always emitted, even when empty.
        """
        # Content is opaque; no need to decode it rune by rune
        self._pos = self._input_len
        self._state = ScanState.DONE
        yield self._emit(ItemType.CONTENT)

    def _scan_done(self) -> Iterator[Item]:
        self._state = None
        yield self._make_item(ItemType.EOF, b"", self._pos, self._pos)
