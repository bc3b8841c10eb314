"""Property-based tests for scanner invariants using Hypothesis.

These verify properties that hold for any input: the stream always
terminates with exactly one terminal item, scanning is deterministic, and
no input byte is lost or duplicated.
"""

from __future__ import annotations

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from splitmatter.items import ItemType
from splitmatter.lexer import lex

# Bytes the scanner may drop: fence characters and line breaks
DROPPABLE = frozenset(b"+-\r\n")

bodies = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)), max_size=80
).filter(lambda s: "+++" not in s and "---" not in s)

line_breaks = st.sampled_from(["\n", "\r\n", "\r", "\n\r"])

fenced_documents = st.builds(
    lambda fence, lb1, body, lb2, lb3, content: (
        f"{fence}{lb1}{body}{lb2}{fence}{lb3}{content}"
    ),
    st.sampled_from(["+++", "---"]),
    line_breaks,
    bodies,
    line_breaks,
    line_breaks,
    st.text(max_size=80),
)


class TestTermination:
    """Every stream ends with exactly one terminal item."""

    @given(st.binary(max_size=500))
    @settings(max_examples=200)
    def test_always_ends_with_single_terminal(self, source: bytes) -> None:
        items = list(lex(source))

        assert items, "Must produce at least one item"
        assert items[-1].type in (ItemType.EOF, ItemType.ERROR)
        assert sum(1 for item in items if item.is_terminal) == 1

    @given(st.text(alphabet='+-{}"\\\n\r ab', max_size=200))
    @settings(max_examples=200)
    def test_error_is_only_item(self, source: str) -> None:
        """An ERROR is never preceded or followed by other items."""
        items = list(lex(source))
        if any(item.type is ItemType.ERROR for item in items):
            assert len(items) == 1

    @given(st.binary(max_size=300))
    @settings(max_examples=100)
    def test_successful_scan_has_one_content_item(self, source: bytes) -> None:
        items = list(lex(source))
        assume(items[-1].type is ItemType.EOF)

        assert sum(1 for item in items if item.type is ItemType.CONTENT) == 1
        assert sum(1 for item in items if item.is_frontmatter) <= 1


class TestPlainContent:
    """Input without an opener is one CONTENT item."""

    @given(st.binary(max_size=300))
    @settings(max_examples=200)
    def test_whole_input_is_content(self, source: bytes) -> None:
        assume(not source.startswith((b"+", b"-", b"{")))

        items = list(lex(source))

        assert [(item.type, item.value) for item in items] == [
            (ItemType.CONTENT, source),
            (ItemType.EOF, b""),
        ]


class TestDeterminism:
    """Scanning the same input twice gives identical results."""

    @given(st.binary(max_size=300))
    @settings(max_examples=100)
    def test_repeated_scan_identical(self, source: bytes) -> None:
        first = [(item.type, item.value, item.offset) for item in lex(source)]
        second = [(item.type, item.value, item.offset) for item in lex(source)]

        assert first == second


class TestReconstruction:
    """Emitted spans plus dropped fence bytes rebuild the input."""

    @given(st.one_of(fenced_documents, st.text(max_size=200)))
    @settings(max_examples=200)
    def test_spans_and_gaps_rebuild_input(self, source: str) -> None:
        data = source.encode()
        items = list(lex(data))
        assume(items[-1].type is ItemType.EOF)

        spans = [item for item in items if not item.is_terminal]
        rebuilt = b""
        cursor = 0
        for item in spans:
            assert item.offset >= cursor, "Spans must not overlap"
            gap = data[cursor : item.offset]
            assert set(gap) <= DROPPABLE, f"Dropped non-fence bytes: {gap!r}"
            assert data[item.offset : item.end_offset] == item.value
            rebuilt += gap + item.value
            cursor = item.end_offset

        assert cursor == len(data), "Content must run to end of input"
        assert rebuilt == data

    @given(fenced_documents)
    @settings(max_examples=100)
    def test_generated_fenced_documents_split(self, source: str) -> None:
        items = list(lex(source))

        assert items[0].is_frontmatter
        assert [item.type for item in items[1:]] == [ItemType.CONTENT, ItemType.EOF]
