"""Tests for brace-balanced JSON frontmatter scanning."""

from __future__ import annotations

import pytest

from splitmatter.items import ItemType
from splitmatter.lexer import lex


def kinds_and_values(source: bytes | str) -> list[tuple[ItemType, bytes]]:
    return [(item.type, item.value) for item in lex(source)]


class TestBalancedObjects:
    """Objects that close at the matching brace."""

    def test_nested_object(self) -> None:
        assert kinds_and_values('{"a": {"b": 1}}\nBODY') == [
            (ItemType.FRONTMATTER_JSON, b'{"a": {"b": 1}}'),
            (ItemType.CONTENT, b"BODY"),
            (ItemType.EOF, b""),
        ]

    def test_empty_object(self) -> None:
        assert kinds_and_values("{}BODY")[:2] == [
            (ItemType.FRONTMATTER_JSON, b"{}"),
            (ItemType.CONTENT, b"BODY"),
        ]

    def test_multiline_object(self) -> None:
        source = '{\n  "title": "x",\n  "tags": ["a", "b"]\n}\n\n# Heading\n'
        assert kinds_and_values(source)[:2] == [
            (ItemType.FRONTMATTER_JSON, b'{\n  "title": "x",\n  "tags": ["a", "b"]\n}'),
            (ItemType.CONTENT, b"\n# Heading\n"),
        ]

    def test_crlf_after_object_dropped(self) -> None:
        assert kinds_and_values('{"a": 1}\r\nBODY')[1] == (ItemType.CONTENT, b"BODY")

    def test_braces_inside_strings_ignored(self) -> None:
        source = '{"a": "}{}}", "b": "{"}\nBODY'
        assert kinds_and_values(source)[0] == (
            ItemType.FRONTMATTER_JSON,
            b'{"a": "}{}}", "b": "{"}',
        )

    def test_escaped_quote_inside_string(self) -> None:
        block = rb'{"a": "\\\"}\\\""}'
        assert kinds_and_values(block + b"BODY") == [
            (ItemType.FRONTMATTER_JSON, block),
            (ItemType.CONTENT, b"BODY"),
            (ItemType.EOF, b""),
        ]

    def test_simple_escaped_quote(self) -> None:
        block = rb'{"say": "\"}\""}'
        assert kinds_and_values(block + b"\nBODY")[0] == (
            ItemType.FRONTMATTER_JSON,
            block,
        )

    def test_multibyte_strings(self) -> None:
        block = '{"título": "ñandú 🐦"}'
        assert kinds_and_values(block + "\ncuerpo")[:2] == [
            (ItemType.FRONTMATTER_JSON, block.encode()),
            (ItemType.CONTENT, "cuerpo".encode()),
        ]

    def test_content_may_contain_braces(self) -> None:
        assert kinds_and_values("{}\n{not json}")[1] == (
            ItemType.CONTENT,
            b"{not json}",
        )


class TestUnbalancedObjects:
    """Objects that never close produce a single ERROR."""

    @pytest.mark.parametrize(
        "source",
        [
            "{",
            '{"a": 1',
            '{"a": {"b": 1}\nBODY',
            '{"a": "}"',
            '{"a": "unterminated}',
            '{"a": "x\\',
        ],
    )
    def test_unexpected_eof(self, source: str) -> None:
        items = list(lex(source))
        assert [item.type for item in items] == [ItemType.ERROR]
        assert items[0].text == "unexpected EOF parsing JSON front matter"

    def test_error_offset_is_end_of_input(self) -> None:
        source = b'{"a": 1'
        [error] = list(lex(source))
        assert error.offset == len(source)
