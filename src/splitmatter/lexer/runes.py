"""UTF-8 rune decoding for the byte-oriented scanner.

The scanner walks raw bytes but advances one code point at a time so a
multi-byte character is never split across items.
"""

from __future__ import annotations

# Returned by Scanner._next() at end of input; never a valid code point
EOF_RUNE = ""

# Substituted for each byte of an invalid or truncated sequence
RUNE_ERROR = "\ufffd"

LINE_BREAKS = frozenset({"\r", "\n"})


def _sequence_length(lead: int) -> int:
    """Encoded length implied by a UTF-8 lead byte, or 0 if it cannot lead."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_rune(data: bytes, pos: int) -> tuple[str, int]:
    """Decode the code point starting at ``data[pos]``.

    Args:
        data: Encoded input
        pos: Byte offset to decode at

    Returns:
        (rune, width). ``(EOF_RUNE, 0)`` at or past the end of data,
        ``(RUNE_ERROR, 1)`` for a byte that does not start a valid sequence.

    Examples:
        >>> decode_rune("é!".encode(), 0)
        ('é', 2)
        >>> decode_rune(b"\\xff", 0) == (RUNE_ERROR, 1)
        True
    """
    if pos >= len(data):
        return EOF_RUNE, 0

    lead = data[pos]
    size = _sequence_length(lead)
    if size == 1:
        return chr(lead), 1
    if size == 0:
        return RUNE_ERROR, 1

    try:
        return data[pos : pos + size].decode("utf-8"), size
    except UnicodeDecodeError:
        return RUNE_ERROR, 1
