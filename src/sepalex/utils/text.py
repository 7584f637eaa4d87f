"""Text helpers shared by the lexer and error reporting."""

from __future__ import annotations

# str.strip() with no argument also removes Unicode spaces; the trailing
# input check only forgives ASCII whitespace.
ASCII_WHITESPACE = " \t\n\r\x0b\x0c"


def byte_offset(source: str, pos: int) -> int:
    """Convert a character index into a UTF-8 byte offset.

    Args:
        source: Full source text
        pos: Character index into source

    Returns:
        Number of UTF-8 bytes in source[:pos].

    Example:
        >>> byte_offset("abc", 2)
        2
        >>> byte_offset("é x", 2)
        3
    """
    if source.isascii():
        return pos
    return len(source[:pos].encode("utf-8", "surrogatepass"))
