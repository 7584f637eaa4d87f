"""Keyword classifier."""

from __future__ import annotations

from collections.abc import Set
from types import MappingProxyType

from sepalex.tokens import Keyword

# Spelling -> Keyword. Read-only after import.
KEYWORDS = MappingProxyType({kw.value: kw for kw in Keyword})


def classify_keyword(text: str, enabled: Set[Keyword] | None = None) -> Keyword | None:
    """Return the Keyword spelled exactly by text, or None.

    Matching is case-sensitive. When ``enabled`` is given, keywords outside
    it are treated as ordinary identifiers.

    Example:
        >>> classify_keyword("while")
        <Keyword.WHILE: 'while'>
        >>> classify_keyword("While") is None
        True
    """
    keyword = KEYWORDS.get(text)
    if keyword is None or (enabled is not None and keyword not in enabled):
        return None
    return keyword
