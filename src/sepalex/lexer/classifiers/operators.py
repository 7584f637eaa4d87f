"""Operator classifier."""

from __future__ import annotations

from collections.abc import Set
from types import MappingProxyType

from sepalex.tokens import Operator

# Spelling -> Operator. Read-only after import.
OPERATORS = MappingProxyType({op.value: op for op in Operator})


def classify_operator(
    text: str, enabled: Set[Operator] | None = None
) -> Operator | None:
    """Return the Operator spelled exactly by text, or None.

    When ``enabled`` is given, operators outside it are not recognized.

    Example:
        >>> classify_operator("<=")
        <Operator.LESS_EQUAL: '<='>
        >>> classify_operator("=>") is None
        True
    """
    operator = OPERATORS.get(text)
    if operator is None or (enabled is not None and operator not in enabled):
        return None
    return operator
