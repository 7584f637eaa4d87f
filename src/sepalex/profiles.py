"""Keyword/operator profiles for the sepalex lexer.

A profile selects which keywords and operators are active. Two built-in
profiles exist:

- ``library``: every keyword and operator, including ``else``, plain
  assignment ``=`` and the compound assignments ``+= -= *= /=``.
- ``standalone``: the reduced set of the standalone runner. No ``else``,
  no ``=`` and no compound assignment. ``else`` lexes as an identifier and
  a lone ``=`` is unrecognized input.

Thread Safety:
LexProfile is frozen and hashable; built-in profiles are module constants.

"""

from __future__ import annotations

from dataclasses import dataclass

from sepalex.tokens import Keyword, Operator


@dataclass(frozen=True, slots=True)
class LexProfile:
    """Active keyword and operator set.

    Attributes:
        name: Profile name (used in error messages and by get_profile)
        keywords: Keywords recognized; other reserved spellings lex as
            identifiers
        operators: Operators recognized
        operator_pattern: Optional regex overriding the pattern generated
            from ``operators``. Any spelling it matches must classify to an
            enabled operator, otherwise tokenization raises
            UnknownOperatorSpellingError.

    """

    name: str
    keywords: frozenset[Keyword]
    operators: frozenset[Operator]
    operator_pattern: str | None = None


_COMPOUND_ASSIGNMENT = frozenset(
    {
        Operator.PLUS_EQUAL,
        Operator.MINUS_EQUAL,
        Operator.MULTIPLY_EQUAL,
        Operator.DIVIDE_EQUAL,
    }
)

LIBRARY_PROFILE = LexProfile(
    name="library",
    keywords=frozenset(Keyword),
    operators=frozenset(Operator),
)

STANDALONE_PROFILE = LexProfile(
    name="standalone",
    keywords=frozenset(Keyword) - {Keyword.ELSE},
    operators=frozenset(Operator) - _COMPOUND_ASSIGNMENT - {Operator.EQUAL},
)

BUILTIN_PROFILES: dict[str, LexProfile] = {
    LIBRARY_PROFILE.name: LIBRARY_PROFILE,
    STANDALONE_PROFILE.name: STANDALONE_PROFILE,
}


def get_profile(name: str) -> LexProfile:
    """Look up a built-in profile by name.

    Raises:
        KeyError: If no built-in profile has that name.
    """
    try:
        return BUILTIN_PROFILES[name]
    except KeyError:
        known = ", ".join(sorted(BUILTIN_PROFILES))
        raise KeyError(f"Unknown profile {name!r} (known: {known})") from None


__all__ = [
    "BUILTIN_PROFILES",
    "LIBRARY_PROFILE",
    "LexProfile",
    "STANDALONE_PROFILE",
    "get_profile",
]
