"""Ordered lexical rule table.

Rules are tried top to bottom at the current position and the first rule
whose pattern matches a non-empty prefix wins. This is priority matching,
not global longest match, so the order below is part of the contract:

1. whitespace run
2. decimal literal (before integer, so ``3.14`` is not ``3`` + ``.14``)
3. integer literal (before operators, so ``-42`` is one literal)
4. operator, longest spelling first (``==`` before ``=``)
5. identifier or keyword

Rule actions are pure functions of the matched lexeme. Numeric actions
raise OverflowError for literals outside their target range; match_next
turns that into NumericLiteralOverflowError with a position attached.

Thread Safety:
Rule tables are immutable and cached per profile. The built-in profiles'
tables are built at import time.

"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import lru_cache

from sepalex.errors import (
    ConfigurationError,
    NumericLiteralOverflowError,
    UnknownOperatorSpellingError,
)
from sepalex.lexer.classifiers import classify_keyword, classify_operator
from sepalex.profiles import LIBRARY_PROFILE, STANDALONE_PROFILE, LexProfile
from sepalex.tokens import Token, TokenType
from sepalex.utils.text import byte_offset

WHITESPACE_PATTERN = r"[ \t\n]+"
DECIMAL_PATTERN = r"-?[0-9]+\.[0-9]+"
INTEGER_PATTERN = r"-?[0-9]+"
IDENTIFIER_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
# Longest magnitude that can still fit: len(str(2**63)) == 19
_I64_MAX_DIGITS = 19


@dataclass(frozen=True, slots=True)
class Rule:
    """A lexical rule: a compiled pattern and the action that builds a Token.

    Attributes:
        name: Short rule name for debugging
        pattern: Compiled regex anchored at the scan position via ``match``
        action: Builds a Token from the matched lexeme

    """

    name: str
    pattern: re.Pattern[str]
    action: Callable[[str], Token]

    def __post_init__(self) -> None:
        if self.pattern.fullmatch("") is not None:
            raise ConfigurationError(
                f"Rule {self.name!r} pattern {self.pattern.pattern!r} matches the empty string"
            )

    def match(self, source: str, pos: int) -> int:
        """Return the end of the match at pos, or -1."""
        m = self.pattern.match(source, pos)
        return m.end() if m is not None else -1


def _whitespace(text: str) -> Token:
    return Token(TokenType.WHITESPACE, None, text)


def _decimal(text: str) -> Token:
    value = float(text)
    if math.isinf(value):
        raise OverflowError(f"{text} is out of range for a decimal")
    return Token(TokenType.DECIMAL, value, text)


def _integer(text: str) -> Token:
    digits = text.lstrip("-").lstrip("0")
    # int() refuses very long digit strings outright, so reject by length first
    if len(digits) > _I64_MAX_DIGITS:
        raise OverflowError(f"{text} does not fit in 64 bits")
    value = int(digits or "0")
    if text.startswith("-"):
        value = -value
    if not I64_MIN <= value <= I64_MAX:
        raise OverflowError(f"{text} does not fit in 64 bits")
    return Token(TokenType.INTEGER, value, text)


def operator_pattern(spellings: Iterable[str]) -> str:
    """Build an alternation that tries longer spellings first.

    Example:
        >>> operator_pattern(["=", "==", "<"])
        '==|<|='
    """
    ordered = sorted(set(spellings), key=lambda s: (-len(s), s))
    return "|".join(re.escape(s) for s in ordered)


class RuleTable:
    """Ordered rules for one profile.

    Usage:
        >>> table = rule_table_for(LIBRARY_PROFILE)
        >>> token, end = table.match_next("== x", 0)
        >>> token.value, end
        (<Operator.EQUAL_EQUAL: '=='>, 2)

    """

    __slots__ = ("profile", "rules")

    def __init__(self, profile: LexProfile) -> None:
        self.profile = profile
        self.rules: tuple[Rule, ...] = self._build_rules()

    def _build_rules(self) -> tuple[Rule, ...]:
        profile = self.profile

        def _operator(text: str) -> Token:
            op = classify_operator(text, profile.operators)
            if op is None:
                raise UnknownOperatorSpellingError(text, profile.name)
            return Token(TokenType.OPERATOR, op, text)

        def _identifier(text: str) -> Token:
            keyword = classify_keyword(text, profile.keywords)
            if keyword is not None:
                return Token(TokenType.KEYWORD, keyword, text)
            return Token(TokenType.IDENTIFIER, text, text)

        rules = [
            Rule("whitespace", re.compile(WHITESPACE_PATTERN), _whitespace),
            Rule("decimal", re.compile(DECIMAL_PATTERN), _decimal),
            Rule("integer", re.compile(INTEGER_PATTERN), _integer),
        ]

        op_pattern = profile.operator_pattern
        if op_pattern is None and profile.operators:
            op_pattern = operator_pattern(op.value for op in profile.operators)
        if op_pattern:
            try:
                compiled = re.compile(op_pattern)
            except re.error as exc:
                raise ConfigurationError(
                    f"Profile {profile.name!r} operator pattern {op_pattern!r} is invalid: {exc}"
                ) from exc
            rules.append(Rule("operator", compiled, _operator))

        rules.append(Rule("identifier", re.compile(IDENTIFIER_PATTERN), _identifier))
        return tuple(rules)

    def match_next(self, source: str, pos: int) -> tuple[Token, int] | None:
        """Apply the first matching rule at pos.

        Args:
            source: Full source text
            pos: Scan position (character index)

        Returns:
            (token, end) for the first rule that matches, or None when no
            rule matches at pos.

        Raises:
            NumericLiteralOverflowError: A numeric literal is out of range.
            UnknownOperatorSpellingError: The operator pattern admitted a
                spelling the profile does not classify.
        """
        for rule in self.rules:
            end = rule.match(source, pos)
            if end > pos:
                lexeme = source[pos:end]
                try:
                    return rule.action(lexeme), end
                except OverflowError:
                    raise NumericLiteralOverflowError(
                        byte_offset(source, pos), lexeme
                    ) from None
        return None


@lru_cache(maxsize=32)
def rule_table_for(profile: LexProfile) -> RuleTable:
    """Return the (cached) rule table for a profile."""
    return RuleTable(profile)


# Built once at import for the built-in profiles
LIBRARY_RULES = rule_table_for(LIBRARY_PROFILE)
STANDALONE_RULES = rule_table_for(STANDALONE_PROFILE)


__all__ = [
    "I64_MAX",
    "I64_MIN",
    "LIBRARY_RULES",
    "Rule",
    "RuleTable",
    "STANDALONE_RULES",
    "operator_pattern",
    "rule_table_for",
]
