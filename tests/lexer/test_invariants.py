"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sepalex import (
    Keyword,
    LexError,
    MissingSeparatorError,
    NumericLiteralOverflowError,
    Operator,
    Token,
    TokenType,
    significant,
    tokenize,
)
from sepalex.lexer import Lexer
from sepalex.lexer.classifiers import KEYWORDS
from sepalex.lexer.rules import I64_MAX, I64_MIN

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,12}", fullmatch=True)
integers = st.integers(min_value=I64_MIN, max_value=I64_MAX).map(str)
decimals = st.builds(
    lambda sign, whole, frac: f"{sign}{whole}.{frac}",
    st.sampled_from(["", "-"]),
    st.from_regex(r"[0-9]{1,8}", fullmatch=True),
    st.from_regex(r"[0-9]{1,8}", fullmatch=True),
)
operators = st.sampled_from([op.value for op in Operator])
keywords = st.sampled_from([kw.value for kw in Keyword])
lexemes = st.one_of(identifiers, integers, decimals, operators, keywords)
separators = st.from_regex(r"[ \t\n]{1,4}", fullmatch=True)


@st.composite
def programs(draw: st.DrawFn) -> tuple[str, list[str]]:
    """Whitespace-separated valid lexemes, with optional outer whitespace."""
    words = draw(st.lists(lexemes, min_size=1, max_size=30))
    parts = [draw(st.sampled_from(["", " ", "\n"]))]
    for i, word in enumerate(words):
        if i:
            parts.append(draw(separators))
        parts.append(word)
    parts.append(draw(st.sampled_from(["", " ", "\t\n"])))
    return "".join(parts), words


def _outcome(source: str) -> object:
    try:
        return [(t.type, t.value, t.text) for t in tokenize(source)]
    except LexError as exc:
        return (type(exc).__name__, exc.byte_offset)


class TestRoundTrip:
    """Valid programs tokenize completely."""

    @given(programs())
    @settings(max_examples=200)
    def test_lexemes_reconstruct_source(self, program: tuple[str, list[str]]) -> None:
        source, _ = program
        assert "".join(t.text for t in tokenize(source)) == source

    @given(programs())
    @settings(max_examples=200)
    def test_one_token_per_word(self, program: tuple[str, list[str]]) -> None:
        source, words = program
        assert [t.text for t in significant(tokenize(source))] == words

    @given(st.integers(min_value=I64_MIN, max_value=I64_MAX))
    def test_integer_payload_is_exact(self, value: int) -> None:
        assert tokenize(str(value)) == [Token.integer(value)]

    @given(decimals)
    def test_decimal_payload_is_exact(self, literal: str) -> None:
        (token,) = tokenize(literal)
        assert token.type is TokenType.DECIMAL
        assert token.value == float(literal)


class TestDeterminism:
    """Tokenization is a pure function of its input."""

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        assert _outcome(source) == _outcome(source)


class TestAdjacency:
    """No two non-whitespace tokens are ever adjacent."""

    @given(st.text(alphabet="ab1.-+=<>!&| \t\n", max_size=80))
    @settings(max_examples=300)
    def test_success_implies_separated(self, source: str) -> None:
        try:
            tokens = tokenize(source)
        except LexError:
            return
        for previous, current in zip(tokens, tokens[1:]):
            assert previous.is_whitespace or current.is_whitespace

    @given(identifiers, operators, st.booleans())
    def test_joined_word_and_operator_rejected(self, word: str, op: str, word_first: bool) -> None:
        source = word + op if word_first else op + word
        with pytest.raises(MissingSeparatorError):
            tokenize(source)


class TestKeywordShadowing:
    """Keyword spellings never lex as identifiers and vice versa."""

    @given(identifiers)
    def test_identifier_shaped_words(self, word: str) -> None:
        (token,) = tokenize(word)
        if word in KEYWORDS:
            assert token == Token.keyword(KEYWORDS[word])
        else:
            assert token == Token.identifier(word)


class TestTotality:
    """Any input terminates with tokens or a LexError."""

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_only_lex_errors(self, source: str) -> None:
        try:
            tokenize(source)
        except LexError:
            pass

    @given(st.integers(min_value=I64_MAX + 1) | st.integers(max_value=I64_MIN - 1))
    def test_out_of_range_integers_reported(self, value: int) -> None:
        with pytest.raises(NumericLiteralOverflowError):
            tokenize(str(value))

    @given(st.text(alphabet="x1 +", max_size=100))
    def test_lexer_prefix_before_error(self, source: str) -> None:
        """The iterator yields the validated prefix, then raises."""
        seen: list[Token] = []
        try:
            for token in Lexer(source).tokenize():
                seen.append(token)
        except LexError:
            pass
        consumed = "".join(t.text for t in seen)
        assert source.startswith(consumed)
