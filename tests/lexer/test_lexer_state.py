"""Tests for Lexer instance state during and after tokenization."""

from __future__ import annotations

import pytest

from sepalex import (
    LIBRARY_PROFILE,
    STANDALONE_PROFILE,
    MissingSeparatorError,
    Operator,
    Token,
)
from sepalex.lexer import Lexer


class TestCursor:
    """The cursor only moves forward and stops where matching stopped."""

    def test_cursor_at_end_after_success(self) -> None:
        lexer = Lexer("x = 1\n")
        list(lexer.tokenize())
        assert lexer._pos == len("x = 1\n")

    def test_cursor_stops_before_trailing_carriage_return(self) -> None:
        lexer = Lexer("x\r")
        assert list(lexer.tokenize()) == [Token.identifier("x")]
        assert lexer._pos == 1

    def test_previous_tracks_last_token(self) -> None:
        lexer = Lexer("a b")
        list(lexer.tokenize())
        assert lexer._previous == Token.identifier("b")

    def test_iterator_yields_prefix_before_error(self) -> None:
        lexer = Lexer("a 1+2")
        seen: list[Token] = []
        with pytest.raises(MissingSeparatorError):
            for token in lexer.tokenize():
                seen.append(token)
        assert [t.text for t in seen] == ["a", " ", "1"]

    def test_single_use(self) -> None:
        lexer = Lexer("a b")
        assert len(list(lexer.tokenize())) == 3
        assert list(lexer.tokenize()) == []

    def test_rejected_token_leaves_cursor_at_its_start(self) -> None:
        lexer = Lexer("1+2 x")
        with pytest.raises(MissingSeparatorError) as exc_info:
            list(lexer.tokenize())
        assert exc_info.value.previous == Token.integer(1)
        assert exc_info.value.current == Token.operator(Operator.PLUS)
        assert lexer._pos == 1
        assert lexer._previous == Token.integer(1)

    def test_retry_after_error_reports_same_pair(self) -> None:
        lexer = Lexer("1+2 x")
        with pytest.raises(MissingSeparatorError) as first:
            list(lexer.tokenize())
        with pytest.raises(MissingSeparatorError) as second:
            list(lexer.tokenize())
        assert second.value.previous == first.value.previous
        assert second.value.current == first.value.current
        assert second.value.byte_offset == first.value.byte_offset == 1


class TestProfileSelection:
    def test_default_profile(self) -> None:
        assert Lexer("").profile is LIBRARY_PROFILE

    def test_explicit_profile(self) -> None:
        assert Lexer("", profile=STANDALONE_PROFILE).profile is STANDALONE_PROFILE
