"""Tests for Token rendering and helpers."""

from sepalex import Keyword, Operator, Token, TokenType, significant


class TestTokenStr:
    """str(token) mirrors the printed form used by the CLI."""

    def test_literals(self) -> None:
        assert str(Token.integer(-42)) == "Integer(-42)"
        assert str(Token.decimal(3.14)) == "Decimal(3.14)"
        assert str(Token.identifier("myFunc")) == 'Identifier("myFunc")'

    def test_enums(self) -> None:
        assert str(Token.keyword(Keyword.FN)) == "Keyword(Fn)"
        assert str(Token.operator(Operator.EQUAL_EQUAL)) == "Operator(EqualEqual)"

    def test_whitespace(self) -> None:
        assert str(Token.whitespace("\n")) == "Whitespace"


class TestTokenEquality:
    def test_text_ignored(self) -> None:
        assert Token(TokenType.INTEGER, 7, "007") == Token.integer(7)

    def test_type_matters(self) -> None:
        assert Token.identifier("while") != Token.keyword(Keyword.WHILE)

    def test_hashable(self) -> None:
        assert len({Token.integer(1), Token(TokenType.INTEGER, 1, "01")}) == 1


def test_significant_filters_whitespace() -> None:
    tokens = [Token.identifier("a"), Token.whitespace(), Token.identifier("b")]
    assert significant(tokens) == [Token.identifier("a"), Token.identifier("b")]
