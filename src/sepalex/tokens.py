"""Token, TokenType, Keyword and Operator definitions for the sepalex lexer.

The lexer produces a flat list of Token objects. Each Token has a type,
a parsed payload, and the raw lexeme it was built from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType, Keyword and Operator are enums (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


def _camel(name: str) -> str:
    """EQUAL_EQUAL -> EqualEqual."""
    return "".join(part.capitalize() for part in name.split("_"))


class TokenType(Enum):
    """Token types produced by the lexer."""

    INTEGER = auto()  # 42, -42
    WHITESPACE = auto()  # run of space/tab/newline
    IDENTIFIER = auto()  # myFunc
    DECIMAL = auto()  # 3.14, -0.5
    KEYWORD = auto()  # while, if
    OPERATOR = auto()  # +, !=

    @property
    def label(self) -> str:
        return _camel(self.name)


class Keyword(Enum):
    """Reserved words. The value is the exact source spelling."""

    WHILE = "while"
    FOR = "for"
    FN = "fn"
    IF = "if"
    ELSE = "else"

    @property
    def label(self) -> str:
        return _camel(self.name)


class OperatorCategory(Enum):
    """Operator groups."""

    ARITHMETIC = auto()
    COMPARISON = auto()
    LOGICAL = auto()


class Operator(Enum):
    """Operators. The value is the exact source spelling."""

    # Arithmetic
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    PLUS_EQUAL = "+="
    MINUS_EQUAL = "-="
    MULTIPLY_EQUAL = "*="
    DIVIDE_EQUAL = "/="
    MODULO = "%"
    EQUAL = "="

    # Comparison
    EQUAL_EQUAL = "=="
    NOT_EQUAL = "!="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="

    # Logical
    AND = "&&"
    OR = "||"
    NOT = "!"

    @property
    def label(self) -> str:
        return _camel(self.name)

    @property
    def category(self) -> OperatorCategory:
        """Arithmetic, comparison or logical group of this operator."""
        if self in _COMPARISON:
            return OperatorCategory.COMPARISON
        if self in _LOGICAL:
            return OperatorCategory.LOGICAL
        return OperatorCategory.ARITHMETIC


_COMPARISON = frozenset(
    {
        Operator.EQUAL_EQUAL,
        Operator.NOT_EQUAL,
        Operator.LESS,
        Operator.LESS_EQUAL,
        Operator.GREATER,
        Operator.GREATER_EQUAL,
    }
)
_LOGICAL = frozenset({Operator.AND, Operator.OR, Operator.NOT})


TokenValue = int | float | str | Keyword | Operator | None


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Parsed payload. int for INTEGER, float for DECIMAL, str for
            IDENTIFIER, Keyword/Operator member for KEYWORD/OPERATOR, None
            for WHITESPACE.
        text: The raw lexeme matched in source. Excluded from equality so
            tokens compare by classification and payload only.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: TokenValue = None
    text: str = field(default="", compare=False)

    @property
    def is_whitespace(self) -> bool:
        return self.type is TokenType.WHITESPACE

    def __str__(self) -> str:
        """Render like ``Integer(42)``, ``Identifier("x")`` or ``Keyword(Fn)``."""
        if self.type is TokenType.WHITESPACE:
            return self.type.label
        if isinstance(self.value, (Keyword, Operator)):
            return f"{self.type.label}({self.value.label})"
        if self.type is TokenType.IDENTIFIER:
            return f'{self.type.label}("{self.value}")'
        return f"{self.type.label}({self.value!r})"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {self.value!r}, {val!r})"

    # Convenience constructors, mainly for building expected sequences.

    @classmethod
    def integer(cls, value: int, text: str = "") -> Token:
        return cls(TokenType.INTEGER, value, text or str(value))

    @classmethod
    def decimal(cls, value: float, text: str = "") -> Token:
        return cls(TokenType.DECIMAL, value, text or repr(value))

    @classmethod
    def identifier(cls, name: str) -> Token:
        return cls(TokenType.IDENTIFIER, name, name)

    @classmethod
    def keyword(cls, keyword: Keyword) -> Token:
        return cls(TokenType.KEYWORD, keyword, keyword.value)

    @classmethod
    def operator(cls, operator: Operator) -> Token:
        return cls(TokenType.OPERATOR, operator, operator.value)

    @classmethod
    def whitespace(cls, text: str = " ") -> Token:
        return cls(TokenType.WHITESPACE, None, text)


def significant(tokens: list[Token]) -> list[Token]:
    """Return tokens with WHITESPACE runs removed."""
    return [tok for tok in tokens if tok.type is not TokenType.WHITESPACE]


__all__ = [
    "Keyword",
    "Operator",
    "OperatorCategory",
    "Token",
    "TokenType",
    "TokenValue",
    "significant",
]
