"""Keyword and operator classifiers for the sepalex lexer.

Classifiers are pure lookups over read-only tables. They run only after
a rule has already matched an identifier-shaped or operator-shaped
lexeme, and decide which Keyword or Operator it spells.
"""

from sepalex.lexer.classifiers.keywords import KEYWORDS, classify_keyword
from sepalex.lexer.classifiers.operators import OPERATORS, classify_operator

__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "classify_keyword",
    "classify_operator",
]
