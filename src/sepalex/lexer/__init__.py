"""Rule-table lexer for sepalex.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, RuleTable
├── core.py              # Lexer class (mixin composition + tokenize loop)
├── rules.py             # Ordered rule table, one per profile
├── scanner.py           # One rule-table step at the cursor
├── validator.py         # Adjacency and trailing-input checks
└── classifiers/         # Keyword and operator lookups
    ├── keywords.py
    └── operators.py

Usage:
    >>> from sepalex.lexer import Lexer
    >>> for token in Lexer("fn main").tokenize():
    ...     print(token)
    Keyword(Fn)
    Whitespace
    Identifier("main")

"""

from sepalex.lexer.core import Lexer
from sepalex.lexer.rules import Rule, RuleTable, rule_table_for

__all__ = ["Lexer", "Rule", "RuleTable", "rule_table_for"]
