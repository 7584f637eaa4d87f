"""
sepalex: whitespace-separated lexer for a small imperative language

Turns source text into a flat list of classified tokens: keywords,
identifiers, integer and decimal literals, operators and whitespace runs.
Tokens must be separated by whitespace; ``42+3`` is an error, not three
tokens.

Quick Start:
    >>> from sepalex import tokenize, significant
    >>> for token in significant(tokenize("fn myFunc 42 + 3.14 while")):
    ...     print(token)
    Keyword(Fn)
    Identifier("myFunc")
    Integer(42)
    Operator(Plus)
    Decimal(3.14)
    Keyword(While)

Profiles:
    >>> from sepalex import STANDALONE_PROFILE
    >>> tokenize("else", profile=STANDALONE_PROFILE)
    [Token(IDENTIFIER, 'else', 'else')]

Installation:
    pip install sepalex              # Core lexer (zero deps)
"""

from sepalex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from sepalex.errors import (
    ConfigurationError,
    LexError,
    MissingSeparatorError,
    NumericLiteralOverflowError,
    SepalexError,
    UnknownOperatorSpellingError,
    UnrecognizedTokenError,
)
from sepalex.lexer import Lexer
from sepalex.profiles import (
    BUILTIN_PROFILES,
    LIBRARY_PROFILE,
    STANDALONE_PROFILE,
    LexProfile,
    get_profile,
)
from sepalex.tokens import (
    Keyword,
    Operator,
    OperatorCategory,
    Token,
    TokenType,
    significant,
)
from sepalex.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(
    source: str,
    *,
    profile: LexProfile | None = None,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize source into a list of tokens.

    All-or-nothing: either every token of the input is returned, or the
    first error is raised and no tokens are returned.

    Args:
        source: Source text
        profile: Keyword/operator profile. Defaults to the profile of the
            active LexConfig.
        source_file: Optional source file path for error messages

    Returns:
        Tokens in source order. Whitespace runs are included unless the
        active LexConfig sets keep_whitespace=False.

    Raises:
        LexError: Ill-formed input (see MissingSeparatorError,
            UnrecognizedTokenError, NumericLiteralOverflowError)
        ConfigurationError: A custom profile's operator pattern admits a
            spelling with no operator entry

    Example:
        >>> [str(t) for t in tokenize("x == 1") if not t.is_whitespace]
        ['Identifier("x")', 'Operator(EqualEqual)', 'Integer(1)']
    """
    config = get_lex_config()
    lexer = Lexer(source, profile=profile or config.profile, source_file=source_file)
    try:
        tokens = list(lexer.tokenize())
    except LexError as exc:
        logger.debug("Tokenization failed: %s", exc)
        raise

    if not config.keep_whitespace:
        return significant(tokens)
    return tokens


__all__ = [
    # Main API
    "tokenize",
    "significant",
    "Lexer",
    # Tokens
    "Keyword",
    "Operator",
    "OperatorCategory",
    "Token",
    "TokenType",
    # Profiles and configuration
    "BUILTIN_PROFILES",
    "LIBRARY_PROFILE",
    "STANDALONE_PROFILE",
    "LexProfile",
    "get_profile",
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "SepalexError",
    "LexError",
    "MissingSeparatorError",
    "UnrecognizedTokenError",
    "NumericLiteralOverflowError",
    "ConfigurationError",
    "UnknownOperatorSpellingError",
    # Version
    "__version__",
]
