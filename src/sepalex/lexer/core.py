"""Priority-ordered lexer with whitespace-separated tokens.

Scans forward through the source, trying each lexical rule in order at
the cursor and committing the first match. Every match is non-empty, so
tokenization always terminates.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; rule tables are shared but immutable.

"""

from __future__ import annotations

from collections.abc import Iterator

from sepalex.lexer.rules import RuleTable, rule_table_for
from sepalex.lexer.scanner import ScannerMixin
from sepalex.lexer.validator import ValidatorMixin
from sepalex.profiles import LIBRARY_PROFILE, LexProfile
from sepalex.tokens import Token
from sepalex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    ScannerMixin,
    ValidatorMixin,
):
    """Single-use lexer over one source string.

    Usage:
        >>> lexer = Lexer("if x != 10")
        >>> [str(t) for t in lexer.tokenize() if not t.is_whitespace]
        ['Keyword(If)', 'Identifier("x")', 'Operator(NotEqual)', 'Integer(10)']

    Each token is validated before it is yielded, so a consumer sees the
    tokens preceding an error and then the exception. Use
    ``sepalex.tokenize`` for an all-or-nothing list.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_profile",
        "_rules",
        "_source_file",
        "_previous",  # Last emitted token, for the adjacency check
    )

    def __init__(
        self,
        source: str,
        profile: LexProfile | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text
            profile: Keyword/operator profile (library profile if None)
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._profile = profile or LIBRARY_PROFILE
        self._rules: RuleTable = rule_table_for(self._profile)
        self._source_file = source_file
        self._previous: Token | None = None

    @property
    def profile(self) -> LexProfile:
        return self._profile

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, whitespace runs included

        Raises:
            MissingSeparatorError: Two non-whitespace tokens are adjacent.
            UnrecognizedTokenError: Input no rule matches.
            NumericLiteralOverflowError: A literal is out of range.
            UnknownOperatorSpellingError: Profile operator pattern drifted
                from the operator classifier.
        """
        logger.debug(
            "Tokenizing %d chars with profile %r", self._source_len, self._profile.name
        )
        count = 0
        while True:
            matched = self._scan_next()
            if matched is None:
                break
            token, end = matched
            self._check_adjacent(token, self._pos)
            self._commit_to(end)
            self._previous = token
            count += 1
            yield token

        self._check_trailing()
        logger.debug("Produced %d tokens", count)
