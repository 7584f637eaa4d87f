"""Scanner mixin: one rule-table step at the cursor."""

from __future__ import annotations

from sepalex.errors import NumericLiteralOverflowError
from sepalex.lexer.rules import RuleTable
from sepalex.tokens import Token


class ScannerMixin:
    """Mixin providing the forward-only scanning step.

    Matching and committing are separate steps, so a token rejected by
    the validator leaves the cursor at its start. A match is never empty,
    so every committed step strictly advances.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _rules: RuleTable
    _source_file: str | None

    def _scan_next(self) -> tuple[Token, int] | None:
        """Match one token at the cursor without moving it.

        Returns:
            (token, end) for the matched token, or None at end of input or
            when no rule matches. The caller commits with _commit_to(end)
            once the token is accepted.
        """
        if self._pos >= self._source_len:
            return None

        try:
            matched = self._rules.match_next(self._source, self._pos)
        except NumericLiteralOverflowError as exc:
            if self._source_file is None:
                raise
            raise NumericLiteralOverflowError(
                exc.byte_offset, exc.literal_text, self._source_file
            ) from None

        return matched

    def _commit_to(self, end: int) -> None:
        """Commit position past an accepted token."""
        self._pos = end

