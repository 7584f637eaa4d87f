"""Validator mixin: adjacency and trailing-input checks."""

from __future__ import annotations

from sepalex.errors import MissingSeparatorError, UnrecognizedTokenError
from sepalex.tokens import Token, TokenType
from sepalex.utils.text import ASCII_WHITESPACE, byte_offset


class ValidatorMixin:
    """Mixin enforcing the lexer's two input rules.

    1. Two non-whitespace tokens may never be adjacent. ``42+3`` has no
       unambiguous boundary, so it is rejected, not split.
    2. Scanning may only stop early on trailing whitespace. Anything else
       left over is unrecognized input.

    Both checks fail fast: the first violation raises.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _previous: Token | None
    _source_file: str | None

    def _check_adjacent(self, token: Token, start: int) -> None:
        """Reject token if it directly follows another non-whitespace token.

        Args:
            token: Newly scanned token
            start: Position in source where token starts

        Raises:
            MissingSeparatorError: If neither token is whitespace.
        """
        previous = self._previous
        if (
            previous is not None
            and previous.type is not TokenType.WHITESPACE
            and token.type is not TokenType.WHITESPACE
        ):
            raise MissingSeparatorError(
                previous,
                token,
                byte_offset(self._source, start),
                self._source_file,
            )

    def _check_trailing(self) -> None:
        """Reject any non-whitespace input left after scanning stopped.

        The reported offset is where scanning stopped, before trimming.

        Raises:
            UnrecognizedTokenError: If the remainder is not pure ASCII whitespace.
        """
        remaining = self._source[self._pos :]
        if remaining.strip(ASCII_WHITESPACE):
            raise UnrecognizedTokenError(
                byte_offset(self._source, self._pos),
                remaining,
                self._source_file,
            )
