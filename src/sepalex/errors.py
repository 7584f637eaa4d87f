"""Exception classes for sepalex.

Input errors (LexError and subclasses) describe source text the lexer
refuses. ConfigurationError and subclasses describe a rule table that
disagrees with its classifier tables; they never depend on user input
when the built-in profiles are used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sepalex.tokens import Token


class SepalexError(Exception):
    """Base exception for all sepalex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(SepalexError):
    """Error in the source text being tokenized.

    Attributes:
        byte_offset: Offset in UTF-8 bytes from the start of the source
    """

    def __init__(
        self,
        message: str,
        byte_offset: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with its location.

        Args:
            message: Error description
            byte_offset: Offset in bytes where the error occurred
            source_file: Path to source file (optional)
        """
        self.message = message
        self.byte_offset = byte_offset
        self.source_file = source_file

        location = f"{source_file}:" if source_file else ""
        super().__init__(f"{location}{byte_offset}: {message}")


class MissingSeparatorError(LexError):
    """Two non-whitespace tokens are adjacent with no whitespace between them.

    The boundary between the two is ambiguous, so the input is rejected
    rather than split.
    """

    def __init__(
        self,
        previous: Token,
        current: Token,
        byte_offset: int,
        source_file: str | None = None,
    ) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            f"Missing separator between tokens {previous} and {current}",
            byte_offset,
            source_file,
        )


class UnrecognizedTokenError(LexError):
    """No lexical rule matches at the given position."""

    def __init__(
        self,
        byte_offset: int,
        remaining: str,
        source_file: str | None = None,
    ) -> None:
        self.remaining = remaining
        preview = remaining if len(remaining) <= 20 else remaining[:17] + "..."
        super().__init__(
            f"Unrecognized token starting at position {byte_offset}: {preview!r}",
            byte_offset,
            source_file,
        )


class NumericLiteralOverflowError(LexError):
    """A numeric literal does not fit its target type.

    Integers must fit a signed 64-bit range; decimals must be finite
    double-precision values.
    """

    def __init__(
        self,
        byte_offset: int,
        literal_text: str,
        source_file: str | None = None,
    ) -> None:
        self.literal_text = literal_text
        preview = literal_text if len(literal_text) <= 24 else literal_text[:21] + "..."
        super().__init__(
            f"Numeric literal out of range: {preview}",
            byte_offset,
            source_file,
        )


class ConfigurationError(SepalexError):
    """The lexer's rule table and classifier tables have drifted apart.

    Not caused by the source text; raised when a profile's operator
    pattern admits spellings the classifier does not know.
    """

    pass


class UnknownOperatorSpellingError(ConfigurationError):
    """The operator rule matched a spelling with no classifier entry."""

    def __init__(self, spelling: str, profile_name: str | None = None) -> None:
        self.spelling = spelling
        self.profile_name = profile_name
        where = f" in profile '{profile_name}'" if profile_name else ""
        super().__init__(f"Unknown operator: {spelling!r}{where}")


__all__ = [
    "ConfigurationError",
    "LexError",
    "MissingSeparatorError",
    "NumericLiteralOverflowError",
    "SepalexError",
    "UnknownOperatorSpellingError",
    "UnrecognizedTokenError",
]
