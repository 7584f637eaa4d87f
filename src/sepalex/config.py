"""ContextVar-based lexer configuration for sepalex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
``tokenize()`` reads the active profile from here when none is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from sepalex.config import LexConfig, lex_config_context
    from sepalex.profiles import STANDALONE_PROFILE

    with lex_config_context(LexConfig(profile=STANDALONE_PROFILE)):
        tokens = tokenize("fn f 1")

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from sepalex.profiles import LIBRARY_PROFILE, LexProfile, get_profile


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        profile: Active keyword/operator profile
        keep_whitespace: Include WHITESPACE tokens in ``tokenize()`` output.
            Validation is unaffected; whitespace is still required between
            tokens.

    """

    profile: LexProfile = LIBRARY_PROFILE
    keep_whitespace: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> LexConfig:
        """Create LexConfig from dictionary.

        ``profile`` may be a LexProfile or the name of a built-in profile.
        Unknown keys are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"profile": "standalone"})
            >>> config.profile.name
            'standalone'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        profile = filtered.get("profile")
        if isinstance(profile, str):
            filtered["profile"] = get_profile(profile)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Only affects the current thread's context.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(keep_whitespace=False)):
        ...     tokens = tokenize("a b")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
