"""ContextVar-based lexer configuration for pylite.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pylite.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(max_int=2**63 - 1)):
        tokens = tokenize(source)

    # Or pass a config explicitly
    lexer = Lexer(source, config=LexConfig(tab_width=4))

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from pylite.escapes import unescape as default_unescape


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        tab_width: Tab stop interval used for columns and indentation
        max_int: Largest integer literal accepted before IntegerOverflowError
        unescape: Decoder applied to the interior of string literals

    """

    tab_width: int = 8
    max_int: int = 2**31 - 1
    unescape: Callable[[str], str] = default_unescape

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError(f"tab_width must be positive, got {self.tab_width}")
        if self.max_int < 0:
            raise ValueError(f"max_int must not be negative, got {self.max_int}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({"tab_width": 4, "color": "red"})
            >>> config.tab_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
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

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lex_config_context(LexConfig(tab_width=4)):
        ...     lexer = Lexer("\\tx\\n")
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
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
