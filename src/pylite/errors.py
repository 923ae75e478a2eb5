"""Exception classes for pylite.

Every lexical error is fatal: the lexer raises one of the LexError
subclasses below and the scanning session ends. There is no recovery
mode and no error token.
"""

from __future__ import annotations

from pylite.location import SourceLocation


class PyliteError(Exception):
    """Base exception for all pylite errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(PyliteError):
    """Fatal lexical error with the location where scanning stopped."""

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        """Initialize lexical error.

        Args:
            message: Error description shown to the user
            location: Where the error occurred (optional)
        """
        self.message = message
        self.location = location
        self.lineno = location.lineno if location is not None else None
        self.col_offset = location.col_offset if location is not None else None
        self.source_file = location.source_file if location is not None else None

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")


class IndentationMismatchError(LexError):
    """A dedent lands on a column that matches no enclosing block."""

    pass


class UnexpectedCharacterError(LexError):
    """No token rule matches the character at the current position.

    Unterminated string literals end up here too, reported at the
    opening quote.
    """

    pass


class IntegerOverflowError(LexError):
    """An integer literal exceeds the configured maximum."""

    pass
