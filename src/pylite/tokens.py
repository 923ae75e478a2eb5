"""Token and TokenType definitions for the pylite lexer.

The lexer produces Token objects one at a time for a pull-based parser.
Each Token has a type, an optional payload, the raw matched text, and
the source location where the match starts.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pylite.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category:
    - Structure (EOF, NEWLINE, INDENT, DEDENT)
    - Literals and names
    - Operators and punctuation
    - Keywords

    """

    # Structure
    EOF = auto()
    NEWLINE = auto()
    INDENT = auto()
    DEDENT = auto()

    # Literals and names
    STRING = auto()
    NUMBER = auto()
    NAME = auto()

    # Assignment
    ASSIGN = auto()  # =
    PLUS_ASSIGN = auto()  # +=
    MINUS_ASSIGN = auto()  # -=

    # Comparison
    LESS = auto()  # <
    LESS_EQ = auto()  # <=
    EQUAL = auto()  # ==

    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    TIMES = auto()  # *
    INT_DIV = auto()  # //
    MOD = auto()  # %

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COLON = auto()  # :

    # Keywords - logic
    AND = auto()
    OR = auto()
    NOT = auto()

    # Keywords - statements
    IF = auto()
    WHILE = auto()
    PRINT = auto()
    PASS = auto()
    INPUT = auto()

    # Keywords - types and constants
    INT_TYPE = auto()  # int
    STR_TYPE = auto()  # str
    TRUE = auto()
    FALSE = auto()
    NONE = auto()


# Tokens synthesized from layout rather than matched from text
STRUCTURAL_TYPES = frozenset(
    {TokenType.EOF, TokenType.NEWLINE, TokenType.INDENT, TokenType.DEDENT}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Payload - int for NUMBER, decoded text for STRING,
            the identifier for NAME, None otherwise
        text: Raw matched source text ("" for INDENT, DEDENT and EOF)
        location: Where the matched text starts

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    value: int | str | None
    text: str
    location: SourceLocation

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        loc = f"{self.location.lineno}:{self.location.col_offset}"
        if self.value is None:
            return f"Token({self.type.name}, {loc})"
        return f"Token({self.type.name}, {self.value!r}, {loc})"

    @property
    def kind(self) -> TokenType:
        """Token type (alias)."""
        return self.type

    @property
    def payload(self) -> int | str | None:
        """Token payload (alias)."""
        return self.value

    @property
    def is_structural(self) -> bool:
        """True for EOF, NEWLINE, INDENT and DEDENT."""
        return self.type in STRUCTURAL_TYPES

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self.location.lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self.location.col_offset
