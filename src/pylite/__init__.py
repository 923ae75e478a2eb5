"""
pylite: Lexer for an indentation-sensitive teaching language

Turns source text into classified tokens, including the NEWLINE, INDENT
and DEDENT tokens that carry block structure, with exact line and
column positions for diagnostics.

Quick Start:
    >>> from pylite import tokenize
    >>> [token.type.name for token in tokenize("x = 1\\n")]
    ['NAME', 'ASSIGN', 'NUMBER', 'NEWLINE', 'EOF']

    >>> # Pull one token at a time, as a parser does
    >>> from pylite import Lexer
    >>> lexer = Lexer("print(x)\\n", "demo.pyl")
    >>> lexer.next_token()
    Token(PRINT, 1:1)

Errors:
    Lexical errors are fatal and raise a LexError subclass carrying the
    location where scanning stopped:

    >>> tokenize("x = $\\n")
    Traceback (most recent call last):
        ...
    pylite.errors.UnexpectedCharacterError: <input>:1:5 Unexpected character: $
"""

from pylite.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pylite.errors import (
    IndentationMismatchError,
    IntegerOverflowError,
    LexError,
    PyliteError,
    UnexpectedCharacterError,
)
from pylite.escapes import unescape
from pylite.lexer import IndentStack, Lexer, LexerMode, indent_column
from pylite.location import SourceLocation
from pylite.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    source_name: str = "<input>",
    *,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize a whole source string.

    Args:
        source: Program text
        source_name: Name reported in token and error locations
        config: Lexer configuration (default: active context config)

    Returns:
        All tokens, ending with EOF.

    Raises:
        LexError: On the first lexical error.
    """
    return list(Lexer(source, source_name, config=config).tokenize())


__all__ = [
    # Main API
    "tokenize",
    "Lexer",
    "LexerMode",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Indentation
    "IndentStack",
    "indent_column",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Escapes
    "unescape",
    # Errors
    "PyliteError",
    "LexError",
    "IndentationMismatchError",
    "UnexpectedCharacterError",
    "IntegerOverflowError",
    "__version__",
]
