"""Modular state-machine lexer for the pylite teaching language.

This package provides a pull-based lexer: every call to next_token()
returns exactly one token, including the synthesized NEWLINE, INDENT
and DEDENT layout tokens.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + driver loop)
├── modes.py             # LexerMode enum, keyword and operator tables
├── cursor.py            # Position tracking with tab stops
├── indent.py            # IndentStack, indent_column
├── classifiers/         # In-line lexeme classification mixins
│   ├── literal.py       # Strings and integers
│   ├── word.py          # Keywords and identifiers
│   └── operator.py      # Operators and punctuation
└── scanners/            # Mode-specific scanners
    ├── line_start.py    # LINE_START mode (indentation, blank lines)
    ├── dedent.py        # DEDENT mode (one DEDENT per call)
    └── inline.py        # IN_LINE mode (main dispatch)

Usage:
    >>> from pylite.lexer import Lexer
    >>> lexer = Lexer("if x:\\n    y = 1\\n")
    >>> [token.type.name for token in lexer.tokenize()]
    ['IF', 'NAME', 'COLON', 'NEWLINE', 'INDENT', 'NAME', 'ASSIGN', 'NUMBER', 'NEWLINE', 'DEDENT', 'EOF']

"""

from pylite.lexer.core import Lexer
from pylite.lexer.cursor import Cursor, Position, advance_position
from pylite.lexer.indent import IndentStack, indent_column
from pylite.lexer.modes import LexerMode

__all__ = [
    "Cursor",
    "IndentStack",
    "Lexer",
    "LexerMode",
    "Position",
    "advance_position",
    "indent_column",
]
