"""Lexer operating modes and lexeme tables.

This module defines the finite state machine modes for the lexer
and the constant tables used by the in-line classifiers.
"""

from __future__ import annotations

from enum import Enum, auto

from pylite.tokens import TokenType


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - LINE_START: Beginning of a logical line, measuring indentation
    - IN_LINE: Body of a logical line, classifying lexemes
    - DEDENT: Closing blocks, one DEDENT per call, until the
      indentation of the pending line matches the stack top

    """

    LINE_START = auto()
    IN_LINE = auto()
    DEDENT = auto()


# Reserved words; checked after a whole identifier is scanned
KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "or": TokenType.OR,
    "not": TokenType.NOT,
    "if": TokenType.IF,
    "while": TokenType.WHILE,
    "print": TokenType.PRINT,
    "pass": TokenType.PASS,
    "input": TokenType.INPUT,
    "int": TokenType.INT_TYPE,
    "str": TokenType.STR_TYPE,
    "True": TokenType.TRUE,
    "False": TokenType.FALSE,
    "None": TokenType.NONE,
}

# Matched before single-character operators
TWO_CHAR_OPERATORS: dict[str, TokenType] = {
    "+=": TokenType.PLUS_ASSIGN,
    "-=": TokenType.MINUS_ASSIGN,
    "<=": TokenType.LESS_EQ,
    "==": TokenType.EQUAL,
}

SINGLE_CHAR_OPERATORS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "<": TokenType.LESS,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "%": TokenType.MOD,
    ":": TokenType.COLON,
}

INT_DIV_OPERATOR = "//"

# ASCII-only character classes
IDENT_START_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz_")
IDENT_CHARS = IDENT_START_CHARS | frozenset("0123456789")
DIGITS = frozenset("0123456789")

QUOTE_CHARS = frozenset("\"'")
# Characters a string literal body may never contain (besides its quote)
STRING_STOP_CHARS = frozenset("\n\r\t")

# Spaces and tabs set indentation; a lone CR is zero-width
INDENT_CHARS = frozenset(" \t\r")
INLINE_WHITESPACE = frozenset(" \t\r")

COMMENT_CHAR = "#"
