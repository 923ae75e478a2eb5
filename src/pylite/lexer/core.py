"""Pull-based state-machine lexer.

The parser calls next_token() and gets exactly one token back. Layout
tokens (NEWLINE, INDENT, DEDENT) are synthesized by comparing each
line's indentation column with a stack of open block levels.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NoReturn

from pylite.config import LexConfig, get_lex_config
from pylite.errors import LexError
from pylite.lexer.classifiers import (
    NumberClassifierMixin,
    OperatorClassifierMixin,
    StringClassifierMixin,
    WordClassifierMixin,
)
from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.indent import IndentStack
from pylite.lexer.modes import LexerMode
from pylite.lexer.scanners import (
    DedentScannerMixin,
    InLineScannerMixin,
    LineStartScannerMixin,
)
from pylite.location import SourceLocation
from pylite.tokens import Token, TokenType
from pylite.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (in-line lexemes)
    StringClassifierMixin,
    NumberClassifierMixin,
    WordClassifierMixin,
    OperatorClassifierMixin,
    # Scanners (mode-specific scanning logic)
    LineStartScannerMixin,
    DedentScannerMixin,
    InLineScannerMixin,
):
    """Indentation-sensitive lexer returning one token per call.

    Each call to next_token() runs the mode state machine until it
    produces a token. Whitespace, comments and blank lines produce
    nothing and are skipped within the same call. Once EOF has been
    returned, every later call returns the same EOF token.

    Usage:
            >>> lexer = Lexer("x = 1\\n", "demo.pyl")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(NAME, 'x', 1:1)
        Token(ASSIGN, 1:3)
        Token(NUMBER, 1, 1:5)
        Token(NEWLINE, 1:6)
        Token(EOF, 2:1)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_cursor",
        "_source_file",
        "_config",
        "_mode",
        "_indent_stack",
        "_eof_token",  # Set once EOF has been produced
    )

    def __init__(
        self,
        source: str,
        source_name: str = "<input>",
        *,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Program text
            source_name: Name reported in locations (usually the file path)
            config: Lexer configuration; defaults to the active context config
        """
        self._config = config if config is not None else get_lex_config()
        self._cursor = Cursor(source, self._config.tab_width)
        self._source_file = source_name
        self._mode = LexerMode.LINE_START
        self._indent_stack = IndentStack()
        self._eof_token: Token | None = None

    @property
    def source_name(self) -> str:
        return self._source_file

    @property
    def config(self) -> LexConfig:
        return self._config

    @property
    def mode(self) -> LexerMode:
        """Current mode of the state machine."""
        return self._mode

    @property
    def indent_levels(self) -> tuple[int, ...]:
        """Open indentation columns, base level first."""
        return self._indent_stack.levels

    @property
    def position(self) -> Position:
        """Line and column of the next unconsumed character."""
        return self._cursor.position

    def next_token(self) -> Token:
        """Return the next token.

        Returns:
            The next token in source order; EOF forever once input is
            exhausted and every open block has been closed.

        Raises:
            LexError: On any lexical error. The lexer must not be used
                afterwards.
        """
        if self._eof_token is not None:
            return self._eof_token

        while True:
            token = self._dispatch_mode()
            if token is not None:
                return token

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the remaining source into a token stream.

        Yields:
            Token objects one at a time, ending with a single EOF.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def locate(self, position: Position | None = None) -> SourceLocation:
        """Project a cursor position onto a SourceLocation.

        Args:
            position: Position to project (default: current cursor position)

        Returns:
            Location in this lexer's source.
        """
        if position is None:
            position = self._cursor.position
        return SourceLocation(
            lineno=position.lineno,
            col_offset=position.col,
            source_file=self._source_file,
        )

    def fail(self, message: str, error_cls: type[LexError] = LexError) -> NoReturn:
        """Raise a fatal lexical error at the current position.

        Args:
            message: Error description
            error_cls: LexError subclass to raise

        Raises:
            LexError: Always.
        """
        location = self.locate()
        logger.debug("Lexing failed at %s: %s", location, message)
        raise error_cls(message, location)

    def _dispatch_mode(self) -> Token | None:
        """Dispatch to appropriate scanner based on current mode.

        Returns:
            Token from the mode-specific scanner, or None if it only
            consumed input or changed mode.
        """
        if self._mode == LexerMode.LINE_START:
            return self._scan_line_start()
        elif self._mode == LexerMode.DEDENT:
            return self._scan_dedent()
        return self._scan_in_line()

    def _scan_end_of_input(self) -> Token:
        """Close one open block per call, then produce EOF.

        Returns:
            DEDENT while blocks remain open, then EOF.
        """
        position = self._cursor.position
        if self._indent_stack.depth:
            level = self._indent_stack.pop()
            logger.debug("DEDENT from column %d at end of input", level)
            return self._make_token(TokenType.DEDENT, None, "", position)

        self._eof_token = self._make_token(TokenType.EOF, None, "", position)
        logger.debug("EOF at %s", self._eof_token.location)
        return self._eof_token

    def _make_token(
        self,
        token_type: TokenType,
        value: int | str | None,
        text: str,
        start: Position,
    ) -> Token:
        """Create a Token located at start.

        Args:
            token_type: The token type.
            value: Payload (int, decoded string, name, or None).
            text: Raw matched text.
            start: Cursor position where the match began.

        Returns:
            Token with its SourceLocation.
        """
        return Token(
            type=token_type,
            value=value,
            text=text,
            location=self.locate(start),
        )
