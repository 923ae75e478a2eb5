"""In-line mode scanner mixin."""

from typing import NoReturn

from pylite.errors import LexError, UnexpectedCharacterError
from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.modes import COMMENT_CHAR, INLINE_WHITESPACE, LexerMode
from pylite.tokens import Token, TokenType


class InLineScannerMixin:
    """Mixin providing in-line mode scanning logic.

    Handles whitespace, comments and line ends itself and hands every
    other lexeme to the classifiers, in priority order.

    """

    # These will be set by the Lexer class
    _cursor: Cursor
    _mode: LexerMode

    def _make_token(
        self,
        token_type: TokenType,
        value: int | str | None,
        text: str,
        start: Position,
    ) -> Token:
        """Create token at start. Implemented by Lexer."""
        raise NotImplementedError

    def fail(self, message: str, error_cls: type[LexError] = LexError) -> NoReturn:
        """Raise a lexical error at the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_end_of_input(self) -> Token:
        """Close open blocks, then emit EOF. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_string(self) -> Token | None:
        """Match a string literal. Implemented by StringClassifierMixin."""
        raise NotImplementedError

    def _try_classify_compound_operator(self) -> Token | None:
        """Match a two-character operator. Implemented by OperatorClassifierMixin."""
        raise NotImplementedError

    def _try_classify_word(self) -> Token | None:
        """Match a keyword or identifier. Implemented by WordClassifierMixin."""
        raise NotImplementedError

    def _try_classify_number(self) -> Token | None:
        """Match an integer literal. Implemented by NumberClassifierMixin."""
        raise NotImplementedError

    def _try_classify_operator(self) -> Token | None:
        """Match a single-character operator or "//". Implemented by OperatorClassifierMixin."""
        raise NotImplementedError

    def _scan_in_line(self) -> Token | None:
        """Scan the next lexeme of the current line.

        Returns:
            The matched token, or None after skipping whitespace or a
            trailing comment at end of input.

        Raises:
            UnexpectedCharacterError: If no rule matches.
        """
        cursor = self._cursor
        char = cursor.peek()
        if not char:
            return self._scan_end_of_input()

        if char == COMMENT_CHAR or self._at_line_break():
            return self._scan_line_end()

        if char in INLINE_WHITESPACE:
            self._skip_inline_whitespace()
            return None

        token = self._try_classify_string()
        if token is None:
            token = self._try_classify_compound_operator()
        if token is None:
            token = self._try_classify_word()
        if token is None:
            token = self._try_classify_number()
        if token is None:
            token = self._try_classify_operator()
        if token is None:
            self.fail(f"Unexpected character: {char}", UnexpectedCharacterError)
        return token

    def _at_line_break(self) -> bool:
        cursor = self._cursor
        char = cursor.peek()
        return char == "\n" or (char == "\r" and cursor.peek(1) == "\n")

    def _skip_inline_whitespace(self) -> None:
        """Consume spaces, tabs and stray carriage returns."""
        cursor = self._cursor
        char = cursor.advance()
        while char in INLINE_WHITESPACE:
            if char == "\r" and cursor.peek() == "\n":
                break
            char = cursor.advance()
        # The loop always reads one character too many
        if char:
            cursor.unconsume()

    def _scan_line_end(self) -> Token | None:
        """Consume an optional comment and the line break after it.

        Returns:
            NEWLINE located at the comment (or the break), or None when
            the comment runs to end of input.
        """
        cursor = self._cursor
        source = cursor.source
        start = cursor.position

        if cursor.peek() == COMMENT_CHAR:
            comment_end = source.find("\n", cursor.pos)
            if comment_end == -1:
                cursor.advance_to(len(source))
                return None
            if source[comment_end - 1] == "\r":
                comment_end -= 1
            cursor.advance_to(comment_end)

        break_start = cursor.pos
        if cursor.peek() == "\r":
            cursor.advance()
        cursor.advance()
        if cursor.peek() == "\r":
            cursor.advance()

        self._mode = LexerMode.LINE_START
        return self._make_token(TokenType.NEWLINE, None, source[break_start : cursor.pos], start)
