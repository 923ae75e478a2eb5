"""String and integer literal classifier mixins."""

from typing import NoReturn

from pylite.config import LexConfig
from pylite.errors import IntegerOverflowError, LexError
from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.modes import DIGITS, QUOTE_CHARS, STRING_STOP_CHARS
from pylite.tokens import Token, TokenType


class StringClassifierMixin:
    """Mixin providing string literal classification."""

    _cursor: Cursor
    _config: LexConfig

    def _make_token(
        self,
        token_type: TokenType,
        value: int | str | None,
        text: str,
        start: Position,
    ) -> Token:
        """Create token at start. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_string(self) -> Token | None:
        """Try to match a quoted string literal at the cursor.

        The body may not contain the opening quote, a newline, a carriage
        return or a tab. A literal that breaks these rules, or never
        closes, is not matched; the caller reports the quote as an
        unexpected character.

        Returns:
            STRING token with the unescaped body, or None.
        """
        cursor = self._cursor
        quote = cursor.peek()
        if quote not in QUOTE_CHARS:
            return None

        source = cursor.source
        source_len = len(source)
        idx = cursor.pos + 1
        while idx < source_len and source[idx] != quote and source[idx] not in STRING_STOP_CHARS:
            idx += 1
        if idx >= source_len or source[idx] != quote:
            return None

        start = cursor.position
        text = cursor.advance_to(idx + 1)
        value = self._config.unescape(text[1:-1])
        return self._make_token(TokenType.STRING, value, text, start)


class NumberClassifierMixin:
    """Mixin providing integer literal classification."""

    _cursor: Cursor
    _config: LexConfig

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

    def _try_classify_number(self) -> Token | None:
        """Try to match an integer literal at the cursor.

        A literal is "0" or a non-zero digit followed by digits, so "007"
        lexes as NUMBER(0), NUMBER(0), NUMBER(7).

        Returns:
            NUMBER token with the int value, or None.

        Raises:
            IntegerOverflowError: If the value exceeds max_int.
        """
        cursor = self._cursor
        first = cursor.peek()
        if first not in DIGITS:
            return None

        if first == "0":
            end = cursor.pos + 1
        else:
            end = cursor.find_run_end(DIGITS)

        text = cursor.source[cursor.pos : end]
        try:
            value = int(text)
        except ValueError:
            # Digit strings past the interpreter's conversion limit
            value = None
        if value is None or value > self._config.max_int:
            self.fail(f"Integer literal out of range: {text}", IntegerOverflowError)

        start = cursor.position
        cursor.advance_to(end)
        return self._make_token(TokenType.NUMBER, value, text, start)
