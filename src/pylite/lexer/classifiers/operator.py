"""Operator and punctuation classifier mixin."""

from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.modes import INT_DIV_OPERATOR, SINGLE_CHAR_OPERATORS, TWO_CHAR_OPERATORS
from pylite.tokens import Token, TokenType


class OperatorClassifierMixin:
    """Mixin providing operator classification.

    Two-character operators are tried before keywords and names; the
    single-character group (which also holds "//") comes after numbers.

    """

    _cursor: Cursor

    def _make_token(
        self,
        token_type: TokenType,
        value: int | str | None,
        text: str,
        start: Position,
    ) -> Token:
        """Create token at start. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_compound_operator(self) -> Token | None:
        """Match +=, -=, <= or ==."""
        cursor = self._cursor
        pair = cursor.peek() + cursor.peek(1)
        token_type = TWO_CHAR_OPERATORS.get(pair)
        if token_type is None:
            return None

        start = cursor.position
        cursor.advance_to(cursor.pos + 2)
        return self._make_token(token_type, None, pair, start)

    def _try_classify_operator(self) -> Token | None:
        """Match a single-character operator or integer division."""
        cursor = self._cursor
        char = cursor.peek()

        if char + cursor.peek(1) == INT_DIV_OPERATOR:
            start = cursor.position
            cursor.advance_to(cursor.pos + 2)
            return self._make_token(TokenType.INT_DIV, None, INT_DIV_OPERATOR, start)

        token_type = SINGLE_CHAR_OPERATORS.get(char)
        if token_type is None:
            return None

        start = cursor.position
        cursor.advance()
        return self._make_token(token_type, None, char, start)
