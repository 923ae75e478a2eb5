"""Keyword and identifier classifier mixin."""

from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.modes import IDENT_CHARS, IDENT_START_CHARS, KEYWORDS
from pylite.tokens import Token, TokenType


class WordClassifierMixin:
    """Mixin providing keyword and identifier classification."""

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

    def _try_classify_word(self) -> Token | None:
        """Try to match a keyword or identifier at the cursor.

        The whole word is read first and only then looked up, so "iffy"
        is a NAME rather than IF followed by NAME("fy").

        Returns:
            Keyword token, NAME token, or None.
        """
        cursor = self._cursor
        if cursor.peek() not in IDENT_START_CHARS:
            return None

        start = cursor.position
        chars: list[str] = []
        char = cursor.advance()
        while char in IDENT_CHARS:
            chars.append(char)
            char = cursor.advance()
        # Read one past the word; hand it back
        if char:
            cursor.unconsume()

        word = "".join(chars)
        keyword = KEYWORDS.get(word)
        if keyword is not None:
            return self._make_token(keyword, None, word, start)
        return self._make_token(TokenType.NAME, word, word, start)
