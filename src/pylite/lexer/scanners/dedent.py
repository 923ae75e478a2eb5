"""Dedent-resolution mode scanner mixin."""

from typing import NoReturn

from pylite.errors import IndentationMismatchError, LexError
from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.indent import IndentStack, indent_column
from pylite.lexer.modes import INDENT_CHARS, LexerMode
from pylite.tokens import Token, TokenType
from pylite.utils.logger import get_logger

logger = get_logger(__name__)


class DedentScannerMixin:
    """Mixin providing dedent mode scanning logic.

    A line can close several blocks at once, but the lexer returns one
    token per call. This mode pops one level per call until the stack
    top equals the pending line's indentation.

    """

    # These will be set by the Lexer class
    _cursor: Cursor
    _mode: LexerMode
    _indent_stack: IndentStack

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

    def _scan_dedent(self) -> Token | None:
        """Resolve one step of a dedent.

        The cursor sits at the start of the pending line, before its
        indentation, until the dedent is fully resolved.

        Returns:
            DEDENT while levels remain to close, None once resolved.

        Raises:
            IndentationMismatchError: If the indentation falls between two
                open levels.
        """
        cursor = self._cursor
        run_end = cursor.find_run_end(INDENT_CHARS)
        target = indent_column(cursor.source[cursor.pos : run_end], cursor.tab_width)
        top = self._indent_stack.top

        if top < target:
            self.fail("Bad indentation.", IndentationMismatchError)

        if top > target:
            self._indent_stack.pop()
            logger.debug("DEDENT from column %d at line %d", top, cursor.lineno)
            return self._make_token(TokenType.DEDENT, None, "", cursor.position)

        cursor.advance_to(run_end)
        self._mode = LexerMode.IN_LINE
        return None
