"""Line-start mode scanner mixin."""

from pylite.lexer.cursor import Cursor, Position
from pylite.lexer.indent import IndentStack, indent_column
from pylite.lexer.modes import COMMENT_CHAR, INDENT_CHARS, LexerMode
from pylite.tokens import Token, TokenType
from pylite.utils.logger import get_logger

logger = get_logger(__name__)


class LineStartScannerMixin:
    """Mixin providing line-start mode scanning logic.

    Measures the indentation of each logical line and decides between
    staying in the current block, opening a new one, or handing over to
    DEDENT mode. Blank and comment-only lines are dropped here.

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

    def _scan_end_of_input(self) -> Token:
        """Close open blocks, then emit EOF. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_line_start(self) -> Token | None:
        """Scan the indentation of the line at the cursor.

        Returns:
            INDENT when the line opens a block, a DEDENT or EOF at end of
            input, otherwise None after switching mode.
        """
        cursor = self._cursor
        if cursor.at_end():
            return self._scan_end_of_input()

        run_end = cursor.find_run_end(INDENT_CHARS)
        following = cursor.peek(run_end - cursor.pos)
        if following in ("", "\n", COMMENT_CHAR):
            self._skip_blank_line()
            return None

        run = cursor.source[cursor.pos : run_end]
        level = indent_column(run, cursor.tab_width)
        last = self._indent_stack.top

        if level == last:
            cursor.advance_to(run_end)
            self._mode = LexerMode.IN_LINE
            return None

        if level > last:
            start = cursor.position
            cursor.advance_to(run_end)
            self._indent_stack.push(level)
            self._mode = LexerMode.IN_LINE
            logger.debug("INDENT to column %d at line %d", level, start.lineno)
            return self._make_token(TokenType.INDENT, None, "", start)

        # Leave the run in place; DEDENT mode re-reads it on every call
        self._mode = LexerMode.DEDENT
        return None

    def _skip_blank_line(self) -> None:
        """Consume a whitespace or comment-only line, line break included."""
        cursor = self._cursor
        source = cursor.source
        newline = source.find("\n", cursor.pos)
        if newline == -1:
            cursor.advance_to(len(source))
            return

        cursor.advance_to(newline + 1)
        if cursor.peek() == "\r":
            cursor.advance()
