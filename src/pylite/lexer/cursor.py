"""Position tracking over the source text.

The cursor is the only component that moves through the source. Every
consumed character, whether part of indentation, a comment or a
literal, passes through advance_position so that reported columns are
exact.

Thread Safety:
Cursor instances belong to a single Lexer and are not shared.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Snapshot of the cursor's line and column (both 1-indexed)."""

    lineno: int
    col: int


def advance_position(lineno: int, col: int, char: str, tab_width: int = 8) -> tuple[int, int]:
    """Return the (lineno, col) reached after consuming one character.

    Newlines start a new line at column 1. Carriage returns are
    zero-width, which makes "\\r\\n" and "\\n\\r" a single line break.
    Tabs advance to the column after the next multiple of tab_width.

    Args:
        lineno: Current line number
        col: Current column
        char: The consumed character
        tab_width: Tab stop interval

    Returns:
        (lineno, col) after the character.
    """
    if char == "\n":
        return lineno + 1, 1
    if char == "\r":
        return lineno, col
    if char == "\t":
        return lineno, col + tab_width - ((col - 1) % tab_width)
    return lineno, col + 1


class Cursor:
    """Forward-only reader over the source with one character of pushback.

    Lookahead is done with peek(), which never moves the cursor. When a
    character has already been consumed and turns out to belong to the
    next lexeme, unconsume() puts it back. Only the most recent advance()
    can be undone.

    Usage:
            >>> cursor = Cursor("a\\tb")
            >>> cursor.advance(), cursor.advance()
            ('a', '\\t')
            >>> cursor.position
            Position(lineno=1, col=9)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_tab_width",
        "_pushback",  # (pos, lineno, col) before the last advance, or None
    )

    def __init__(self, source: str, tab_width: int = 8) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._tab_width = tab_width
        self._pushback: tuple[int, int, int] | None = None

    @property
    def source(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        """Absolute offset of the next unconsumed character."""
        return self._pos

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def tab_width(self) -> int:
        return self._tab_width

    @property
    def position(self) -> Position:
        return Position(self._lineno, self._col)

    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def peek(self, offset: int = 0) -> str:
        """Look at a character ahead without consuming it.

        Returns:
            The character, or empty string past the end of input.
        """
        idx = self._pos + offset
        if idx >= self._source_len:
            return ""
        return self._source[idx]

    def find_run_end(self, chars: frozenset[str], start: int | None = None) -> int:
        """Return the offset of the first character not in chars.

        Scanning starts at start (default: the cursor). Nothing is consumed.
        """
        idx = self._pos if start is None else start
        source = self._source
        source_len = self._source_len
        while idx < source_len and source[idx] in chars:
            idx += 1
        return idx

    def advance(self) -> str:
        """Consume one character and update line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pushback = (self._pos, self._lineno, self._col)
        self._pos += 1
        self._lineno, self._col = advance_position(
            self._lineno, self._col, char, self._tab_width
        )
        return char

    def advance_to(self, end: int) -> str:
        """Consume every character up to (not including) offset end.

        Returns:
            The consumed text.
        """
        start = self._pos
        while self._pos < end:
            self.advance()
        return self._source[start : self._pos]

    def unconsume(self) -> None:
        """Undo the most recent advance().

        Raises:
            RuntimeError: If there is nothing to undo.
        """
        if self._pushback is None:
            raise RuntimeError("unconsume() must follow an advance()")
        self._pos, self._lineno, self._col = self._pushback
        self._pushback = None
