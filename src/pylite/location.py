"""Source location tracking for diagnostics.

Provides the SourceLocation dataclass attached to every token and every
lexical error.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Start position of a lexeme in a named source.

    All positions are 1-indexed. Columns account for tab stops, so a
    tab at column 1 moves the next character to column 9.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column number (1-indexed, tab-expanded)
        source_file: Name of the source (file path or "<input>")

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5, source_file="demo.pyl")
            >>> str(loc)
            'demo.pyl:3:5'

    """

    lineno: int
    col_offset: int
    source_file: str = "<input>"

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "demo.pyl:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.lineno

    @property
    def column(self) -> int:
        """Column number (convenience accessor)."""
        return self.col_offset
