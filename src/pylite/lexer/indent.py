"""Indentation levels and the indent stack.

The stack holds the indentation column of every open block, bottom to
top, starting with the base level 1. INDENT and DEDENT tokens are
decided by comparing a line's indentation column with the top.
"""

from __future__ import annotations

from collections.abc import Iterator

BASE_LEVEL = 1


def indent_column(run: str, tab_width: int = 8) -> int:
    """Column that a run of leading whitespace advances to.

    Spaces count 1, tabs round up to the next multiple of tab_width,
    carriage returns count 0.

    Args:
        run: Leading whitespace of a line
        tab_width: Tab stop interval

    Returns:
        1-based indentation column.

    Example:
        >>> indent_column("    ")
        5
        >>> indent_column("   \\t")
        9
    """
    total = 0
    for char in run:
        if char == " ":
            total += 1
        elif char == "\t":
            total += tab_width - (total % tab_width)
    return total + 1


class IndentStack:
    """Strictly increasing stack of indentation columns.

    Never empty: the base level stays at the bottom for the whole
    session. Only the lexer's scanners push and pop.
    """

    __slots__ = ("_levels",)

    def __init__(self) -> None:
        self._levels: list[int] = [BASE_LEVEL]

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[int]:
        return iter(self._levels)

    def __contains__(self, level: object) -> bool:
        return level in self._levels

    def __repr__(self) -> str:
        return f"IndentStack({self._levels!r})"

    @property
    def top(self) -> int:
        """Indentation column of the innermost open block."""
        return self._levels[-1]

    @property
    def depth(self) -> int:
        """Number of open blocks above the base level."""
        return len(self._levels) - 1

    @property
    def levels(self) -> tuple[int, ...]:
        return tuple(self._levels)

    def push(self, level: int) -> None:
        """Open a block at level.

        Raises:
            ValueError: If level does not exceed the current top.
        """
        if level <= self._levels[-1]:
            raise ValueError(
                f"indent level {level} must exceed current level {self._levels[-1]}"
            )
        self._levels.append(level)

    def pop(self) -> int:
        """Close the innermost block and return its level.

        Raises:
            IndexError: If only the base level is left.
        """
        if len(self._levels) == 1:
            raise IndexError("cannot pop the base indentation level")
        return self._levels.pop()
