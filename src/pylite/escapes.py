"""Default string-escape decoder.

The lexer treats escape decoding as a collaborator: it hands the raw
interior of a string literal to ``LexConfig.unescape`` and stores the
result as the token payload. This module provides the default.
"""

from __future__ import annotations

# Backslash escapes understood by the default decoder
ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def unescape(raw: str) -> str:
    """Decode backslash escapes in a string literal body.

    Unknown escapes and a trailing lone backslash are kept as written,
    so this never raises.

    Args:
        raw: Literal interior, without the surrounding quotes

    Returns:
        Decoded string.

    Example:
        >>> unescape(r"a\\tb")
        'a\\tb'
    """
    if "\\" not in raw:
        return raw

    result: list[str] = []
    pos = 0
    raw_len = len(raw)
    while pos < raw_len:
        char = raw[pos]
        if char == "\\" and pos + 1 < raw_len:
            escaped = raw[pos + 1]
            if escaped in ESCAPES:
                result.append(ESCAPES[escaped])
            else:
                result.append(char + escaped)
            pos += 2
            continue
        result.append(char)
        pos += 1
    return "".join(result)


__all__ = ["ESCAPES", "unescape"]
