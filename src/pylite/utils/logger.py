"""Logging helpers for pylite.

Every pylite logger lives under the "pylite" namespace. The lexer logs at
DEBUG only: INDENT and DEDENT decisions in the layout scanners, the
end-of-input flush and EOF in the driver, and each fatal error just
before it is raised. Nothing is emitted above DEBUG, so an application
sees pylite output only after opting in:

Example:
    >>> import logging
    >>> logging.getLogger("pylite").setLevel(logging.DEBUG)
    >>> from pylite import tokenize
    >>> _ = tokenize("if a:\\n    b\\n")  # logs "INDENT to column 5 at line 2", ...
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the "pylite" namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("pylite.lexer.core").name
        'pylite.lexer.core'
        >>> get_logger("mymodule").name
        'pylite.mymodule'
    """
    if not (name == "pylite" or name.startswith("pylite.")):
        name = f"pylite.{name}"
    return logging.getLogger(name)
