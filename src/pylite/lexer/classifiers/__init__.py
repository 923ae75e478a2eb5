"""In-line lexeme classifiers for the pylite lexer.

Each classifier is a mixin that tries to match one family of lexemes
at the cursor. A classifier either consumes its match and returns a
Token, or leaves the cursor untouched and returns None.
"""

from pylite.lexer.classifiers.literal import (
    NumberClassifierMixin,
    StringClassifierMixin,
)
from pylite.lexer.classifiers.operator import (
    OperatorClassifierMixin,
)
from pylite.lexer.classifiers.word import (
    WordClassifierMixin,
)

__all__ = [
    "NumberClassifierMixin",
    "OperatorClassifierMixin",
    "StringClassifierMixin",
    "WordClassifierMixin",
]
