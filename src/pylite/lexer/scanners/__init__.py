"""Mode-specific scanners for the pylite lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (LINE_START, DEDENT, IN_LINE).
"""

from __future__ import annotations

from pylite.lexer.scanners.dedent import DedentScannerMixin
from pylite.lexer.scanners.inline import InLineScannerMixin
from pylite.lexer.scanners.line_start import LineStartScannerMixin

__all__ = [
    "DedentScannerMixin",
    "InLineScannerMixin",
    "LineStartScannerMixin",
]
