"""Utility modules for pylite.

Provides:
- logger: get_logger for logging
"""

from pylite.utils.logger import get_logger

__all__ = ["get_logger"]
