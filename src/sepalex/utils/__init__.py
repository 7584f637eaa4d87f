"""Utility modules for sepalex.

Provides:
- logger: get_logger for logging
- text: byte offsets for error reporting
"""

from sepalex.utils.logger import get_logger
from sepalex.utils.text import ASCII_WHITESPACE, byte_offset

__all__ = [
    "ASCII_WHITESPACE",
    "byte_offset",
    "get_logger",
]
