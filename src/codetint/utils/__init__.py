"""Utility modules for codetint.

Provides:
- text: escape_text, camel_to_kebab for text processing
- logger: get_logger for logging
"""

from codetint.utils.logger import get_logger
from codetint.utils.text import camel_to_kebab, escape_text

__all__ = [
    "camel_to_kebab",
    "escape_text",
    "get_logger",
]
