"""Text processing utilities for codetint.

Example:
    >>> from codetint.utils.text import escape_text
    >>> escape_text("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module
import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def escape_text(text: str) -> str:
    """Escape text content for embedding between HTML tags.

    Converts ``&``, ``<`` and ``>`` to entities. Quotes are left alone:
    annotated text is element content, never an attribute value, and
    ``html.unescape`` restores the original exactly.

    Args:
        text: Raw source text

    Returns:
        Escaped text

    Examples:
        >>> escape_text("<b>&</b>")
        '&lt;b&gt;&amp;&lt;/b&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False)


def camel_to_kebab(name: str) -> str:
    """Convert a camelCase style property to its CSS spelling.

    Examples:
        >>> camel_to_kebab("backgroundColor")
        'background-color'
        >>> camel_to_kebab("color")
        'color'
    """
    return _CAMEL_BOUNDARY.sub("-", name).lower()
