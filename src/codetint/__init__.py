"""
codetint: syntax annotation for markup, stylesheet and scripting snippets

Wraps every lexical token of a snippet in a class-tagged element so a
stylesheet can colour it. Markup dispatches embedded <style> and <script>
blocks to the stylesheet and scripting tokenizers.

Quick Start:
    >>> from codetint import annotate
    >>> annotate("<b>$name</b>", "php", suffix="_1")
    '<span class="hlc_html_operator_1">&lt;</span><span class="hlc_html_tag_1">b</span>...'

    >>> # Or use the high-level Highlighter class
    >>> from codetint import Highlighter
    >>> hl = Highlighter(theme="light")
    >>> fragment = hl("class Foo {}", "ts")
    >>> css = hl.stylesheet("ts")

Installation:
    pip install codetint              # Core tokenizers (zero deps)
    pip install codetint[markdown]    # + patitas fenced-code integration
"""

from codetint.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    new_scope_suffix,
    reset_highlight_config,
    set_highlight_config,
)
from codetint.dispatch import annotate, get_tokenizer, tokenize
from codetint.errors import (
    CodetintError,
    PlaceholderMismatchError,
    ThemeError,
    UnknownLanguageError,
)
from codetint.highlighting import Highlighter, install_markdown_highlighter
from codetint.protection import Extraction, Rule, Scanner, extract, restore
from codetint.renderers.html import HtmlRenderer
from codetint.renderers.protocol import SpanRenderer
from codetint.theme import DARK_THEME, LIGHT_THEME, RECOGNIZED_OPTIONS, render_stylesheet
from codetint.tokens import Language, MarkupToken, ScriptToken, Span, StyleToken

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "annotate",
    "tokenize",
    "get_tokenizer",
    # High-level
    "Highlighter",
    "install_markdown_highlighter",
    # Tokens
    "Language",
    "MarkupToken",
    "ScriptToken",
    "Span",
    "StyleToken",
    # Placeholder protection
    "Extraction",
    "Rule",
    "Scanner",
    "extract",
    "restore",
    # Renderer
    "HtmlRenderer",
    "SpanRenderer",
    # Theme
    "DARK_THEME",
    "LIGHT_THEME",
    "RECOGNIZED_OPTIONS",
    "render_stylesheet",
    # Configuration (ContextVar-based)
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
    "new_scope_suffix",
    # Errors
    "CodetintError",
    "PlaceholderMismatchError",
    "ThemeError",
    "UnknownLanguageError",
]
