"""Language dispatch.

Maps a language selector to its tokenizer. The PHP selector reuses the
markup tokenizer and the JS selector reuses the scripting tokenizer; the
aliases produce identical output.
"""

from __future__ import annotations

from collections.abc import Callable

from codetint.lexers import tokenize_markup, tokenize_script, tokenize_style
from codetint.renderers.html import HtmlRenderer
from codetint.tokens import Language, Span
from codetint.utils.logger import get_logger

logger = get_logger(__name__)

Tokenizer = Callable[[str], tuple[Span, ...]]

TOKENIZERS: dict[Language, Tokenizer] = {
    Language.HTML: tokenize_markup,
    Language.PHP: tokenize_markup,
    Language.CSS: tokenize_style,
    Language.JS: tokenize_script,
    Language.TS: tokenize_script,
}


def get_tokenizer(language: Language | str) -> Tokenizer:
    """Return the tokenizer for a language selector.

    Raises:
        UnknownLanguageError: If the selector is not recognized
    """
    return TOKENIZERS[Language.from_name(language)]


def tokenize(source: str, language: Language | str) -> tuple[Span, ...]:
    """Tokenize source text into spans.

    Args:
        source: Complete source buffer
        language: Language member, selector or alias

    Returns:
        Spans covering ``source`` end to end

    Raises:
        UnknownLanguageError: If the selector is not recognized
    """
    resolved = Language.from_name(language)
    logger.debug("Tokenizing %d chars as %s", len(source), resolved.value)
    return TOKENIZERS[resolved](source)


def annotate(
    source: str,
    language: Language | str,
    *,
    suffix: str | None = None,
    prefix: str | None = None,
) -> str:
    """Annotate source text with class-tagged token containers.

    Args:
        source: Complete source buffer
        language: Language member, selector or alias
        suffix: Scope suffix; defaults to the active HighlightConfig
        prefix: Class-name prefix; defaults to the active HighlightConfig

    Returns:
        HTML fragment where every token is wrapped in an element whose
        class is ``{prefix}_{namespace}_{kind}{suffix}``

    Raises:
        UnknownLanguageError: If the selector is not recognized

    Example:
        >>> annotate("<b>$x</b>", "php", suffix="_1")
        '<span class="hlc_html_operator_1">&lt;</span>...'
    """
    spans = tokenize(source, language)
    return HtmlRenderer(prefix=prefix, suffix=suffix).render(spans)
