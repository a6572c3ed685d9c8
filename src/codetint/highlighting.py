"""High-level highlighter combining tokenizers, renderer and theme.

A Highlighter owns one scope suffix, so every fragment it produces uses
class names that cannot collide with another instance on the same page,
and ``stylesheet()`` emits the matching theme rules.

The ``highlight()`` method follows the Highlighter protocol used by
Markdown renderers (``highlight(code, language, hl_lines, show_linenos)``
plus ``supports_language``), so an instance can be plugged into patitas.

Usage:
    from codetint import Highlighter

    hl = Highlighter(theme="light")
    fragment = hl("const x: number = 1;", "ts")
    page = f"<style>{hl.stylesheet('ts')}</style><pre>{fragment}</pre>"

    # Optional Markdown integration (pip install codetint[markdown])
    from codetint.highlighting import install_markdown_highlighter
    install_markdown_highlighter(hl)
"""

from __future__ import annotations

from codetint.config import HighlightConfig, new_scope_suffix
from codetint.dispatch import tokenize
from codetint.errors import UnknownLanguageError
from codetint.renderers.html import HtmlRenderer
from codetint.stringbuilder import StringBuilder
from codetint.theme import Theme, render_stylesheet, resolve_theme
from codetint.tokens import Language
from codetint.utils.logger import get_logger
from codetint.utils.text import escape_text

logger = get_logger(__name__)

# Theme tables applied for each language; markup pulls in the tables of
# the languages it embeds
STYLESHEET_NAMESPACES: dict[Language, tuple[str, ...]] = {
    Language.HTML: ("ts", "css", "html"),
    Language.PHP: ("html",),
    Language.CSS: ("css",),
    Language.JS: ("ts", "html"),
    Language.TS: ("ts", "html"),
}


class Highlighter:
    """Syntax highlighter for markup, stylesheet and scripting snippets.

    Usage:
        >>> hl = Highlighter(suffix="_demo")
        >>> hl(".a { color: red; }", "css")
        '<span class="hlc_css_selector_demo">.a</span> ...'

    Thread Safety:
        Holds only immutable state after construction. Safe to share.

    """

    __slots__ = ("_config", "_renderer", "_theme")

    def __init__(
        self,
        theme: str | Theme | None = "dark",
        *,
        prefix: str = "hlc",
        suffix: str | None = None,
    ) -> None:
        """Initialize highlighter.

        Args:
            theme: Preset name ("dark" or "light") or a partial theme mapping
            prefix: Class-name prefix
            suffix: Scope suffix; a unique one is generated when omitted
        """
        self._config = HighlightConfig(
            prefix=prefix,
            suffix=new_scope_suffix() if suffix is None else suffix,
        )
        self._renderer = HtmlRenderer(config=self._config)
        self._theme = resolve_theme(theme)

    @property
    def suffix(self) -> str:
        return self._config.suffix

    @property
    def prefix(self) -> str:
        return self._config.prefix

    def __call__(self, code: str, language: Language | str) -> str:
        """Annotate code and return the HTML fragment.

        Raises:
            UnknownLanguageError: If the language is not supported
        """
        return self._renderer.render(tokenize(code, language))

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code as a complete ``<pre>`` block.

        Unsupported languages fall back to escaped plain text instead of
        raising.

        Args:
            code: Source code to highlight
            language: Language selector or alias
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output

        Returns:
            HTML markup with highlighting
        """
        config = self._config
        pre_open = f'<pre class="{config.prefix}_container{config.suffix}">'
        try:
            spans = tokenize(code, language)
        except UnknownLanguageError:
            logger.debug("No tokenizer for %r, rendering plain text", language)
            return f"{pre_open}{escape_text(code)}</pre>"

        if not hl_lines and not show_linenos:
            return f"{pre_open}{self._renderer.render(spans)}</pre>"

        emphasized = set(hl_lines or ())
        line_class = f"{config.prefix}_line{config.suffix}"
        hl_class = f"{config.prefix}_hl{config.suffix}"
        lineno_class = f"{config.prefix}_lineno{config.suffix}"

        rendered: list[str] = []
        for number, fragment in enumerate(self._renderer.render_lines(spans), start=1):
            sb = StringBuilder()
            if number in emphasized:
                sb.append(f'<span class="{line_class} {hl_class}">')
            else:
                sb.append(f'<span class="{line_class}">')
            if show_linenos:
                sb.append(f'<span class="{lineno_class}">{number}</span>')
            sb.append(fragment)
            sb.append("</span>")
            rendered.append(sb.build())
        return pre_open + "\n".join(rendered) + "</pre>"

    def supports_language(self, language: str) -> bool:
        """Check if a language selector or alias is supported."""
        try:
            Language.from_name(language)
        except UnknownLanguageError:
            return False
        return True

    def stylesheet(self, language: Language | str | None = None) -> str:
        """CSS rules styling this instance's fragments.

        Args:
            language: Emit only the tables used by this language; all
                tables when omitted

        Returns:
            CSS text
        """
        if language is None:
            namespaces: tuple[str, ...] = ("html", "ts", "css")
        else:
            namespaces = STYLESHEET_NAMESPACES[Language.from_name(language)]
        return render_stylesheet(
            self._theme,
            prefix=self._config.prefix,
            suffix=self._config.suffix,
            namespaces=namespaces,
        )


def install_markdown_highlighter(highlighter: Highlighter | None = None) -> bool:
    """Register a Highlighter for fenced code blocks in patitas.

    Args:
        highlighter: Instance to register; a dark-themed one when omitted

    Returns:
        True if patitas is installed and the highlighter was registered
    """
    try:
        from patitas.highlighting import set_highlighter  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("patitas is not installed; Markdown highlighting unavailable")
        return False

    set_highlighter(highlighter if highlighter is not None else Highlighter())
    return True
