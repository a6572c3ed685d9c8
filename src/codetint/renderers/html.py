"""HTML renderer using StringBuilder pattern.

Renders a span stream to an annotated HTML fragment in one linear pass.
Every tagged span becomes ``<span class="{prefix}_{kind}{suffix}">``; all
text, tagged or not, is HTML-escaped exactly once.

Thread Safety:
The renderer holds only immutable settings. Each render() call builds its
own StringBuilder, so one instance may be shared across threads.
"""

from __future__ import annotations

from codetint.config import HighlightConfig, get_highlight_config
from codetint.stringbuilder import StringBuilder
from codetint.tokens import Span, TokenKind, flatten_spans
from codetint.utils.text import escape_text


class HtmlRenderer:
    """Render spans to annotated HTML.

    Usage:
        >>> from codetint.lexers.style import tokenize
        >>> HtmlRenderer(suffix="_1").render(tokenize("a{}"))
        '<span class="hlc_css_selector_1">a</span><span class="hlc_css_braces_1">{</span>...'

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        prefix: str | None = None,
        suffix: str | None = None,
        tag: str | None = None,
        config: HighlightConfig | None = None,
    ) -> None:
        """Initialize renderer.

        Explicit arguments win over ``config``; ``config`` defaults to the
        active context configuration.

        Args:
            prefix: Class-name prefix
            suffix: Scope suffix appended to every class name
            tag: Container element name
            config: Base configuration
        """
        base = config if config is not None else get_highlight_config()
        self._config = HighlightConfig(
            prefix=base.prefix if prefix is None else prefix,
            suffix=base.suffix if suffix is None else suffix,
            tag=base.tag if tag is None else tag,
        )

    @property
    def config(self) -> HighlightConfig:
        return self._config

    def class_name(self, kind: TokenKind) -> str:
        """Full class name emitted for ``kind``."""
        return self._config.class_name(kind.value)

    def render(self, spans: tuple[Span, ...]) -> str:
        """Render spans to an HTML fragment.

        Args:
            spans: Spans from a tokenizer

        Returns:
            Annotated HTML
        """
        sb = StringBuilder()
        self._render_spans(spans, sb)
        return sb.build()

    def render_lines(self, spans: tuple[Span, ...]) -> list[str]:
        """Render spans as one HTML fragment per source line.

        Tokens spanning several lines (block comments, template literals)
        are closed at each line end and reopened on the next line, so every
        fragment is balanced on its own.

        Returns:
            One fragment per line; the newlines themselves are dropped
        """
        lines: list[StringBuilder] = [StringBuilder()]
        for leaf in flatten_spans(spans):
            pieces = leaf.text.split("\n")
            for i, piece in enumerate(pieces):
                if i:
                    lines.append(StringBuilder())
                self._render_leaf(piece, leaf.kind, lines[-1])
        return [sb.build() for sb in lines]

    def _render_spans(self, spans: tuple[Span, ...], sb: StringBuilder) -> None:
        for span in spans:
            if span.children is not None:
                self._render_spans(span.children, sb)
            else:
                self._render_leaf(span.text, span.kind, sb)

    def _render_leaf(self, text: str, kind: TokenKind | None, sb: StringBuilder) -> None:
        if not text:
            return
        if kind is None:
            sb.append(escape_text(text))
            return
        tag = self._config.tag
        sb.append(f'<{tag} class="{self.class_name(kind)}">')
        sb.append(escape_text(text))
        sb.append(f"</{tag}>")
