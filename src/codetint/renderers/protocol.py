"""SpanRenderer protocol: the interface every span renderer implements.

Any renderer that implements ``render(spans) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from codetint.renderers.protocol import SpanRenderer

    def render_snippet(renderer: SpanRenderer, source: str) -> str:
        return renderer.render(tokenize(source, "css"))

"""

from typing import Protocol

from codetint.tokens import Span


class SpanRenderer(Protocol):
    """Protocol for span renderers.

    Implementations must accept a tuple of spans and return a rendered string.

    """

    def render(self, spans: tuple[Span, ...]) -> str:
        """Render a span stream to a string.

        Args:
            spans: Spans produced by a tokenizer.

        Returns:
            Rendered string output.

        """
        ...
