"""codetint renderers.

Renderers convert span streams into output formats.

Available Renderers:
- HtmlRenderer: Wraps tokens in class-tagged elements using StringBuilder

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from codetint.renderers.html import HtmlRenderer
from codetint.renderers.protocol import SpanRenderer

__all__ = ["HtmlRenderer", "SpanRenderer"]
