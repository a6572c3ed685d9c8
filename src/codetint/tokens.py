"""Language, token kind and Span definitions.

A tokenizer turns one source buffer into a tuple of Span objects covering
the buffer end to end. Each span is plain text, a tagged token, or an
embedded region holding the spans of a sub-language.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.
Language and the token kind enums are inherently immutable.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from codetint.errors import UnknownLanguageError


class Language(Enum):
    """Supported input languages.

    The value is the canonical selector accepted by the dispatcher.
    PHP is an alias of HTML and JS is an alias of TS.

    """

    HTML = "html"  # markup
    PHP = "php"  # markup with dynamic variables
    CSS = "css"  # stylesheet
    JS = "js"  # scripting
    TS = "ts"  # typed scripting

    @classmethod
    def from_name(cls, name: Language | str) -> Language:
        """Resolve a selector, enum name or alias to a Language.

        Args:
            name: A Language member or a case-insensitive selector string

        Returns:
            The matching Language

        Raises:
            UnknownLanguageError: If the selector is not recognized

        Example:
            >>> Language.from_name("TypeScript")
            <Language.TS: 'ts'>
        """
        if isinstance(name, Language):
            return name
        if not isinstance(name, str):
            raise UnknownLanguageError(name)
        key = name.strip().lower()
        try:
            return cls(key)
        except ValueError:
            pass
        language = LANGUAGE_ALIASES.get(key)
        if language is None:
            raise UnknownLanguageError(name)
        return language


LANGUAGE_ALIASES: dict[str, Language] = {
    "markup": Language.HTML,
    "htm": Language.HTML,
    "xhtml": Language.HTML,
    "xml": Language.HTML,
    "phtml": Language.PHP,
    "stylesheet": Language.CSS,
    "scss": Language.CSS,
    "less": Language.CSS,
    "javascript": Language.JS,
    "mjs": Language.JS,
    "jsx": Language.JS,
    "scripting": Language.JS,
    "typescript": Language.TS,
    "tsx": Language.TS,
}


class ScriptToken(Enum):
    """Token kinds produced by the scripting tokenizer."""

    KEYWORD = "ts_keyword"
    FUNCTION = "ts_function"
    CLASS = "ts_class"
    TYPE = "ts_type"
    STRING = "ts_string"
    NUMBER = "ts_number"
    COMMENT = "ts_comment"
    OPERATOR = "ts_operator"
    PARENTHESES = "ts_parentheses"
    BRACKETS = "ts_brackets"
    BRACES = "ts_braces"

    @property
    def theme_key(self) -> str:
        return _theme_key(self)


class StyleToken(Enum):
    """Token kinds produced by the style tokenizer."""

    FUNCTION = "css_function"
    STRING = "css_string"
    NUMBER = "css_number"
    COMMENT = "css_comment"
    PARENTHESES = "css_parentheses"
    BRACKETS = "css_brackets"
    BRACES = "css_braces"
    SELECTOR = "css_selector"
    VALUE = "css_value"

    @property
    def theme_key(self) -> str:
        return _theme_key(self)


class MarkupToken(Enum):
    """Token kinds produced by the markup tokenizer.

    Dynamic variables render in the ``php`` namespace and block comments
    from inline style attributes in the ``css`` namespace, so they share
    classes with the matching theme tables.

    """

    STRING = "html_string"
    FUNCTION = "html_function"
    PARENTHESES = "html_parentheses"
    OPERATOR = "html_operator"
    TAG = "html_tag"
    COMMENT = "html_comment"
    VARIABLE = "php_variable"
    STYLE_COMMENT = "css_comment"

    @property
    def theme_key(self) -> str:
        return _theme_key(self)


TokenKind = ScriptToken | StyleToken | MarkupToken

# Theme keys that differ from the class fragment
_THEME_KEY_OVERRIDES: dict[TokenKind, str] = {
    MarkupToken.TAG: "tagName",
    MarkupToken.VARIABLE: "php_variable",
}


def _theme_key(kind: TokenKind) -> str:
    override = _THEME_KEY_OVERRIDES.get(kind)
    if override is not None:
        return override
    return kind.value.split("_", 1)[1]


def theme_namespace(kind: TokenKind) -> str:
    """Return the theme table a kind is styled from (``html``, ``ts`` or ``css``).

    Dynamic variables live in the ``html`` table under ``php_variable``.
    """
    if kind is MarkupToken.VARIABLE:
        return "html"
    return kind.value.split("_", 1)[0]


@dataclass(frozen=True, slots=True)
class Span:
    """A contiguous region of a source buffer.

    Attributes:
        offset: Absolute start position in the outermost buffer
        text: The raw source text of the region
        kind: Token kind, or None for plain text and embedded regions
        children: Spans of an embedded sub-language, or None

    """

    offset: int
    text: str
    kind: TokenKind | None = None
    children: tuple[Span, ...] | None = None

    @property
    def end(self) -> int:
        """Absolute end position (exclusive)."""
        return self.offset + len(self.text)

    @property
    def is_plain(self) -> bool:
        """True for untagged text that later rules may still claim."""
        return self.kind is None and self.children is None

    def shifted(self, delta: int) -> Span:
        """Return a copy moved ``delta`` characters to the right, children included."""
        children = None
        if self.children is not None:
            children = tuple(child.shifted(delta) for child in self.children)
        return Span(self.offset + delta, self.text, self.kind, children)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        if self.children is not None:
            return f"Span(embedded, {val!r}, @{self.offset}, {len(self.children)} children)"
        name = self.kind.value if self.kind is not None else "plain"
        return f"Span({name}, {val!r}, @{self.offset})"


def flatten_spans(spans: tuple[Span, ...]) -> list[Span]:
    """Flatten embedded regions into one left-to-right list of leaf spans."""
    leaves: list[Span] = []
    for span in spans:
        if span.children is not None:
            leaves.extend(flatten_spans(span.children))
        else:
            leaves.append(span)
    return leaves
