"""Markup tokenizer (HTML, and HTML with ``$variables`` for PHP templates).

Rule order:
1. ``<style>`` block contents, tokenized by the stylesheet tokenizer
2. ``<script>`` block contents, tokenized by the scripting tokenizer
3. Inside ``<?php ... ?>`` blocks: strings and comments, in one leftmost pass
4. Inside tags: quoted attribute values
5. Comments: ``<!-- -->`` and ``//`` line comments
6. ``/* */`` block comments
7. Tag names after ``<`` or ``</``
8. Dynamic variables (``$name``)
9. Operator glyphs ``</``, ``/>``, ``?>``, ``<``, ``>``
10. Strings in text, function calls, then bracket/brace/parenthesis characters

Steps 3 and 4 are limited to the regions found by a single leftmost scan
for comments, PHP blocks and tags, so an attribute value such as
``title="a > b"`` or ``src="//cdn"`` stays one string token, and a tag
written inside a comment or a PHP string opens no region.

Embedded blocks are looked up one level deep only: the sub-tokenizers
never dispatch back into markup, so recursion always terminates.

"""

from __future__ import annotations

import re

from codetint.lexers import script, style
from codetint.protection import Rule, Scanner, Windows, rule
from codetint.tokens import MarkupToken, Span

STYLE_BLOCK = re.compile(r"<style\b[^>]*>([\s\S]*?)</style\s*>", re.IGNORECASE)
SCRIPT_BLOCK = re.compile(r"<script\b[^>]*>([\s\S]*?)</script\s*>", re.IGNORECASE)

_STRING = (
    r'"(?:[^"\\\n]|\\[\s\S])*"'
    r"|'(?:[^'\\\n]|\\[\s\S])*'"
    r"|`(?:[^`\\\n]|\\[\s\S])*`"
)
_LINE_COMMENT = r"(?<!:)//[^\n]*"
_BLOCK_COMMENT = r"/\*[\s\S]*?(?:\*/|\Z)"

# Quoted text is skipped whole, so "?>" in a PHP string or ">" in an
# attribute value does not end the region. Style and script bodies are
# skipped; only their opening tag is kept.
REGIONS = re.compile(
    r"(?P<comment><!--[\s\S]*?(?:-->|\Z))"
    r"|(?P<php><\?(?:php\b|=)?"
    r"(?:[^?\"']|\?(?!>)|\"(?:[^\"\\]|\\[\s\S])*\"|'(?:[^'\\]|\\[\s\S])*'|[\"'])*"
    r"(?:\?>|\Z))"
    r"|(?P<raw><(?P<raw_name>style|script)\b[^>]*>)[\s\S]*?</(?P=raw_name)\s*>"
    r"|(?P<tag></?[A-Za-z][^<>\"']*(?:(?:\"[^\"\n]*\"|'[^'\n]*')[^<>\"']*)*)",
    re.IGNORECASE,
)

PHP_LITERALS = re.compile(
    rf"(?P<string>(?<!\w)(?:{_STRING}))"
    rf"|(?P<comment>{_LINE_COMMENT})"
    rf"|(?P<block>{_BLOCK_COMMENT})"
)
PHP_LITERAL_KINDS: dict[str, MarkupToken] = {
    "string": MarkupToken.STRING,
    "comment": MarkupToken.COMMENT,
    "block": MarkupToken.STYLE_COMMENT,
}
ATTRIBUTE_STRING = rule(r"\"[^\"\n]*\"|'[^'\n]*'", MarkupToken.STRING)

COMMENT = rule(r"<!--[\s\S]*?(?:-->|\Z)|" + _LINE_COMMENT, MarkupToken.COMMENT)
STYLE_COMMENT = rule(_BLOCK_COMMENT, MarkupToken.STYLE_COMMENT)
TAG = rule(r"(?:(?<=<)|(?<=</))[A-Za-z!?][^\s<>/]*", MarkupToken.TAG)
VARIABLE = rule(r"\$[A-Za-z_]\w*", MarkupToken.VARIABLE)
OPERATOR = rule(r"</|/>|\?>|[<>]", MarkupToken.OPERATOR)
# A quote right after a word character is an apostrophe, not a string
STRING = rule(rf"(?<!\w)(?:{_STRING})", MarkupToken.STRING)
FUNCTION = rule(r"(?<![\w$])[A-Za-z_]\w*(?=\s*\()", MarkupToken.FUNCTION)
PARENTHESES = rule(r"[()\[\]{}]", MarkupToken.PARENTHESES)

RULES: tuple[Rule, ...] = (
    COMMENT,
    STYLE_COMMENT,
    TAG,
    VARIABLE,
    OPERATOR,
    STRING,
    FUNCTION,
    PARENTHESES,
)


def regions(source: str) -> tuple[Windows, Windows]:
    """Locate PHP blocks and tags.

    Returns:
        ``(php, tags)`` windows, each sorted and non-overlapping
    """
    php: list[tuple[int, int]] = []
    tags: list[tuple[int, int]] = []
    for match in REGIONS.finditer(source):
        kind = match.lastgroup
        if kind == "php":
            php.append(match.span())
        elif kind == "tag":
            tags.append(match.span())
        elif kind == "raw":
            tags.append(match.span("raw"))
    return php, tags


def tokenize(source: str) -> tuple[Span, ...]:
    """Tokenize markup text, dispatching embedded style and script blocks.

    Args:
        source: Markup source

    Returns:
        Spans covering ``source`` end to end. Block contents appear as
        embedded spans whose children come from the sub-tokenizer.
    """
    scanner = Scanner(source)
    scanner.embed(STYLE_BLOCK, style.tokenize, group=1)
    scanner.embed(SCRIPT_BLOCK, script.tokenize, group=1)

    php, tags = regions(source)
    scanner.protect_first(PHP_LITERALS, PHP_LITERAL_KINDS, windows=php)
    scanner.apply(ATTRIBUTE_STRING, windows=tags)

    for entry in RULES:
        scanner.apply(entry)
    return scanner.spans
