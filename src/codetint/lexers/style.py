"""Stylesheet tokenizer.

Rule order:
1. One leftmost pass over the competing constructs: comments (``/* */``
   and ``//`` line comments not part of a URL scheme), declaration values
   (after ``property:`` up to ``;``) and string literals
2. Selectors: line start up to the next ``{``
3. Function-call identifiers, numbers, then parentheses/brackets/braces

Step 1 protects its text, so later steps never tag inside a comment,
string or value. A value is anchored at the start of its declaration, so
each line is scanned once no matter how many colons it holds, and quoted
strings inside a value stay part of it.

"""

from __future__ import annotations

import re

from codetint.protection import Rule, Scanner, rule
from codetint.tokens import Span, StyleToken

_BLOCK_COMMENT = r"/\*[\s\S]*?(?:\*/|\Z)"
_COMMENT = _BLOCK_COMMENT + r"|(?<!:)//[^\n]*"
_STRING = r'"(?:[^"\\\n]|\\[\s\S])*"|\'(?:[^\'\\\n]|\\[\s\S])*\''
# Declaration start: line start, after "{" or ";", or after a block comment
_DECLARATION = r"(?:^|(?<=[{;])|(?<=\*/))[^\S\n]*-{0,2}[A-Za-z_][\w-]*[^\S\n]*:"
_CLOSED_COMMENT = r"/\*(?:[^*]|\*(?!/))*\*/"
_VALUE_TEXT = rf"(?:[^;{{}}\n\"'/]|/(?!\*)|{_STRING}|{_CLOSED_COMMENT})+"

LITERALS = re.compile(
    rf"(?P<comment>{_COMMENT})"
    rf"|{_DECLARATION}(?P<value>{_VALUE_TEXT})(?=;)"
    rf"|(?P<string>{_STRING})",
    re.MULTILINE,
)
LITERAL_KINDS: dict[str, StyleToken] = {
    "comment": StyleToken.COMMENT,
    "value": StyleToken.VALUE,
    "string": StyleToken.STRING,
}

# Leading indentation and trailing whitespace stay plain
SELECTOR = rule(
    r"(?:^|(?<=\*/))[^\S\n]*([^\s{};][^{};\n]*?)(?=\s*\{)",
    StyleToken.SELECTOR,
    group=1,
    flags=re.MULTILINE,
)
FUNCTION = rule(r"-?[A-Za-z_][\w-]*(?=\s*\()", StyleToken.FUNCTION)
NUMBER = rule(r"(?<![\w#.-])\d+(?:\.\d+)?", StyleToken.NUMBER)
PARENTHESES = rule(r"[()]", StyleToken.PARENTHESES)
BRACKETS = rule(r"[\[\]]", StyleToken.BRACKETS)
BRACES = rule(r"[{}]", StyleToken.BRACES)

RULES: tuple[Rule, ...] = (
    SELECTOR,
    FUNCTION,
    NUMBER,
    PARENTHESES,
    BRACKETS,
    BRACES,
)


def tokenize(source: str) -> tuple[Span, ...]:
    """Tokenize stylesheet text.

    Args:
        source: Stylesheet source

    Returns:
        Spans covering ``source`` end to end

    Example:
        >>> [s.kind for s in tokenize(".btn { color: red; }") if s.kind]
        [<StyleToken.SELECTOR: 'css_selector'>, <StyleToken.BRACES: 'css_braces'>, ...]
    """
    scanner = Scanner(source)
    scanner.protect_first(LITERALS, LITERAL_KINDS)
    for entry in RULES:
        scanner.apply(entry)
    return scanner.spans
