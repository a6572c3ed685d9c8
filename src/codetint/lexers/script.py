"""Scripting tokenizer (JavaScript / TypeScript).

Rule order:
1. String literals and comments, in one leftmost pass so neither can start
   inside the other (quoted strings end at the line; template literals and
   block comments may span lines; an unclosed block comment runs to the end
   of the buffer)
2. Operator glyphs ``< > * = & + - % ! |``
3. Class declarations: the name after ``class`` is tagged and recorded,
   unless it is a keyword (``class extends Base {}`` declares nothing)
4. Every later whole-word use of a recorded name
5. The ``class`` keyword
6. Type annotations, keywords, function calls, built-in globals, numbers,
   then parentheses, brackets and braces

Class names are handled in two passes because a use site can only be
recognized once the declaration has been seen. The declaration pass fills
a symbol table (name -> token kind); the use-site pass consults it for
every identifier left in the buffer.

"""

from __future__ import annotations

import re

from codetint.protection import Rule, Scanner, rule
from codetint.tokens import ScriptToken, Span
from codetint.utils.logger import get_logger

logger = get_logger(__name__)

KEYWORDS = (
    "as",
    "function",
    "return",
    "let",
    "const",
    "var",
    "if",
    "else",
    "for",
    "while",
    "do",
    "switch",
    "case",
    "break",
    "default",
    "throw",
    "try",
    "catch",
    "finally",
    "new",
    "extends",
    "this",
    "import",
    "export",
    "from",
    "super",
    "typeof",
    "instanceof",
    "void",
    "yield",
    "async",
    "await",
    "delete",
    "in",
    "of",
    "with",
    "debugger",
    "continue",
    "enum",
    "implements",
    "interface",
    "public",
    "private",
    "protected",
    "abstract",
    "readonly",
    "static",
    "namespace",
    "declare",
    "keyof",
    "infer",
)

BUILTIN_TYPES = (
    "Array",
    "String",
    "Number",
    "Boolean",
    "Object",
    "Function",
    "Symbol",
    "Date",
    "RegExp",
    "Promise",
    "Set",
    "Map",
    "WeakSet",
    "WeakMap",
    "Error",
    "TypeError",
    "SyntaxError",
    "ReferenceError",
    "RangeError",
    "EvalError",
    "URIError",
    "Math",
    "JSON",
)

PRIMITIVE_TYPES = (
    "any",
    "boolean",
    "number",
    "string",
    "symbol",
    "undefined",
    "null",
    "object",
    "true",
    "false",
    "unknown",
    "never",
    "void",
)


def _words(words: tuple[str, ...]) -> str:
    # Identifiers may contain "$", so \b is not a safe boundary
    return r"(?<![\w$])(?:" + "|".join(words) + r")(?![\w$])"


LITERALS = re.compile(
    r'(?P<string>"(?:[^"\\\n]|\\[\s\S])*"'
    r"|'(?:[^'\\\n]|\\[\s\S])*'"
    r"|`(?:[^`\\]|\\[\s\S])*`)"
    r"|(?P<comment>//[^\n]*|/\*[\s\S]*?(?:\*/|\Z))"
)
LITERAL_KINDS: dict[str, ScriptToken] = {
    "string": ScriptToken.STRING,
    "comment": ScriptToken.COMMENT,
}
OPERATOR = rule(r"[<>*=&+\-%!|]", ScriptToken.OPERATOR)
CLASS_DECLARATION = rule(
    r"(?<![\w$])class\s+(?!" + _words(KEYWORDS) + r")([A-Za-z_$][\w$]*)",
    ScriptToken.CLASS,
    group=1,
)
IDENTIFIER = re.compile(r"(?<![\w$])[A-Za-z_$][\w$]*(?![\w$])")
CLASS_KEYWORD = rule(_words(("class",)), ScriptToken.KEYWORD)

TYPE = rule(r":\s*(" + "|".join(PRIMITIVE_TYPES) + r")(?![\w$])", ScriptToken.TYPE, group=1)
KEYWORD = rule(_words(KEYWORDS), ScriptToken.KEYWORD)
FUNCTION = rule(r"(?<![\w$])[A-Za-z_$][\w$]*(?=\s*\()", ScriptToken.FUNCTION)
BUILTIN = rule(_words(BUILTIN_TYPES), ScriptToken.CLASS)
NUMBER = rule(r"(?<![\w$.])\d+(?:\.\d+)?(?![\w$])", ScriptToken.NUMBER)
PARENTHESES = rule(r"[()]", ScriptToken.PARENTHESES)
BRACKETS = rule(r"[\[\]]", ScriptToken.BRACKETS)
BRACES = rule(r"[{}]", ScriptToken.BRACES)

# Rules after the class keyword
TAGGING_RULES: tuple[Rule, ...] = (
    TYPE,
    KEYWORD,
    FUNCTION,
    BUILTIN,
    NUMBER,
    PARENTHESES,
    BRACKETS,
    BRACES,
)


def declared_names(scanner: Scanner) -> dict[str, ScriptToken]:
    """Tag class declarations and return the resulting symbol table."""
    symbols: dict[str, ScriptToken] = {}
    for span in scanner.apply(CLASS_DECLARATION):
        symbols.setdefault(span.text, ScriptToken.CLASS)
    if symbols:
        logger.debug("Discovered class names: %s", ", ".join(symbols))
    return symbols


def tokenize(source: str) -> tuple[Span, ...]:
    """Tokenize scripting-language text.

    Args:
        source: Script source

    Returns:
        Spans covering ``source`` end to end
    """
    scanner = Scanner(source)
    scanner.protect_first(LITERALS, LITERAL_KINDS)
    scanner.apply(OPERATOR)

    symbols = declared_names(scanner)
    scanner.protect_names(IDENTIFIER, symbols)
    scanner.apply(CLASS_KEYWORD)

    for entry in TAGGING_RULES:
        scanner.apply(entry)
    return scanner.spans
