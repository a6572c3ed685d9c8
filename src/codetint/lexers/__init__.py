"""Rule-table tokenizers for the supported languages.

Each module exposes ``tokenize(source) -> tuple[Span, ...]`` and the ordered
rule table it applies. Rules run in precedence order over a Scanner: string
literals, comments and embedded blocks claim their text first, so operators
and brackets are only ever tagged in the text that remains.

Architecture:
lexers/
├── __init__.py          # Re-exports the tokenize functions
├── style.py             # Stylesheet rules
├── script.py            # Scripting rules + class-name symbol table
└── markup.py            # Markup rules, dispatches <style>/<script> blocks

"""

from codetint.lexers.markup import tokenize as tokenize_markup
from codetint.lexers.script import tokenize as tokenize_script
from codetint.lexers.style import tokenize as tokenize_style

__all__ = ["tokenize_markup", "tokenize_script", "tokenize_style"]
