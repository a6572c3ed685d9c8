"""Tests for the scripting tokenizer."""

import time

from codetint.lexers import script
from codetint.protection import Scanner
from codetint.tokens import ScriptToken, Span


def _tokens(source: str) -> list[tuple[str, ScriptToken]]:
    return [(s.text, s.kind) for s in script.tokenize(source) if s.kind is not None]


def _kinds_of(source: str, text: str) -> list[ScriptToken]:
    return [kind for t, kind in _tokens(source) if t == text]


class TestClassNames:
    """Declaration scan and symbol-table use sites."""

    def test_declaration_scenario(self) -> None:
        tokens = _tokens("class Foo { constructor(){} }")
        assert tokens == [
            ("class", ScriptToken.KEYWORD),
            ("Foo", ScriptToken.CLASS),
            ("{", ScriptToken.BRACES),
            ("constructor", ScriptToken.FUNCTION),
            ("(", ScriptToken.PARENTHESES),
            (")", ScriptToken.PARENTHESES),
            ("{", ScriptToken.BRACES),
            ("}", ScriptToken.BRACES),
            ("}", ScriptToken.BRACES),
        ]

    def test_use_sites_tagged_like_declaration(self) -> None:
        source = "const a = new Foo();\nclass Foo {}\nlet b: Foo = Foo.create();"
        assert _kinds_of(source, "Foo") == [ScriptToken.CLASS] * 4

    def test_use_site_beats_function_rule(self) -> None:
        # Foo( would otherwise be a function call
        assert _kinds_of("class Foo {}\nFoo()", "Foo") == [ScriptToken.CLASS, ScriptToken.CLASS]

    def test_whole_words_only(self) -> None:
        tokens = _tokens("class Foo {}\nFooBar; myFoo; $Foo")
        assert ("FooBar", ScriptToken.CLASS) not in tokens
        assert [t for t, k in tokens if k is ScriptToken.CLASS] == ["Foo"]

    def test_names_in_strings_and_comments_untouched(self) -> None:
        source = 'class Foo {}\n"Foo" // Foo'
        tokens = _tokens(source)
        assert ('"Foo"', ScriptToken.STRING) in tokens
        assert ("// Foo", ScriptToken.COMMENT) in tokens

    def test_class_in_string_is_not_a_declaration(self) -> None:
        scanner = Scanner('"class Foo" Foo')
        scanner.protect_first(script.LITERALS, script.LITERAL_KINDS)
        assert script.declared_names(scanner) == {}
        assert _kinds_of('"class Foo" Foo', "Foo") == []

    def test_declared_names_symbol_table(self) -> None:
        scanner = Scanner("class A {}\nclass B extends A {}")
        assert script.declared_names(scanner) == {
            "A": ScriptToken.CLASS,
            "B": ScriptToken.CLASS,
        }

    def test_extends_target_tagged_when_declared(self) -> None:
        source = "class A {}\nclass B extends A {}"
        assert _kinds_of(source, "A") == [ScriptToken.CLASS, ScriptToken.CLASS]
        assert _kinds_of(source, "extends") == [ScriptToken.KEYWORD]

    def test_anonymous_class_declares_nothing(self) -> None:
        source = "const A = class extends B {};\nclass C extends D {}"
        assert _kinds_of(source, "extends") == [ScriptToken.KEYWORD, ScriptToken.KEYWORD]
        assert _kinds_of(source, "C") == [ScriptToken.CLASS]
        assert _kinds_of(source, "B") == []
        assert script.declared_names(Scanner(source)) == {"C": ScriptToken.CLASS}


class TestLiteralsAndComments:
    def test_string_protects_glyphs(self) -> None:
        assert _tokens('"a { b } (c) < d"') == [('"a { b } (c) < d"', ScriptToken.STRING)]

    def test_single_and_template_strings(self) -> None:
        tokens = _tokens("f('x', `a\n${b}`)")
        assert ("'x'", ScriptToken.STRING) in tokens
        assert ("`a\n${b}`", ScriptToken.STRING) in tokens

    def test_escaped_quote_stays_in_string(self) -> None:
        assert _tokens(r'"a\"b"') == [(r'"a\"b"', ScriptToken.STRING)]

    def test_unterminated_string_left_plain(self) -> None:
        spans = script.tokenize('"abc')
        assert all(s.kind is not ScriptToken.STRING for s in spans)

    def test_line_and_block_comments(self) -> None:
        tokens = _tokens("a; // x < y\n/* if (z) */ b")
        assert ("// x < y", ScriptToken.COMMENT) in tokens
        assert ("/* if (z) */", ScriptToken.COMMENT) in tokens
        assert all(kind is ScriptToken.COMMENT for _, kind in tokens)

    def test_comment_marker_inside_string(self) -> None:
        tokens = _tokens('url = "http://example.com";')
        assert ('"http://example.com"', ScriptToken.STRING) in tokens
        assert not any(kind is ScriptToken.COMMENT for _, kind in tokens)


class TestTagging:
    def test_keywords(self) -> None:
        tokens = _tokens("if (x) { return y; } else { throw e; }")
        keywords = [t for t, k in tokens if k is ScriptToken.KEYWORD]
        assert keywords == ["if", "return", "else", "throw"]

    def test_keyword_inside_identifier_not_tagged(self) -> None:
        assert _kinds_of("iffy; $in; format", "if") == []
        assert not any(k is ScriptToken.KEYWORD for _, k in _tokens("iffy; $in; format"))

    def test_type_annotations(self) -> None:
        tokens = _tokens("let n: number = 1;\nfunction f(s: string): void {}")
        types = [t for t, k in tokens if k is ScriptToken.TYPE]
        assert types == ["number", "string", "void"]

    def test_type_names_without_colon_are_plain(self) -> None:
        assert _kinds_of("number", "number") == []

    def test_operators(self) -> None:
        tokens = _tokens("a <= b && !c")
        ops = [t for t, k in tokens if k is ScriptToken.OPERATOR]
        assert ops == ["<", "=", "&", "&", "!"]

    def test_builtin_globals(self) -> None:
        tokens = _tokens("x instanceof Map; Math.max(1, 2); JSON")
        assert ("Map", ScriptToken.CLASS) in tokens
        assert ("Math", ScriptToken.CLASS) in tokens
        assert ("JSON", ScriptToken.CLASS) in tokens
        assert ("max", ScriptToken.FUNCTION) in tokens

    def test_function_calls(self) -> None:
        tokens = _tokens("foo(1); obj.bar (2);")
        assert ("foo", ScriptToken.FUNCTION) in tokens
        assert ("bar", ScriptToken.FUNCTION) in tokens

    def test_numbers(self) -> None:
        tokens = _tokens("x = 42 + 3.5 - a1")
        numbers = [t for t, k in tokens if k is ScriptToken.NUMBER]
        assert numbers == ["42", "3.5"]

    def test_brackets(self) -> None:
        tokens = _tokens("a[0]")
        assert ("[", ScriptToken.BRACKETS) in tokens
        assert ("]", ScriptToken.BRACKETS) in tokens


class TestCoverage:
    def test_spans_cover_source(self) -> None:
        source = "class A { m(x: number) { return `${x}` + 'y'; } } // end"
        spans = script.tokenize(source)
        assert "".join(s.text for s in spans) == source
        offsets = [s.offset for s in spans]
        assert offsets == sorted(offsets)

    def test_empty_source(self) -> None:
        assert script.tokenize("") == ()

    def test_returns_spans(self) -> None:
        assert all(isinstance(s, Span) for s in script.tokenize("let a = 1;"))

    def test_many_unclosed_comments_should_not_hang(self) -> None:
        source = "x /* a" * 10000
        start = time.perf_counter()
        spans = script.tokenize(source)
        assert time.perf_counter() - start < 2.0
        assert spans[-1].kind is ScriptToken.COMMENT
        assert spans[-1].text == source[2:]
