"""Tests for the markup tokenizer and its sub-language dispatch."""

import time

from codetint.lexers import markup
from codetint.tokens import MarkupToken, ScriptToken, Span, StyleToken, flatten_spans


def _tokens(source: str) -> list[tuple[str, object]]:
    return [(s.text, s.kind) for s in flatten_spans(markup.tokenize(source)) if s.kind is not None]


def _embedded(source: str) -> list[Span]:
    return [s for s in markup.tokenize(source) if s.children is not None]


class TestTags:
    def test_dynamic_variable_scenario(self) -> None:
        assert _tokens("<div>$name</div>") == [
            ("<", MarkupToken.OPERATOR),
            ("div", MarkupToken.TAG),
            (">", MarkupToken.OPERATOR),
            ("$name", MarkupToken.VARIABLE),
            ("</", MarkupToken.OPERATOR),
            ("div", MarkupToken.TAG),
            (">", MarkupToken.OPERATOR),
        ]

    def test_attributes_and_self_closing(self) -> None:
        tokens = _tokens('<img src="a.png" alt=\'x\'/>')
        assert tokens == [
            ("<", MarkupToken.OPERATOR),
            ("img", MarkupToken.TAG),
            ('"a.png"', MarkupToken.STRING),
            ("'x'", MarkupToken.STRING),
            ("/>", MarkupToken.OPERATOR),
        ]

    def test_doctype_and_processing_instruction(self) -> None:
        tokens = _tokens("<!DOCTYPE html>\n<?php echo strlen($s); ?>")
        assert ("!DOCTYPE", MarkupToken.TAG) in tokens
        assert ("?php", MarkupToken.TAG) in tokens
        assert ("?>", MarkupToken.OPERATOR) in tokens
        assert ("strlen", MarkupToken.FUNCTION) in tokens
        assert ("$s", MarkupToken.VARIABLE) in tokens

    def test_apostrophes_in_text_are_not_strings(self) -> None:
        tokens = _tokens("<p>it's Bob's</p>")
        assert not any(kind is MarkupToken.STRING for _, kind in tokens)

    def test_brackets_share_one_kind(self) -> None:
        tokens = _tokens("<p>{a} [b]</p>")
        brackets = [t for t, k in tokens if k is MarkupToken.PARENTHESES]
        assert brackets == ["{", "}", "[", "]"]


class TestComments:
    def test_markup_comment_hides_tags(self) -> None:
        tokens = _tokens("<!-- <b>x</b> --><i>")
        assert tokens[0] == ("<!-- <b>x</b> -->", MarkupToken.COMMENT)
        assert ("i", MarkupToken.TAG) in tokens
        assert ("b", MarkupToken.TAG) not in tokens

    def test_line_comment(self) -> None:
        tokens = _tokens("<?php\n// $hidden\n$shown ?>")
        assert ("// $hidden", MarkupToken.COMMENT) in tokens
        assert ("$shown", MarkupToken.VARIABLE) in tokens
        assert ("$hidden", MarkupToken.VARIABLE) not in tokens

    def test_url_in_attribute_is_not_a_comment(self) -> None:
        tokens = _tokens('<a href="https://x.org">')
        assert ('"https://x.org"', MarkupToken.STRING) in tokens

    def test_inline_style_comment(self) -> None:
        tokens = _tokens("<?php /* note */ $a ?>")
        assert ("/* note */", MarkupToken.STYLE_COMMENT) in tokens
        assert ("$a", MarkupToken.VARIABLE) in tokens

    def test_comment_marker_in_attribute_stays_in_string(self) -> None:
        tokens = _tokens('<p style="/* note */ color: red">')
        assert ('"/* note */ color: red"', MarkupToken.STRING) in tokens
        assert not any(kind is MarkupToken.STYLE_COMMENT for _, kind in tokens)

    def test_protocol_relative_url_is_not_a_comment(self) -> None:
        tokens = _tokens('<script src="//cdn.x.com/a.js"></script>')
        assert tokens == [
            ("<", MarkupToken.OPERATOR),
            ("script", MarkupToken.TAG),
            ('"//cdn.x.com/a.js"', MarkupToken.STRING),
            (">", MarkupToken.OPERATOR),
            ("</", MarkupToken.OPERATOR),
            ("script", MarkupToken.TAG),
            (">", MarkupToken.OPERATOR),
        ]


class TestStrings:
    def test_angle_bracket_inside_attribute_value(self) -> None:
        assert _tokens('<div title="a > b">x</div>') == [
            ("<", MarkupToken.OPERATOR),
            ("div", MarkupToken.TAG),
            ('"a > b"', MarkupToken.STRING),
            (">", MarkupToken.OPERATOR),
            ("</", MarkupToken.OPERATOR),
            ("div", MarkupToken.TAG),
            (">", MarkupToken.OPERATOR),
        ]

    def test_markup_inside_php_string(self) -> None:
        tokens = _tokens('<?php echo "<b>$x</b>"; ?>')
        assert ('"<b>$x</b>"', MarkupToken.STRING) in tokens
        assert [t for t, k in tokens if k is MarkupToken.TAG] == ["?php"]
        assert ("$x", MarkupToken.VARIABLE) not in tokens

    def test_close_marker_inside_php_string(self) -> None:
        tokens = _tokens("<?php $s = 'a ?> b'; ?><i>")
        assert ("'a ?> b'", MarkupToken.STRING) in tokens
        assert [t for t, k in tokens if k is MarkupToken.OPERATOR][-3:] == ["?>", "<", ">"]

    def test_apostrophe_in_php_comment(self) -> None:
        tokens = _tokens("<?php // don't\n$a ?><b title=\"x\">")
        assert ("// don't", MarkupToken.COMMENT) in tokens
        assert ("$a", MarkupToken.VARIABLE) in tokens
        assert ('"x"', MarkupToken.STRING) in tokens

    def test_quotes_in_script_body_open_no_region(self) -> None:
        source = '<script>if (a <b) { s = "x" }</script>'
        (block,) = _embedded(source)
        assert block.text == 'if (a <b) { s = "x" }'
        assert not any(kind is MarkupToken.STRING for _, kind in _tokens(source))

    def test_unclosed_comment_runs_to_end(self) -> None:
        tokens = _tokens("<b><!-- <i>")
        assert tokens[-1] == ("<!-- <i>", MarkupToken.COMMENT)

    def test_long_unclosed_input_is_linear(self) -> None:
        """Many unclosed openers should not crash or hang."""
        for source in ("<!-- a" * 10000, "<?php 'a" * 10000, '<a b="c' * 10000):
            start = time.perf_counter()
            spans = markup.tokenize(source)
            assert time.perf_counter() - start < 2.0
            assert "".join(s.text for s in flatten_spans(spans)) == source


class TestSubLanguages:
    def test_style_block_scenario(self) -> None:
        source = "<style>.a{color:#fff}</style>"
        (block,) = _embedded(source)
        assert block.text == ".a{color:#fff}"
        assert block.offset == 7
        assert block.children is not None
        inner = [(c.text, c.kind) for c in block.children if c.kind is not None]
        assert inner == [
            (".a", StyleToken.SELECTOR),
            ("{", StyleToken.BRACES),
            ("}", StyleToken.BRACES),
        ]
        tags = [t for t, k in _tokens(source) if k is MarkupToken.TAG]
        assert tags == ["style", "style"]

    def test_script_block(self) -> None:
        source = '<script type="module">\nclass A {}\nlet s = "</b>";\n</script>'
        (block,) = _embedded(source)
        assert block.children is not None
        inner = {(c.text, c.kind) for c in block.children}
        assert ("A", ScriptToken.CLASS) in inner
        assert ('"</b>"', ScriptToken.STRING) in inner
        assert ('"module"', MarkupToken.STRING) in _tokens(source)

    def test_child_offsets_are_absolute(self) -> None:
        source = "<p></p><script>x = 1</script>"
        (block,) = _embedded(source)
        assert block.children is not None
        for child in block.children:
            assert source[child.offset : child.end] == child.text

    def test_multiple_blocks_in_order(self) -> None:
        source = "<style>a{}</style><script>f()</script><style>b{}</style>"
        blocks = _embedded(source)
        assert [b.text for b in blocks] == ["a{}", "f()", "b{}"]

    def test_markup_rules_do_not_enter_blocks(self) -> None:
        source = "<script>if (a < b) {}</script>"
        operators = [t for t, k in _tokens(source) if k is MarkupToken.OPERATOR]
        assert operators == ["<", ">", "</", ">"]

    def test_unclosed_block_is_plain_markup(self) -> None:
        assert _embedded("<style>.a{}") == []

    def test_empty_block(self) -> None:
        assert _embedded("<script></script>") == []

    def test_spans_cover_source(self) -> None:
        source = "<html><style>p{}</style><script>let x;</script><!-- c --></html>"
        assert "".join(s.text for s in markup.tokenize(source)) == source
        assert "".join(s.text for s in flatten_spans(markup.tokenize(source))) == source
