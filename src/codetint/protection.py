"""Placeholder protection over a span stream.

Tokenizers apply an ordered table of rules to one buffer. Each rule claims
the regions it matches, and later rules only ever see text that no earlier
rule claimed. This is what keeps a ``{`` inside a string literal from being
tagged as a brace.

Instead of rewriting the buffer with sentinel markers, the Scanner keeps a
list of Span objects over the original text. A claimed region becomes a
tagged span; unclaimed regions stay plain. Patterns always run against the
original buffer (bounded with ``pos``/``endpos``), so lookbehind sees real
context and no marker can collide with the input.

The string-level ``extract``/``restore`` pair provides the same protection
for callers that need to rewrite text around opaque substrings.

Thread Safety:
Scanner instances are single-use. Create one per source string.
``extract`` and ``restore`` are pure functions.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from codetint.errors import PlaceholderMismatchError
from codetint.tokens import Span, TokenKind

# Sorted, non-overlapping (start, end) ranges a pass is limited to
Windows = Sequence[tuple[int, int]]


@dataclass(frozen=True, slots=True)
class Rule:
    """One entry of a tokenizer's rule table.

    Attributes:
        pattern: Compiled pattern scanned left to right over plain text
        kind: Token kind assigned to each match
        group: Capture group to tag; text around it stays plain

    """

    pattern: re.Pattern[str]
    kind: TokenKind
    group: int = 0


def rule(pattern: str, kind: TokenKind, *, group: int = 0, flags: int = 0) -> Rule:
    """Compile a Rule from a pattern string."""
    return Rule(re.compile(pattern, flags), kind, group)


class Scanner:
    """Span stream for one buffer.

    Usage:
        >>> scanner = Scanner('x = "{"')
        >>> scanner.protect(re.compile(r'"[^"]*"'), ScriptToken.STRING)
        [Span(ts_string, '"{"', @4)]
        >>> scanner.protect(re.compile(r"[{}]"), ScriptToken.BRACES)
        []

    """

    __slots__ = ("_source", "_spans")

    def __init__(self, source: str) -> None:
        """Initialize with the whole buffer as a single plain span.

        Args:
            source: Source text to tokenize
        """
        self._source = source
        self._spans: list[Span] = [Span(0, source)] if source else []

    @property
    def source(self) -> str:
        return self._source

    @property
    def spans(self) -> tuple[Span, ...]:
        """Current spans, covering the buffer end to end."""
        return tuple(self._spans)

    def apply(self, entry: Rule, *, windows: Windows | None = None) -> list[Span]:
        """Apply one rule table entry."""
        return self.protect(entry.pattern, entry.kind, group=entry.group, windows=windows)

    def protect(
        self,
        pattern: re.Pattern[str],
        kind: TokenKind,
        *,
        group: int = 0,
        windows: Windows | None = None,
    ) -> list[Span]:
        """Tag every match of ``pattern`` inside plain spans.

        Args:
            pattern: Compiled pattern
            kind: Token kind for the matched text
            group: Capture group to tag (0 = whole match)
            windows: Sorted, non-overlapping ``(start, end)`` ranges to scan;
                the whole buffer when omitted

        Returns:
            Newly tagged spans in left-to-right order
        """

        def make(match: re.Match[str]) -> Span | None:
            start, end = match.span(group)
            if start < 0:
                return None
            return Span(start, match.string[start:end], kind)

        return self._claim(pattern, make, windows)

    def protect_first(
        self,
        pattern: re.Pattern[str],
        kinds: Mapping[str, TokenKind],
        *,
        windows: Windows | None = None,
    ) -> list[Span]:
        """Tag the leftmost of several competing constructs in one pass.

        ``pattern`` is an alternation of named groups. Whichever group
        matched decides the kind, and only that group's text is tagged.
        Strings and comments go through here together, so a quote inside a
        comment and a comment marker inside a string both stay put.

        Args:
            pattern: Alternation whose only capturing groups are named
            kinds: Token kind for each group name
            windows: Ranges to scan; the whole buffer when omitted

        Returns:
            Newly tagged spans in left-to-right order

        Example:
            >>> literals = re.compile(r'(?P<string>"[^"]*")|(?P<comment>//.*)')
            >>> kinds = {"string": ScriptToken.STRING, "comment": ScriptToken.COMMENT}
            >>> Scanner('"//" // "x"').protect_first(literals, kinds)
            [Span(ts_string, '"//"', @0), Span(ts_comment, '// "x"', @5)]
        """

        def make(match: re.Match[str]) -> Span | None:
            name = match.lastgroup
            if name is None:
                return None
            start, end = match.span(name)
            return Span(start, match.string[start:end], kinds[name])

        return self._claim(pattern, make, windows)

    def protect_names(
        self, pattern: re.Pattern[str], symbols: Mapping[str, TokenKind]
    ) -> list[Span]:
        """Tag matches whose text is a key of ``symbols``.

        Used for names discovered in an earlier pass: ``pattern`` finds
        candidate identifiers and the symbol table decides which of them
        are tokens, and of what kind.

        Returns:
            Newly tagged spans in left-to-right order
        """
        if not symbols:
            return []

        def make(match: re.Match[str]) -> Span | None:
            kind = symbols.get(match.group())
            if kind is None:
                return None
            return Span(match.start(), match.group(), kind)

        return self._claim(pattern, make)

    def embed(
        self,
        pattern: re.Pattern[str],
        tokenize: Callable[[str], tuple[Span, ...]],
        *,
        group: int = 0,
    ) -> list[Span]:
        """Replace matches with regions tokenized by a sub-language.

        Args:
            pattern: Compiled pattern locating the embedded block
            tokenize: Tokenizer for the block contents
            group: Capture group holding the block contents

        Returns:
            Embedded spans in left-to-right order
        """

        def make(match: re.Match[str]) -> Span | None:
            start, end = match.span(group)
            if start == end:
                return None
            text = match.string[start:end]
            children = tuple(child.shifted(start) for child in tokenize(text))
            return Span(start, text, None, children)

        return self._claim(pattern, make)

    def _claim(
        self,
        pattern: re.Pattern[str],
        make: Callable[[re.Match[str]], Span | None],
        windows: Windows | None = None,
    ) -> list[Span]:
        source = self._source
        if windows is None:
            windows = ((0, len(source)),)
        claimed: list[Span] = []
        result: list[Span] = []
        first = 0
        for span in self._spans:
            if not span.is_plain:
                result.append(span)
                continue
            # Spans and windows are both sorted
            while first < len(windows) and windows[first][1] <= span.offset:
                first += 1
            cursor = span.offset
            index = first
            while index < len(windows) and windows[index][0] < span.end:
                low = max(span.offset, windows[index][0])
                high = min(span.end, windows[index][1])
                for match in pattern.finditer(source, low, high):
                    token = make(match)
                    if token is None or not token.text:
                        continue
                    if token.offset > cursor:
                        result.append(Span(cursor, source[cursor : token.offset]))
                    result.append(token)
                    claimed.append(token)
                    cursor = token.end
                index += 1
            if cursor < span.end:
                result.append(Span(cursor, source[cursor : span.end]))
        self._spans = result
        return claimed


class Extraction(NamedTuple):
    """Result of ``extract``.

    Attributes:
        text: Input with every match replaced by ``marker``
        matches: Extracted substrings in left-to-right order
        marker: The sentinel used, guaranteed absent from the input

    """

    text: str
    matches: list[str]
    marker: str


_MARKER_TEMPLATE = "\ue000{}\ue001"


def _free_marker(text: str) -> str:
    # Private-use code points; bump the counter until the marker is unused
    n = 0
    marker = _MARKER_TEMPLATE.format(n)
    while marker in text:
        n += 1
        marker = _MARKER_TEMPLATE.format(n)
    return marker


def extract(text: str, pattern: re.Pattern[str] | str, marker: str | None = None) -> Extraction:
    """Replace every match of ``pattern`` with one marker.

    Matching is global, left to right and non-overlapping, as with
    ``re.sub``.

    Args:
        text: Text to rewrite
        pattern: Pattern (compiled or string) to extract
        marker: Sentinel to use; generated when omitted

    Returns:
        Extraction holding the rewritten text, the matches and the marker

    Raises:
        ValueError: If a caller-supplied marker occurs in ``text``

    Example:
        >>> ex = extract("a 'b' c 'd'", r"'[^']*'")
        >>> ex.matches
        ["'b'", "'d'"]
    """
    if marker is None:
        marker = _free_marker(text)
    elif not marker or marker in text:
        raise ValueError(f"Marker {marker!r} is empty or occurs in the text")
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    matches: list[str] = []

    def stash(match: re.Match[str]) -> str:
        matches.append(match.group())
        return marker

    return Extraction(compiled.sub(stash, text), matches, marker)


def restore(
    text: str,
    marker: str,
    matches: list[str],
    wrap: Callable[[str], str] | None = None,
) -> str:
    """Re-insert extracted substrings in place of their markers.

    The i-th marker occurrence receives ``matches[i]``, passed through
    ``wrap`` when given.

    Raises:
        PlaceholderMismatchError: If the marker count differs from
            ``len(matches)``
    """
    parts = text.split(marker)
    found = len(parts) - 1
    if found != len(matches):
        raise PlaceholderMismatchError(len(matches), found)
    if not matches:
        return text
    out = [parts[0]]
    for value, tail in zip(matches, parts[1:]):
        out.append(wrap(value) if wrap is not None else value)
        out.append(tail)
    return "".join(out)


__all__ = [
    "Extraction",
    "Rule",
    "Scanner",
    "Windows",
    "extract",
    "restore",
    "rule",
]
